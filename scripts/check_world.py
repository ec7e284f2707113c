#!/usr/bin/env python3
"""
World file check script.

Usage:
    python scripts/check_world.py                      # Check the bundled world
    python scripts/check_world.py world.yaml           # Check a world file
    python scripts/check_world.py world.yaml --normalize out.yaml
"""

from __future__ import annotations

import argparse
import os
import sys

# Add the project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def check_world(path: str | None) -> bool:
    """Load a world file and report what is in it."""
    from reentry.content import load_starter_world
    from reentry.db import WorldLoadError, load_world
    from reentry.models import PLAYER

    print(f"Checking {path or 'bundled world'}...")

    try:
        store = load_world(path) if path else load_starter_world()
    except (OSError, WorldLoadError) as e:
        print(f"  Error - {e}")
        return False

    rooms = [entity for entity in store if entity.location is None]
    passages = [entity for entity in store if entity.is_passage()]
    actors = [entity for entity in store if entity.is_actor()]

    print(f"  Entities: {len(store)}")
    print(f"  Rooms:    {len(rooms)}")
    print(f"  Passages: {len(passages)}")
    print(f"  Actors:   {len(actors)}")

    player = store[PLAYER]
    if player.location is None:
        print(f"  Warning - player '{player.canonical_label}' is not in any room")
    return True


def normalize_world(path: str | None, output: str) -> bool:
    """Rewrite a world file with defaults removed."""
    from reentry.content import load_starter_world
    from reentry.db import WorldLoadError, load_world, save_world

    try:
        store = load_world(path) if path else load_starter_world()
        save_world(store, output)
    except (OSError, WorldLoadError) as e:
        print(f"  Normalize error: {e}")
        return False

    print(f"  Normalized world written to {output}")
    return True


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Check a Reentry world file")
    parser.add_argument("world", nargs="?", default=None, help="World file to check")
    parser.add_argument("--normalize", metavar="OUTPUT", help="Write a normalized copy")
    args = parser.parse_args()

    print("Reentry World Check")
    print("=" * 40)

    world_ok = check_world(args.world)

    if args.normalize and world_ok:
        print()
        world_ok = normalize_world(args.world, args.normalize)

    print()
    print("Summary")
    print("=" * 40)
    print(f"  World: {'OK' if world_ok else 'FAILED'}")

    return 0 if world_ok else 1


if __name__ == "__main__":
    sys.exit(main())
