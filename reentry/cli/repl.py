"""
Interactive REPL for Reentry.

Provides a text-based interface for playing the game.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from reentry.content import INTRO_TEXT, load_starter_world
from reentry.db.codec import WorldLoadError, load_world
from reentry.db.memory import EntityStore
from reentry.engine import EngineConfig, GameEngine
from reentry.engine.models import LOG_LEVELS

logger = logging.getLogger(__name__)


class GameREPL:
    """
    Interactive REPL for playing Reentry.

    Reads one line per turn, hands it to the engine, and prints the
    narration verbatim.
    """

    def __init__(
        self,
        engine: GameEngine,
        *,
        prompt: str = "> ",
        input_func: Callable[[str], str] | None = None,
        output_func: Callable[[str], None] | None = None,
    ) -> None:
        self.engine = engine
        self.prompt = prompt
        self._input = input_func or input
        self._output = output_func or print
        self.running = True

    def step(self, user_input: str) -> str:
        """Process one line and return the narration."""
        result = self.engine.process(user_input)
        if result.quit:
            self.running = False
        return result.narrative

    def run(self) -> None:
        """Run the interactive loop until quit or end of input."""
        self._output(INTRO_TEXT)
        self._output(self.engine.look("around"))

        while self.running:
            try:
                user_input = self._input(self.prompt).strip()
            except (KeyboardInterrupt, EOFError):
                self._output("")
                break

            if not user_input:
                continue

            self._output("")
            self._output(self.step(user_input))

        self._output("Bye!")


def load_configured_world(config: EngineConfig) -> EntityStore:
    """Load the configured world file, or the bundled one."""
    if config.world_file is None:
        return load_starter_world()
    return load_world(config.world_file)


def run_game(config: EngineConfig) -> int:
    """
    Run the Reentry game.

    Returns:
        Process exit status
    """
    try:
        store = load_configured_world(config)
    except (OSError, WorldLoadError) as e:
        logger.error("Failed to load world: %s", e)
        print(f"ERROR - {e}")
        return 1

    repl = GameREPL(GameEngine(store), prompt=config.prompt)
    repl.run()
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Reentry: a space adventure")
    parser.add_argument(
        "--world",
        type=Path,
        default=None,
        help="World file to play (default: the bundled ship)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Logging level",
    )

    args = parser.parse_args(argv)
    config = EngineConfig.from_env()
    if args.world is not None:
        config.world_file = args.world
    if args.log_level is not None:
        config.log_level = args.log_level

    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_game(config)


if __name__ == "__main__":
    sys.exit(main())
