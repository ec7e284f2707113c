"""
Game content for Reentry.

Provides pre-built worlds for immediate gameplay.
"""

from reentry.content.starter_world import INTRO_TEXT, load_starter_world, starter_world_text

__all__ = [
    "INTRO_TEXT",
    "load_starter_world",
    "starter_world_text",
]
