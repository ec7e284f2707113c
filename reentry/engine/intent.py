"""
Command Parser for Reentry.

Splits a line of player input into a verb and a noun phrase.
There is no grammar beyond that: "look at the table" looks for
something labelled "at the table".
"""

from __future__ import annotations

from reentry.engine.models import Command, CommandType

VERBS: dict[str, CommandType] = {
    "ask": CommandType.ASK,
    "drop": CommandType.DROP,
    "get": CommandType.GET,
    "take": CommandType.GET,
    "give": CommandType.GIVE,
    "go": CommandType.GO,
    "inventory": CommandType.INVENTORY,
    "inv": CommandType.INVENTORY,
    "i": CommandType.INVENTORY,
    "look": CommandType.LOOK,
    "l": CommandType.LOOK,
    "quit": CommandType.QUIT,
    "q": CommandType.QUIT,
    "help": CommandType.HELP,
}


def parse_command(player_input: str) -> Command:
    """
    Parse a line of input into a Command.

    Args:
        player_input: Raw text from the player

    Returns:
        Command with a lowercase noun; unknown verbs keep the
        trimmed original input for echoing back
    """
    original = player_input.strip()
    words = player_input.lower().split()
    verb = words[0] if words else ""
    noun = " ".join(words[1:])

    command_type = VERBS.get(verb, CommandType.UNKNOWN)
    return Command(type=command_type, noun=noun, original_input=original)
