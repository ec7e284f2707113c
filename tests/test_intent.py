"""Tests for the command parser."""

from __future__ import annotations

import pytest

from reentry.engine import CommandType, parse_command


class TestParseCommand:
    """Tests for parse_command()."""

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("ask pen", CommandType.ASK),
            ("drop bag", CommandType.DROP),
            ("get photo", CommandType.GET),
            ("take photo", CommandType.GET),
            ("give coin", CommandType.GIVE),
            ("go aft", CommandType.GO),
            ("inventory", CommandType.INVENTORY),
            ("i", CommandType.INVENTORY),
            ("look", CommandType.LOOK),
            ("l table", CommandType.LOOK),
            ("quit", CommandType.QUIT),
            ("help", CommandType.HELP),
        ],
    )
    def test_verbs(self, line, expected):
        assert parse_command(line).type == expected

    def test_noun_is_lowercase_and_single_spaced(self):
        command = parse_command("  LOOK   Glossy\tPhoto  ")
        assert command.type == CommandType.LOOK
        assert command.noun == "glossy photo"

    def test_verb_only(self):
        command = parse_command("look")
        assert command.noun == ""

    def test_unknown_keeps_original_input(self):
        command = parse_command("  Dance  Wildly \n")
        assert command.type == CommandType.UNKNOWN
        assert command.original_input == "Dance  Wildly"

    def test_empty_line(self):
        command = parse_command("   ")
        assert command.type == CommandType.UNKNOWN
        assert command.original_input == ""
