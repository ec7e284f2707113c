"""
Game Engine for Reentry.

Processes player commands against the world graph. Each handler
resolves references, validates, and then either mutates the graph
once or leaves it untouched, returning narration in both cases.
"""

from __future__ import annotations

import logging

from reentry.db.memory import EntityStore
from reentry.engine.intent import parse_command
from reentry.engine.models import Command, CommandType, MoveError, MoveResult, TurnResult
from reentry.engine.reachability import distance, passage_toward
from reentry.engine.resolver import resolve
from reentry.models import PLAYER, DistanceClass

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "You can:\n"
    "  look [thing]    look around, or at something\n"
    "  go <place>      go somewhere, or through a passage\n"
    "  get <thing>     pick something up\n"
    "  drop <thing>    put something down\n"
    "  give <thing>    give something to whoever is here\n"
    "  ask <thing>     ask whoever is here for something\n"
    "  inventory       list what you are carrying\n"
    "  quit            stop playing\n"
)


class GameEngine:
    """
    Turn processor for a single player.

    The engine owns no state besides the EntityStore it is given.
    """

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    # =========================================================================
    # Turn entry points
    # =========================================================================

    def process(self, player_input: str) -> TurnResult:
        """Parse and execute one line of player input."""
        return self.execute(parse_command(player_input))

    def execute(self, command: Command) -> TurnResult:
        """Execute one parsed command."""
        logger.debug("Executing %s '%s'", command.type.value, command.noun)

        if command.type == CommandType.ASK:
            narrative = self.ask(command.noun)
        elif command.type == CommandType.DROP:
            narrative = self.drop(command.noun)
        elif command.type == CommandType.GET:
            narrative = self.get(command.noun)
        elif command.type == CommandType.GIVE:
            narrative = self.give(command.noun)
        elif command.type == CommandType.GO:
            narrative = self.go(command.noun)
        elif command.type == CommandType.INVENTORY:
            narrative = self.inventory()
        elif command.type == CommandType.LOOK:
            narrative = self.look(command.noun)
        elif command.type == CommandType.HELP:
            narrative = HELP_TEXT
        elif command.type == CommandType.QUIT:
            narrative = "Quitting.\nThank you for playing!"
        else:
            narrative = f"I don't know how to '{command.original_input}'."

        return TurnResult(
            command=command.type,
            narrative=narrative,
            quit=command.type == CommandType.QUIT,
        )

    # =========================================================================
    # Helpers
    # =========================================================================

    def _label(self, index: int) -> str:
        return self.store[index].canonical_label

    @property
    def player_location(self) -> int | None:
        return self.store.location_of(PLAYER)

    def actor_here(self) -> int | None:
        """First actor, other than the player, directly in the player's room."""
        for index in self.store.contents(self.player_location):
            if index != PLAYER and self.store[index].is_actor():
                return index
        return None

    def list_contents(self, container: int) -> tuple[str, int]:
        """
        List what a container directly holds, never including the player.

        Returns:
            Tuple of (listing text, number of entries)
        """
        lines = []
        for index in self.store.contents(container):
            if index == PLAYER:
                continue
            lines.append(f"{self.store[index].description}\n")
        if not lines:
            return "", 0
        header = f"{self.store[container].contents_label}:\n"
        return header + "".join(lines), len(lines)

    def _visible(self, intent: str, noun: str) -> tuple[str, int | None]:
        """
        Resolve something the player can see or head toward.

        Returns:
            Tuple of (error narration, index); exactly one is meaningful
        """
        over_there = resolve(self.store, noun, PLAYER, DistanceClass.REACHABLE)
        anywhere = resolve(self.store, noun, PLAYER, DistanceClass.NOT_HERE)

        if over_there.is_one:
            return "", over_there.index
        if over_there.is_ambiguous or anywhere.is_ambiguous:
            return f"Please be more specific about which {noun} you mean.\n", None
        if anywhere.is_one:
            return f"You don't see any '{noun}' here.\n", None
        return f"I don't understand {intent}.\n", None

    def _possession(self, origin: int | None, verb: str, noun: str) -> tuple[str, int | None]:
        """
        Resolve something carried, directly or indirectly, by origin.

        Returns:
            Tuple of (error narration, index); exactly one is meaningful
        """
        if origin is None:
            return f"I don't understand what you want to {verb}.\n", None

        held = resolve(self.store, noun, origin, DistanceClass.HELD_INDIRECT)
        anywhere = resolve(self.store, noun, origin, DistanceClass.NOT_HERE)

        if held.is_none and anywhere.is_none:
            return f"I don't understand what you want to {verb}.\n", None
        if held.is_none:
            if origin == PLAYER:
                return f"You are not holding any {noun}.\n", None
            return (
                f"There appears to be no {noun} you can get from {self._label(origin)}.\n",
                None,
            )
        if held.is_ambiguous:
            return f"Please be more specific about which {noun} you want to {verb}.\n", None
        if held.index == origin:
            return f"You should not be doing that to {self._label(origin)}.\n", None
        return "", held.index

    # =========================================================================
    # Move primitive
    # =========================================================================

    def describe_move(self, obj: int, destination: int) -> str:
        """Narrate a move before it happens."""
        obj_label = self._label(obj)
        obj_loc = self.store.location_of(obj)
        player_loc = self.player_location

        if player_loc is not None and destination == player_loc:
            return f"You drop {obj_label}.\n"
        if destination != PLAYER:
            if self.store[destination].is_actor():
                return f"You give {obj_label} to {self._label(destination)}.\n"
            return f"You put {obj_label} in {self._label(destination)}.\n"
        if obj_loc == player_loc:
            return f"You pick up {obj_label}.\n"
        return f"You get {obj_label} from {self._label(obj_loc)}.\n"

    def move(self, obj: int | None, destination: int | None) -> MoveResult:
        """
        Move an object into a destination, respecting capacity.

        The graph changes only when the result is successful.
        """
        if obj is None:
            return MoveResult(success=False)
        if destination is None:
            return MoveResult(
                success=False,
                narrative="There is nobody to give that to.\n",
                error=MoveError.NO_RECIPIENT,
            )

        entity = self.store[obj]
        target = self.store[destination]
        if entity.location is None or entity.weight > target.capacity:
            return MoveResult(
                success=False,
                narrative="That is way too heavy.\n",
                error=MoveError.TOO_HEAVY,
            )
        if entity.weight + self.store.weight_of_contents(destination) > target.capacity:
            return MoveResult(
                success=False,
                narrative="That would become too heavy.\n",
                error=MoveError.TOO_HEAVY,
            )

        narrative = self.describe_move(obj, destination)
        self.store.relocate(obj, destination)
        logger.debug("Moved '%s' into '%s'", entity.canonical_label, target.canonical_label)
        return MoveResult(success=True, narrative=narrative)

    # =========================================================================
    # Command handlers
    # =========================================================================

    def look(self, noun: str) -> str:
        """Look around the current room, or at something visible."""
        if noun in ("", "around"):
            room = self.player_location
            if room is None:
                return "You are nowhere at all.\n"
            listing, _ = self.list_contents(room)
            return (
                f"{self._label(room)}\nYou are in {self.store[room].description}.\n" + listing
            )

        output, obj = self._visible("what you want to look at", noun)
        if obj is None:
            return output

        player_to_obj = distance(self.store, PLAYER, obj)
        if player_to_obj == DistanceClass.HERE_INDIRECT:
            return "Hard to see, you should try to get it first.\n"
        if player_to_obj == DistanceClass.REACHABLE:
            return "Too far away, move closer please.\n"

        listing, _ = self.list_contents(obj)
        return f"{self.store[obj].details}\n{listing}"

    def _traverse(self, passage: int) -> str:
        destination = self.store[passage].destination
        if destination is None:
            return f"{self.store[passage].go_blocked_text}\n"
        self.store.relocate(PLAYER, destination)
        logger.debug("Player went through '%s'", self._label(passage))
        return self.look("around")

    def go(self, noun: str) -> str:
        """Go through a passage, or toward a place a passage leads to."""
        output, obj = self._visible("where you want to go", noun)
        if obj is None:
            return output

        player_to_obj = distance(self.store, PLAYER, obj)
        if player_to_obj == DistanceClass.REACHABLE:
            passage = passage_toward(self.store, self.player_location, obj)
            return self._traverse(passage)
        return self._traverse(obj)

    def get(self, noun: str) -> str:
        """Pick up something visible."""
        output, obj = self._visible("what you want to get", noun)
        if obj is None:
            return output

        player_to_obj = distance(self.store, PLAYER, obj)
        if player_to_obj == DistanceClass.SELF:
            return "You should not be doing that to yourself.\n"
        if player_to_obj == DistanceClass.HELD:
            return f"You already have {self.store[obj].description}.\n"
        if player_to_obj == DistanceClass.REACHABLE:
            return "Too far away, move closer please.\n"

        container = self.store.location_of(obj)
        if container is not None and self.store[container].is_actor():
            return f"You should ask {self._label(container)} nicely.\n"
        return self.move(obj, PLAYER).narrative

    def drop(self, noun: str) -> str:
        """Put down something the player carries."""
        output, obj = self._possession(PLAYER, "drop", noun)
        return output + self.move(obj, self.player_location).narrative

    def give(self, noun: str) -> str:
        """Give something the player carries to the actor in the room."""
        actor = self.actor_here()
        output, obj = self._possession(PLAYER, "give", noun)
        return output + self.move(obj, actor).narrative

    def ask(self, noun: str) -> str:
        """Ask the actor in the room for something it carries."""
        actor = self.actor_here()
        output, obj = self._possession(actor, "ask", noun)
        return output + self.move(obj, PLAYER).narrative

    def inventory(self) -> str:
        """List what the player directly carries."""
        listing, count = self.list_contents(PLAYER)
        if count == 0:
            return "You are empty handed.\n"
        return listing
