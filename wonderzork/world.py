"""The game world and the command interpreter."""

from __future__ import annotations

from collections.abc import Callable

from wonderzork.entities import NPC, Entity, Exit, ExitDirection, Item, Room
from wonderzork.player import Player

QUIT_COMMAND = "QUIT GAME"
WIN_MESSAGE = "The alarm clock rings... Alice wakes up and escapes Wonderland!"

_CAT_DIALOG = (
    "If you don't know where you want to go, then it doesn't matter which path you take... "
    "Collect what you can. Use it wisely."
)
_HATTER_DIALOG = "Why is it you're always too small or too tall? Curiouser and curiouser!"


def split_string(text: str, delimiter: str) -> list[str]:
    """Split text on every occurrence of delimiter, keeping empty pieces."""
    return text.split(delimiter)


class World:
    """All rooms, characters and items, plus the player who explores them."""

    def __init__(self) -> None:
        self.entities: list[Entity] = []

        hole = self._keep(Room("Rabbit Hole", "It's too deep to climb upwards."))
        wood = self._keep(Room("Tulgey Wood", "A dark, twisted forest that doesn't seem to end."))
        house = self._keep(
            Room("White Rabbit's House", "A little cottage with the front door left open.")
        )
        party = self._keep(Room("Tea Party", "It's always tea time here."))
        garden = self._keep(
            Room("Queen's Garden", "A garden filled with red-painted white rose bushes.")
        )

        self.alice = self._keep(Player("ALICE", " is normal in size.", hole))

        hole.add(self._keep(NPC(
            "CAT", "The Cheshire Cat is floating around with a mysterious grin.",
            hole, _CAT_DIALOG,
        )))
        party.add(self._keep(NPC(
            "HATTER", "The Mad Hatter is seated at the head of the long table.",
            party, _HATTER_DIALOG,
        )))

        west, east, south, north = (
            ExitDirection.WEST, ExitDirection.EAST, ExitDirection.SOUTH, ExitDirection.NORTH,
        )

        self._link(hole, Exit("West Exit", "A small brown door.", west, hole, wood, True))
        self._link(hole, Exit("East Exit", "An open tunnel.", east, hole, house, False))
        self._link(hole, Exit("South Exit", "A small purple door.", south, hole, party, True))

        self._link(wood, Exit("East Exit", "A small brown door.", east, wood, hole, True))
        tree = self._link(wood, Item("TREE", "A very tall Tumtum tree."))
        tree.add(self._keep(Item("CLOCK", "This appears to be missing some pieces.")))

        self._link(house, Exit("West Exit", "An open tunnel.", west, house, hole, False))
        self._link(house, Exit("South Exit", "An open pathway.", south, house, garden, False))
        self._link(house, Item("POTION", "The bottle is labelled 'Drink Me'."))

        self._link(party, Exit("North Exit", "A small purple door.", north, party, hole, True))
        self._link(party, Exit("East Exit", "An open gate.", east, party, garden, False))
        self._link(party, Item("CAKE", "The box is labelled 'Eat Me'."))

        self._link(garden, Exit("North Exit", "An open pathway.", north, garden, house, False))
        self._link(garden, Exit("West Exit", "An open gate.", west, garden, party, False))
        toolshed = self._link(
            garden, Item("TOOLSHED", "The shelves are filled with bits and bobs.")
        )
        toolshed.add(self._keep(Item("GEARS", "This looks like the missing clock pieces!")))

        alice = self.alice
        self._actions: dict[str, Callable[[list[str]], bool]] = {
            "LOOK": lambda words: alice.look(),
            "CHECK": lambda words: alice.check(),
            "GO": alice.go,
            "ASK": alice.ask,
            "EXAMINE": alice.examine,
            "GET": alice.get,
            "DROP": alice.drop,
            "USE": alice.use,
            "DRINK": alice.use,
            "EAT": alice.use,
            "PUT": alice.put_in,
        }

    def _keep(self, entity):
        self.entities.append(entity)
        return entity

    def _link(self, container: Entity, entity):
        container.add(self._keep(entity))
        return entity

    def parse_command(self, command: str) -> bool:
        """Carry out one upper-case command; return whether the game is over."""
        if command == QUIT_COMMAND:
            return True
        if not command:
            return False

        words = split_string(command, " ")
        print("-----")
        action = self._actions.get(words[0])
        valid = action(words) if action is not None else False

        won = words[0] == "PUT" and self.alice.game_won
        if won:
            self.show_win()
        if not valid:
            print("I cannot do that command.")
        print("==========")
        return won

    def show_win(self) -> str:
        """Print the victory message and return it."""
        print(WIN_MESSAGE)
        return WIN_MESSAGE