"""The player character and the actions it can take."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Optional

from wonderzork.entities import Creature, EntityType, Item, Room

_DIRECTIONS = frozenset({"NORTH", "EAST", "SOUTH", "WEST"})
_CHARACTERS = frozenset({"CAT", "HATTER"})
_CARRYABLE = frozenset({"POTION", "CAKE", "GEARS"})
_EXAMINABLE = _CARRYABLE | {"TREE", "TOOLSHED", "CLOCK"}
_CONTAINERS = frozenset({"TREE", "TOOLSHED"})

_GARDEN = "Queen's Garden"
_WOOD = "Tulgey Wood"


class PlayerSize(Enum):
    """How large the player currently is."""

    SMALL = "small"
    NORMAL = "normal"
    LARGE = "large"


class Player(Creature):
    """The character controlled by the person playing."""

    def __init__(self, name: str, description: str, location: Optional[Room]) -> None:
        super().__init__(name, description, location, EntityType.PLAYER)
        self.status = PlayerSize.NORMAL
        self.game_won = False

    def status_name(self) -> str:
        """Return the current size as a lower-case word."""
        return self.status.value

    def find_item(self, name: str) -> Optional[Item]:
        """Return the inventory item with the given name, if carried."""
        found = self.find(EntityType.ITEM, name)
        return found if isinstance(found, Item) else None

    @property
    def _room(self) -> Room:
        if self.location is None:
            raise RuntimeError(f"{self.name} is not in any room")
        return self.location

    def look(self) -> bool:
        """Print the current room and what it holds."""
        room = self._room
        print(
            f"Alice is at the {room.summary()}This room contains:\n"
            f"{room.contents_summary()}",
            end="",
        )
        return True

    def check(self) -> bool:
        """Print the player's size and inventory."""
        print(f"Alice{self.description}")
        inventory = self.contents_summary()
        if inventory:
            print(f"Inventory Items:\n{inventory}", end="")
        else:
            print("Inventory is empty.")
        return True

    def go(self, action: Sequence[str]) -> bool:
        """Move through the exit in the direction named by the second word."""
        if len(action) < 2 or action[1] not in _DIRECTIONS:
            return False
        direction = action[1]
        passage = self._room.find_exit(direction)
        if passage is None:
            print(f"This room has no {direction} exit. ", end="")
            return False
        if passage.small and self.status is not PlayerSize.SMALL:
            print("Alice cannot fit through the door. ", end="")
            return False
        self.location = passage.destination
        self.look()
        return True

    def ask(self, action: Sequence[str]) -> bool:
        """Have the named character in this room say their line."""
        if len(action) < 2 or action[1] not in _CHARACTERS:
            return False
        character = self._room.find_npc(action[1])
        if character is None:
            print(f"{action[1]} is not in this room. ", end="")
            return False
        character.speak()
        return True

    def examine(self, action: Sequence[str]) -> bool:
        """Describe an item in the room or in the inventory."""
        if len(action) < 2 or action[1] not in _EXAMINABLE:
            return False
        name = action[1]
        in_room = self._room.find_item(name)
        if in_room is not None:
            print(in_room.summary(), end="")
            if in_room.name in _CONTAINERS and in_room.contents:
                print(f"contains:\n{in_room.contents_summary()}", end="")
            return True
        carried = self.find_item(name)
        if carried is not None:
            print(carried.summary(), end="")
            return True
        print(f"{name} is not here. ", end="")
        return False

    def get(self, action: Sequence[str]) -> bool:
        """Pick up an item from the room, or from the toolshed in the garden."""
        if len(action) < 2 or action[1] not in _CARRYABLE:
            return False
        name = action[1]
        room = self._room
        if room.name == _GARDEN:
            toolshed = room.find_item("TOOLSHED")
            stored = toolshed.find_item(name) if toolshed is not None else None
            if toolshed is not None and stored is not None:
                toolshed.remove(stored)
                self.add(stored)
                print(f"{name} is now in Alice's inventory.")
                return True
        item = room.find_item(name)
        if item is None:
            print(f"{name} is not here. ", end="")
            return False
        room.remove(item)
        self.add(item)
        print(f"{name} is now in Alice's inventory.")
        return True

    def drop(self, action: Sequence[str]) -> bool:
        """Leave a carried item in the current room."""
        if len(action) < 2 or action[1] not in _CARRYABLE:
            return False
        name = action[1]
        item = self.find_item(name)
        if item is None:
            print(f"{name} is not in Alice's inventory. ", end="")
            return False
        room = self._room
        self.remove(item)
        room.add(item)
        print(f"Alice leaves the {name} in the {room.name}")
        return True

    def use(self, action: Sequence[str]) -> bool:
        """Drink the potion to shrink or eat the cake to grow."""
        if len(action) < 2:
            return False
        verb, target = action[0], action[1]
        if verb in ("DRINK", "USE") and target == "POTION":
            if self.status is PlayerSize.SMALL:
                print("Alice is small and cannot shrink any further.")
            elif self.status is PlayerSize.NORMAL:
                self.status = PlayerSize.SMALL
                print("Alice shrinks to small size.")
            else:
                self.status = PlayerSize.NORMAL
                print("Alice shrinks to normal size.")
        elif verb in ("EAT", "USE") and target == "CAKE":
            if self.status is PlayerSize.SMALL:
                self.status = PlayerSize.NORMAL
                print("Alice grows to normal size.")
            elif self.status is PlayerSize.NORMAL:
                self.status = PlayerSize.LARGE
                print("Alice grows to large size.")
            else:
                print("Alice is large and cannot grow any further.")
        else:
            return False
        self.description = f" is {self.status_name()} in size."
        return True

    def put_in(self, action: Sequence[str]) -> bool:
        """Put an item into the toolshed, or the gears into the clock."""
        if len(action) < 4 or action[2] != "IN":
            return False
        name, container = action[1], action[3]
        room = self._room
        if container == "TOOLSHED":
            if name not in _CARRYABLE:
                return False
            toolshed = room.find_item("TOOLSHED") if room.name == _GARDEN else None
            if toolshed is None:
                print("TOOLSHED is not in this room. ", end="")
                return False
            item = self.find_item(name)
            if item is None:
                print(f"{name} is not in Alice's inventory. ", end="")
                return False
            self.remove(item)
            toolshed.add(item)
            return True
        if name == "GEARS" and container == "CLOCK":
            if room.name != _WOOD:
                print("CLOCK is not in this room. ", end="")
                return False
            if self.find_item(name) is None:
                print("GEARS is not in Alice's inventory. ", end="")
                return False
            if self.status is not PlayerSize.LARGE:
                print("Alice cannot reach the clock. ", end="")
                return False
            self.game_won = True
            return True
        return False