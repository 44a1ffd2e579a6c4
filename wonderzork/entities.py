"""Game objects: the things that make up the world and what they hold."""

from __future__ import annotations

from enum import Enum, auto
from typing import Optional, TypeVar


class EntityType(Enum):
    """The kind of a game object."""

    ENTITY = auto()
    CREATURE = auto()
    NPC = auto()
    PLAYER = auto()
    EXIT = auto()
    ROOM = auto()
    ITEM = auto()


class ExitDirection(Enum):
    """The compass direction an exit leads."""

    NORTH = auto()
    EAST = auto()
    SOUTH = auto()
    WEST = auto()


_E = TypeVar("_E", bound="Entity")


class Entity:
    """A named, described object that may contain other objects."""

    def __init__(
        self,
        name: str,
        description: str,
        kind: EntityType = EntityType.ENTITY,
    ) -> None:
        self.kind = kind
        self.name = name
        self.description = description
        self.contents: list[Entity] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def has(self, entity: Entity) -> bool:
        """Return whether something with the same name is contained here."""
        return any(held.name == entity.name for held in self.contents)

    def add(self, entity: Entity) -> None:
        """Add an entity, unless one with its name is already here."""
        if self.has(entity):
            print(f"{self.name} already has {entity.name}")
        else:
            self.contents.append(entity)

    def remove(self, entity: Entity) -> None:
        """Remove every contained entity sharing the given entity's name."""
        self.contents = [held for held in self.contents if held.name != entity.name]

    def summary(self) -> str:
        """Return a one-line "name - description" text."""
        return f"{self.name} - {self.description}\n"

    def contents_summary(self) -> str:
        """Return the summaries of everything contained, in order."""
        return "".join(held.summary() for held in self.contents)

    def find(self, kind: EntityType, name: str) -> Optional[Entity]:
        """Return the first contained entity of the given kind and name."""
        return next(
            (held for held in self.contents if held.kind is kind and held.name == name),
            None,
        )


class Creature(Entity):
    """A living entity placed in a room."""

    def __init__(
        self,
        name: str,
        description: str,
        location: Optional[Room] = None,
        kind: EntityType = EntityType.CREATURE,
    ) -> None:
        super().__init__(name, description, kind)
        self.location = location


class Exit(Entity):
    """A passage from one room to another."""

    def __init__(
        self,
        name: str,
        description: str,
        direction: ExitDirection,
        source: Optional[Room],
        destination: Optional[Room],
        small: bool = False,
    ) -> None:
        super().__init__(name, description, EntityType.EXIT)
        self.direction = direction
        self.source = source
        self.destination = destination
        self.small = small

    def direction_name(self) -> str:
        """Return the direction as an upper-case word such as "NORTH"."""
        return self.direction.name


class Item(Entity):
    """An object that can be picked up, used or hold other items."""

    def __init__(self, name: str, description: str) -> None:
        super().__init__(name, description, EntityType.ITEM)

    def find_item(self, name: str) -> Optional[Item]:
        """Return the contained item with the given name, if any."""
        found = self.find(EntityType.ITEM, name)
        return found if isinstance(found, Item) else None


class NPC(Creature):
    """A character who says a fixed line when asked."""

    def __init__(
        self,
        name: str,
        description: str,
        location: Optional[Room],
        dialog: str,
    ) -> None:
        super().__init__(name, description, location, EntityType.NPC)
        self.dialog = dialog

    def speak(self) -> str:
        """Print the character's name and line, and return that text."""
        line = f"{self.name}: {self.dialog}"
        print(line)
        return line


class Room(Entity):
    """A place holding exits, characters and items."""

    def __init__(self, name: str, description: str) -> None:
        super().__init__(name, description, EntityType.ROOM)

    def find_exit(self, direction: str) -> Optional[Exit]:
        """Return the exit leading in the named direction, if any."""
        return next(
            (
                held
                for held in self.contents
                if isinstance(held, Exit)
                and held.kind is EntityType.EXIT
                and held.direction_name() == direction
            ),
            None,
        )

    def find_npc(self, name: str) -> Optional[NPC]:
        """Return the character with the given name, if present."""
        found = self.find(EntityType.NPC, name)
        return found if isinstance(found, NPC) else None

    def find_item(self, name: str) -> Optional[Item]:
        """Return the item with the given name, if present."""
        found = self.find(EntityType.ITEM, name)
        return found if isinstance(found, Item) else None