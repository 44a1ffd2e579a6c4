# wonderzork

A small text adventure in the spirit of the classic Zork games. Alice has
fallen down the rabbit hole and has to find her way out of Wonderland.

## Installing

```
pip install .
```

## Playing

Start the game with:

```
wonderzork
```

The game prints a welcome message and then reads one command per line from
standard input. Commands may be typed in upper or lower case; they are
converted to upper case before they are carried out. Blank lines are ignored.
`LOOK` is a good first command. `QUIT GAME` ends the game at any point, and
the game also ends when Alice wins or when input runs out.

### Commands

| Command | What it does |
| --- | --- |
| `LOOK` | Describe the current room and what is in it |
| `CHECK` | Show Alice's size and inventory |
| `GO NORTH` / `EAST` / `SOUTH` / `WEST` | Walk through an exit |
| `ASK CAT` / `ASK HATTER` | Hear what a character has to say |
| `EXAMINE <thing>` | Look closely at the potion, cake, gears, tree, toolshed or clock, in the room or in the inventory |
| `GET <item>` | Pick up the potion, the cake or the gears |
| `DROP <item>` | Put the potion, the cake or the gears down in the current room |
| `DRINK POTION` / `USE POTION` | Shrink one size |
| `EAT CAKE` / `USE CAKE` | Grow one size |
| `PUT <item> IN TOOLSHED` | Store the potion, the cake or the gears in the toolshed |
| `PUT GEARS IN CLOCK` | Mend the clock |

A command that cannot be carried out is answered with
"I cannot do that command." Some doors are too small for a normal-sized
Alice, and some things are out of reach unless she is large. Talk to whoever
you meet.

## Using the game from Python

The game can also be driven from code:

```python
from wonderzork.world import World

world = World()
world.parse_command("LOOK")
world.parse_command("GO EAST")
```

`World.parse_command` takes a command that is already in upper case, prints
the game's response to standard output, and returns `True` once the game is
over (after `QUIT GAME`, or when Alice wins) and `False` otherwise. The
player is available as `world.alice`, a `wonderzork.player.Player`, and every
room, character, exit and item is listed in `world.entities`. The building
blocks (`Entity`, `Room`, `Exit`, `Item`, `NPC`, `Creature`) live in
`wonderzork.entities`.

## What it does not do

There is only the one built-in map; the world cannot be loaded from a file.
A game cannot be saved or restored: each run starts again from the rabbit
hole.

## Running the tests

```
pip install ".[test]"
pytest
```