"""Command-line entry point that runs an interactive game session."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from wonderzork.world import QUIT_COMMAND, World

WELCOME = (
    "Welcome to Wonderzork - a simple text-based game inspired by Zork (1977 game) "
    "and Alice's Adventures in Wonderland (1865 novel). Try the command LOOK to begin "
    "playing. Enter QUIT GAME at any time.\n=========="
)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read commands from standard input until the game ends or input runs out."""
    world = World()
    print(WELCOME)
    for line in sys.stdin:
        command = line.lstrip().rstrip("\r\n").upper()
        if not command:
            continue
        if world.parse_command(command) or command == QUIT_COMMAND:
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())