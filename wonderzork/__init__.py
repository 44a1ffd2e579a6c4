"""A small Wonderland text adventure: game objects, the player, the world and a console command."""

__version__ = "1.0.0"