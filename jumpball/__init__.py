"""A side-scrolling jumping-ball arcade game: entities, game logic, rendering, audio and the game command."""

__version__ = "0.1.0"
__all__ = ["__version__"]