"""A Pong game with a main menu, a CPU opponent and a win screen."""

__version__ = "0.1.0"
__all__ = ["button", "game", "screens"]