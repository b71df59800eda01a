"""A two-player Pong game played to 11 points, with a pygame window and headless game logic."""

__version__ = "1.1.0"