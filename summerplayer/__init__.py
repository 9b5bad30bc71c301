"""A small desktop music player with list, single and random loop modes."""

__version__ = "0.1.0"