"""Level checking, game rules, XPM reading, colours, event hooks and printf for a cheese-collecting puzzle game."""

__version__ = "0.1.0"