"""Game rules for a top-down penguin arcade game, without any drawing."""

__version__ = "0.1.0"