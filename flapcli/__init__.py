"""Flappy Bird style arcade game with a shell for registering players and tracking scores."""

__version__ = "0.1.0"