"""Battleship played in the terminal against a randomly placed fleet."""

__version__ = "1.0.0"