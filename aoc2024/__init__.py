"""Advent of Code 2024 puzzle solutions for days 1 to 22, except day 21."""

__version__ = "0.1.0"