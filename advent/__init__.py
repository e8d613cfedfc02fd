"""Advent of Code puzzle solutions for selected days of 2018 to 2022, and a command to run them."""

__version__ = "0.1.0"