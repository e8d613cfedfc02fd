"""Hexagonal tile flipping on an offset-row grid."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

DAYS = 100


class Direction(Enum):
    EAST = "e"
    SOUTH_EAST = "se"
    SOUTH_WEST = "sw"
    WEST = "w"
    NORTH_WEST = "nw"
    NORTH_EAST = "ne"


@dataclass(frozen=True)
class Coord:
    """A hexagon on a grid whose odd rows are shifted half a tile east."""

    x: int
    y: int

    def move(self, direction: Direction) -> Coord:
        """Return the adjacent coordinate in ``direction``."""
        odd = self.y % 2 != 0
        if direction is Direction.EAST:
            return Coord(self.x + 1, self.y)
        if direction is Direction.WEST:
            return Coord(self.x - 1, self.y)
        if direction is Direction.SOUTH_EAST:
            return Coord(self.x + 1 if odd else self.x, self.y - 1)
        if direction is Direction.SOUTH_WEST:
            return Coord(self.x if odd else self.x - 1, self.y - 1)
        if direction is Direction.NORTH_WEST:
            return Coord(self.x if odd else self.x - 1, self.y + 1)
        return Coord(self.x + 1 if odd else self.x, self.y + 1)

    def neighbors(self) -> list[Coord]:
        """Return the six adjacent coordinates."""
        return [self.move(direction) for direction in Direction]


def parse_tile(line: str) -> list[Direction]:
    """Parse a run of ``e``, ``se``, ``sw``, ``w``, ``nw`` and ``ne`` steps."""
    directions = []
    pos = 0
    while pos < len(line):
        width = 2 if line[pos] in "ns" else 1
        token = line[pos : pos + width]
        try:
            directions.append(Direction(token))
        except ValueError:
            raise ValueError(f"invalid direction {token!r}") from None
        pos += width
    return directions


def parse_tiles(text: str) -> list[list[Direction]]:
    """Parse one tile path per line."""
    return [parse_tile(line) for line in text.splitlines()]


def tile_coord(directions: Iterable[Direction]) -> Coord:
    """Follow the steps from the reference tile and return where they end."""
    coord = Coord(0, 0)
    for direction in directions:
        coord = coord.move(direction)
    return coord


def flipped_tiles(tiles: Iterable[Iterable[Direction]]) -> set[Coord]:
    """Return the tiles left black after flipping each identified tile."""
    flipped: set[Coord] = set()
    for tile in tiles:
        flipped ^= {tile_coord(tile)}
    return flipped


def daily_flip(flipped: set[Coord]) -> set[Coord]:
    """Return the black tiles after one day.

    A black tile with zero or more than two black neighbours turns white; a
    white tile with exactly two black neighbours turns black.
    """
    counts = Counter(neighbor for coord in flipped for neighbor in coord.neighbors())
    return {
        coord
        for coord, black in counts.items()
        if black == 2 or (black == 1 and coord in flipped)
    }


def part1(text: str) -> str:
    return str(len(flipped_tiles(parse_tiles(text))))


def part2(text: str) -> str:
    flipped = flipped_tiles(parse_tiles(text))
    for _ in range(DAYS):
        flipped = daily_flip(flipped)
    return str(len(flipped))