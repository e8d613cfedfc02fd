"""Conway cubes: a game of life on an unbounded grid of any dimension."""

from collections import Counter
from functools import lru_cache
from itertools import product

CYCLES = 6

Cube = tuple[int, ...]


def parse_cubes(text: str, dimensions: int) -> set[Cube]:
    """Parse the initial slice; ``#`` marks an active cube, ``.`` an inactive one."""
    if dimensions < 2:
        raise ValueError("at least two dimensions are required")
    padding = (0,) * (dimensions - 2)
    cubes = set()
    for y, line in enumerate(text.splitlines()):
        for x, ch in enumerate(line):
            if ch == "#":
                cubes.add((x, y, *padding))
            elif ch != ".":
                raise ValueError(f"invalid input {ch!r}")
    return cubes


@lru_cache(maxsize=None)
def _neighbor_offsets(dimensions: int) -> tuple[Cube, ...]:
    origin = (0,) * dimensions
    return tuple(
        offset for offset in product((-1, 0, 1), repeat=dimensions) if offset != origin
    )


def cycle(cubes: set[Cube]) -> set[Cube]:
    """Return the active cubes after one simulation cycle.

    An active cube stays active with exactly 2 or 3 active neighbours; an
    inactive cube becomes active with exactly 3.
    """
    if not cubes:
        raise ValueError("no active cubes")
    dimensions = len(next(iter(cubes)))
    offsets = _neighbor_offsets(dimensions)
    counts = Counter(
        tuple(c + d for c, d in zip(cube, offset))
        for cube in cubes
        for offset in offsets
    )
    return {
        cell
        for cell, active in counts.items()
        if active == 3 or (active == 2 and cell in cubes)
    }


def _run(text: str, dimensions: int) -> int:
    cubes = parse_cubes(text, dimensions)
    for _ in range(CYCLES):
        cubes = cycle(cubes)
    return len(cubes)


def part1(text: str) -> str:
    return str(_run(text, 3))


def part2(text: str) -> str:
    return str(_run(text, 4))