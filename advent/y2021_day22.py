"""Reactor reboot: counting lit cubes after overlapping on/off cuboid steps."""

from __future__ import annotations

import re
from dataclasses import dataclass

INIT_REGION_LIMIT = 50

_CUBOID_PATTERN = re.compile(
    r"(on|off)\s+"
    r"x=(-?[0-9]+)\.\.(-?[0-9]+),"
    r"y=(-?[0-9]+)\.\.(-?[0-9]+),"
    r"z=(-?[0-9]+)\.\.(-?[0-9]+)"
)


@dataclass(frozen=True)
class Cuboid:
    """An axis-aligned cuboid with inclusive bounds that turns cubes on or off."""

    on: bool
    xmin: int
    xmax: int
    ymin: int
    ymax: int
    zmin: int
    zmax: int

    def size(self) -> int:
        """Return the number of cubes the cuboid covers."""
        return (
            (self.xmax - self.xmin + 1)
            * (self.ymax - self.ymin + 1)
            * (self.zmax - self.zmin + 1)
        )

    def within(self, limit: int) -> bool:
        """Return True if every bound lies within ``-limit..limit``."""
        return (
            self.xmin >= -limit
            and self.xmax <= limit
            and self.ymin >= -limit
            and self.ymax <= limit
            and self.zmin >= -limit
            and self.zmax <= limit
        )


def parse_cuboid(line: str) -> Cuboid:
    """Parse a step such as ``on x=2..47,y=-22..22,z=-23..27``."""
    match = _CUBOID_PATTERN.match(line)
    if match is None:
        raise ValueError(f"invalid cuboid {line!r}")
    state, *bounds = match.groups()
    xmin, xmax, ymin, ymax, zmin, zmax = (int(bound) for bound in bounds)
    return Cuboid(state == "on", xmin, xmax, ymin, ymax, zmin, zmax)


def parse_cuboids(text: str) -> list[Cuboid]:
    """Parse one step per line; at least one step is required."""
    cuboids = [parse_cuboid(line) for line in text.splitlines() if line]
    if not cuboids:
        raise ValueError("no cuboids given")
    return cuboids


def cuboid_intersection(a: Cuboid, b: Cuboid) -> Cuboid | None:
    """Return the overlap of ``a`` and ``b``, with ``b``'s state inverted, or None."""
    xmin, xmax = max(a.xmin, b.xmin), min(a.xmax, b.xmax)
    ymin, ymax = max(a.ymin, b.ymin), min(a.ymax, b.ymax)
    zmin, zmax = max(a.zmin, b.zmin), min(a.zmax, b.zmax)
    if xmin > xmax or ymin > ymax or zmin > zmax:
        return None
    return Cuboid(not b.on, xmin, xmax, ymin, ymax, zmin, zmax)


def count_on(cuboids: list[Cuboid]) -> int:
    """Return the number of cubes lit after applying every step in order."""
    core: list[Cuboid] = []
    for cuboid in cuboids:
        additions = [cuboid] if cuboid.on else []
        for existing in core:
            overlap = cuboid_intersection(cuboid, existing)
            if overlap is not None:
                additions.append(overlap)
        core.extend(additions)
    return sum(c.size() if c.on else -c.size() for c in core)


def part1(text: str) -> str:
    cuboids = [c for c in parse_cuboids(text) if c.within(INIT_REGION_LIMIT)]
    return str(count_on(cuboids))


def part2(text: str) -> str:
    return str(count_on(parse_cuboids(text)))