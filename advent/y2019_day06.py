"""Orbit maps: counting orbits and orbital transfers."""


def parse_orbits(text: str) -> dict[str, str]:
    """Map each orbiting object to the object it orbits."""
    orbits = {}
    for line in text.splitlines():
        parent, sep, obj = line.partition(")")
        if not sep:
            raise ValueError(f"invalid orbit line {line!r}")
        orbits[obj] = parent
    return orbits


def _ancestors(orbits: dict[str, str], obj: str) -> list[str]:
    """Objects from ``obj``'s parent outward, excluding the root."""
    try:
        current = orbits[obj]
    except KeyError:
        raise ValueError(f"{obj} is not in the orbit map") from None
    chain = []
    while current in orbits:
        chain.append(current)
        current = orbits[current]
    return chain


def total_orbits(orbits: dict[str, str]) -> int:
    """Return the total number of direct and indirect orbits."""
    total = 0
    for obj in orbits:
        while obj in orbits:
            total += 1
            obj = orbits[obj]
    return total


def transfers_required(orbits: dict[str, str]) -> int:
    """Return the orbital transfers needed to move from YOU to SAN's parent."""
    you_parents = _ancestors(orbits, "YOU")
    san_parents = _ancestors(orbits, "SAN")
    shared = 0
    for you, san in zip(reversed(you_parents), reversed(san_parents)):
        shared += 1
        if you != san:
            break
    return (len(you_parents) - shared) + 1 + (len(san_parents) - shared) + 1


def part1(text: str) -> str:
    return str(total_orbits(parse_orbits(text)))


def part2(text: str) -> str:
    return str(transfers_required(parse_orbits(text)))