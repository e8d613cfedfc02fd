"""Overlapping rectangular fabric claims."""

from collections import Counter
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Claim:
    """A rectangular claim on the fabric."""

    claim_id: int
    left: int
    top: int
    width: int
    height: int

    def squares(self) -> Iterator[tuple[int, int]]:
        """Yield every square the claim covers."""
        for x in range(self.left, self.left + self.width):
            for y in range(self.top, self.top + self.height):
                yield x, y


def _parse_claim(line: str) -> Claim:
    cleaned = (
        line.replace("#", "")
        .replace("@ ", "")
        .replace(",", " ")
        .replace(":", "")
        .replace("x", " ")
    )
    parts = cleaned.split(" ")
    if len(parts) != 5:
        raise ValueError(f"could not parse claim {line!r}")
    claim_id, left, top, width, height = (int(part) for part in parts)
    return Claim(claim_id, left, top, width, height)


def parse_claims(text: str) -> list[Claim]:
    """Parse lines of the form ``#1 @ 1,3: 4x4``."""
    return [_parse_claim(line) for line in text.splitlines()]


def squares_with_counts(claims: list[Claim]) -> Counter:
    """Count how many claims cover each square."""
    return Counter(square for claim in claims for square in claim.squares())


def overlapping_area(claims: list[Claim]) -> int:
    """Return the number of squares covered by more than one claim."""
    return sum(1 for count in squares_with_counts(claims).values() if count > 1)


def standalone_claim(claims: list[Claim]) -> int:
    """Return the id of the first claim that overlaps no other claim."""
    squares = squares_with_counts(claims)
    for claim in claims:
        if all(squares[square] <= 1 for square in claim.squares()):
            return claim.claim_id
    raise ValueError("could not find standalone claim")


def part1(text: str) -> str:
    return str(overlapping_area(parse_claims(text)))


def part2(text: str) -> str:
    return str(standalone_claim(parse_claims(text)))