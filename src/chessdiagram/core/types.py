"""Square value object and algebraic coordinate helpers.

Files and ranks are zero-based: file 0 = ``a``, rank 0 = ``1``.
"""

from __future__ import annotations

from dataclasses import dataclass

from chessdiagram.core.errors import InvalidSquare

FILES = "abcdefgh"
RANKS = "12345678"


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """A single board coordinate."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not (0 <= self.file < 8 and 0 <= self.rank < 8):
            raise InvalidSquare(f"Square out of range: ({self.file}, {self.rank})")

    def __str__(self) -> str:
        return FILES[self.file] + RANKS[self.rank]

    @property
    def row(self) -> int:
        """Row index counted from rank 8 (0) down to rank 1 (7)."""
        return 7 - self.rank

    @property
    def is_light(self) -> bool:
        """Light iff file index plus row index is even (a8 light, a1 dark)."""
        return (self.file + self.row) % 2 == 0


def parse_square(name: str) -> Square:
    """Parse square name, e.g. ``'e4'`` → ``Square(4, 3)``."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
        raise InvalidSquare(f"Invalid square name: {name!r}")
    return Square(FILES.index(name[0]), RANKS.index(name[1]))


def as_square(value: str | Square) -> Square:
    """Accept either a :class:`Square` or its algebraic name."""
    if isinstance(value, Square):
        return value
    return parse_square(value)


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(file, rank) for rank in range(7, -1, -1) for file in range(8)
)
"""All 64 squares, rank 8 to rank 1, file a to h."""
