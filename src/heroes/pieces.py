"""Defines the kinds of pieces and how far / in which directions each of them can move"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Self

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Player


class PieceKind(Enum):
    """Values are the codes used in piece tags ("A-H1" is Player A's Hero1)."""

    PAWN = "P"
    HERO1 = "H1"
    HERO2 = "H2"
    HERO3 = "H3"

    @property
    def is_hero(self) -> bool:
        return self != PieceKind.PAWN


class Direction(Enum):
    """
    The 8 compass directions, as unit vectors (dx, dy).
    Forward points from Player A's back row towards Player B's. All capability sets are symmetric,
    so the same table holds for both players.
    """

    FORWARD = (0, 1)
    BACKWARD = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    FORWARD_LEFT = (-1, 1)
    FORWARD_RIGHT = (1, 1)
    BACKWARD_LEFT = (-1, -1)
    BACKWARD_RIGHT = (1, -1)


ORTHOGONAL: frozenset[Direction] = frozenset(
    {Direction.FORWARD, Direction.BACKWARD, Direction.LEFT, Direction.RIGHT}
)
DIAGONAL: frozenset[Direction] = frozenset(
    {
        Direction.FORWARD_LEFT,
        Direction.FORWARD_RIGHT,
        Direction.BACKWARD_LEFT,
        Direction.BACKWARD_RIGHT,
    }
)


@dataclass(frozen=True)
class MovementRule:
    directions: frozenset[Direction]
    range: int


# Capability table: read-only, shared by every match.
MOVEMENT_RULES: dict[PieceKind, MovementRule] = {
    PieceKind.PAWN: MovementRule(ORTHOGONAL | DIAGONAL, 1),
    PieceKind.HERO1: MovementRule(ORTHOGONAL, 2),
    PieceKind.HERO2: MovementRule(DIAGONAL, 2),
    PieceKind.HERO3: MovementRule(ORTHOGONAL | DIAGONAL, 3),
}

CODE_TO_KIND: dict[str, PieceKind] = {kind.value: kind for kind in PieceKind}

# Back row, left to right (seen from x = 0). Pawns are numbered so both keep a unique tag.
STARTING_ROW: list[tuple[PieceKind, int]] = [
    (PieceKind.PAWN, 1),
    (PieceKind.HERO1, 1),
    (PieceKind.HERO2, 1),
    (PieceKind.HERO3, 1),
    (PieceKind.PAWN, 2),
]


@dataclass(frozen=True)
class Piece:
    owner: Player
    kind: PieceKind
    number: int = 1

    @classmethod
    def from_tag(cls, tag: str) -> Self:
        """
        Tags look like "<owner>-<kind><index>":
        * "A-P2": Player A's second pawn
        * "B-H3": Player B's Hero3 (a hero's digit IS its kind, there is only one of each)
        """
        try:
            owner_code, piece_code = tag.split("-")
            owner = Player(owner_code)
        except ValueError as exc:
            raise InvalidRequestError(f"Cannot interpret {tag!r} as a piece tag.") from exc

        if piece_code in CODE_TO_KIND and CODE_TO_KIND[piece_code].is_hero:
            return cls(owner, CODE_TO_KIND[piece_code])

        if piece_code.startswith(PieceKind.PAWN.value) and piece_code[1:].isdigit():
            return cls(owner, PieceKind.PAWN, int(piece_code[1:]))

        raise InvalidRequestError(f"Unknown piece kind in tag {tag!r}.")

    def to_tag(self) -> str:
        if self.kind == PieceKind.PAWN:
            return f"{self.owner}-{self.kind.value}{self.number}"
        return f"{self.owner}-{self.kind.value}"

    @property
    def rule(self) -> MovementRule:
        return MOVEMENT_RULES[self.kind]

    def is_owned_by(self, player: Optional[Player]) -> bool:
        return self.owner == player
