"""
Movement and capturing rules

Key idea: the capability table in pieces.py decides which displacements a piece may make.
Legality does NOT look at what stands in between: pieces may pass over other pieces.
Executing a move, however, removes every opponent piece on the path (not only the one on the destination).

Turn order is checked later by Match
"""

from dataclasses import dataclass, field
from typing import Optional

from src.core.exceptions import IllegalMoveError, OutOfBoundsError
from src.core.shared_types import Player
from src.heroes.board import Board
from src.heroes.pieces import Direction, Piece
from src.heroes.square import Square

Vector = tuple[int, int]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_square: Square
    to_square: Square

    @property
    def vector(self) -> Vector:
        return (
            self.to_square.x - self.from_square.x,
            self.to_square.y - self.from_square.y,
        )

    @property
    def distance(self) -> int:
        """Number of cells traversed (diagonal steps count as one)."""
        dx, dy = self.vector
        return max(abs(dx), abs(dy))

    @property
    def direction(self) -> Optional[Direction]:
        """The compass direction of the move, or None if it is not a straight orthogonal/diagonal line."""
        dx, dy = self.vector
        if dx == 0 and dy == 0:
            return None
        if dx != 0 and dy != 0 and abs(dx) != abs(dy):
            return None
        return Direction((_sign(dx), _sign(dy)))

    def path(self) -> list[Square]:
        """Squares strictly in between from_square and to_square."""
        direction = self.direction
        if direction is None:
            return []
        step_x, step_y = direction.value
        return [
            self.from_square.offset(step * step_x, step * step_y)
            for step in range(1, self.distance)
        ]

    def __str__(self) -> str:
        return f"{self.from_square} to {self.to_square}"


@dataclass(frozen=True)
class MoveRecord:
    """Append-only log entry. Only the piece captured on the destination is recorded."""

    piece: Piece
    move: Move
    captured_piece: Optional[Piece] = None

    def describe(self) -> str:
        text = f"{self.piece.to_tag()}: {self.move}"
        if self.captured_piece:
            text += f" capturing {self.captured_piece.to_tag()}"
        return text


@dataclass
class MoveResult:
    """What happened on the board after a move was applied."""

    record: MoveRecord
    captured_on_path: list[Piece] = field(default_factory=list)

    @property
    def captured(self) -> list[Piece]:
        destination = [self.record.captured_piece] if self.record.captured_piece else []
        return self.captured_on_path + destination


# --- LEGALITY ---
def validate_move(board: Board, player: Player, move: Move) -> None:
    """
    Raise the first rule the move breaks
    ----

    1. the source square must hold one of your own pieces
    2. the destination must be on the board
    3. the destination may not hold one of your own pieces (landing on an opponent piece is fine)
    4. the displacement must follow one of the piece's directions, and not go further than its range
    """
    piece = board.position.get(move.from_square)
    if piece is None or not piece.is_owned_by(player):
        raise IllegalMoveError(f"No piece of player {player} on {move.from_square}.")

    if not move.to_square.is_within_bounds():
        raise OutOfBoundsError(f"Destination {move.to_square} is not on the board.")

    target = board.piece(move.to_square)
    if target is not None and target.is_owned_by(player):
        raise IllegalMoveError(
            f"Cannot move onto your own piece {target.to_tag()} on {move.to_square}."
        )

    rule = piece.rule
    if move.direction not in rule.directions:
        raise IllegalMoveError(f"{piece.to_tag()} cannot move along {move.vector}.")

    if move.distance > rule.range:
        raise IllegalMoveError(
            f"{piece.to_tag()} can move at most {rule.range} square(s), not {move.distance}."
        )


def is_legal_move(board: Board, player: Player, move: Move) -> bool:
    try:
        validate_move(board, player, move)
    except IllegalMoveError:
        return False
    return True


def legal_moves(board: Board, player: Player) -> list[Move]:
    """Every move the player could make. No blocking: only the edge of the board stops a piece."""
    moves: list[Move] = []
    for square in board.locate_player(player):
        rule = board.piece(square).rule  # type: ignore[union-attr]
        for direction in rule.directions:
            dx, dy = direction.value
            for step in range(1, rule.range + 1):
                move = Move(square, square.offset(step * dx, step * dy))
                if is_legal_move(board, player, move):
                    moves.append(move)
    return moves


# --- EXECUTION ---
def apply_move(board: Board, player: Player, move: Move) -> MoveResult:
    """
    Update the board for a move that is already known to be legal
    ----

    1. remove every opponent piece on the squares in between
    2. place the moving piece on the destination (overwriting an opponent piece there)
    3. clear the source square

    Friendly pieces on the path are left where they are.
    """
    piece = board.piece(move.from_square)
    # for the typechecker: legality guarantees a piece on the source square
    assert piece is not None

    captured_on_path: list[Piece] = []
    capture_squares: list[Square] = []
    for square in move.path():
        target = board.piece(square)
        if target is not None and not target.is_owned_by(player):
            captured_on_path.append(target)
            capture_squares.append(square)

    captured_piece = board.piece(move.to_square)
    board.move_piece(move.from_square, move.to_square, captures=capture_squares)

    return MoveResult(
        record=MoveRecord(piece, move, captured_piece),
        captured_on_path=captured_on_path,
    )
