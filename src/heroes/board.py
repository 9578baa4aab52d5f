"""The Board only stores where the pieces are. It does not know any rules: legality is checked in moves.py"""

from dataclasses import dataclass
from typing import Optional, Self, Sequence

from src.core.shared_types import Player
from src.heroes.pieces import STARTING_ROW, Piece
from src.heroes.square import BOARD_DIMENSIONS, Square, all_squares

Cell = Optional[Piece]
Grid = list[list[Optional[str]]]

# Each player's back row
HOME_ROWS: dict[Player, int] = {Player.A: 0, Player.B: BOARD_DIMENSIONS[1] - 1}


@dataclass
class Board:
    position: dict[Square, Cell]

    @classmethod
    def empty(cls) -> Self:
        return cls({square: None for square in all_squares()})

    @classmethod
    def starting_position(cls) -> Self:
        """
        Canonical layout:
        * row 0: Player A's Pawn, Hero1, Hero2, Hero3, Pawn
        * rows 1-3: empty
        * row 4: the same set for Player B
        """
        board = cls.empty()
        for player, row in HOME_ROWS.items():
            for column, (kind, number) in enumerate(STARTING_ROW):
                board.place_piece(Piece(player, kind, number), Square(column, row))
        return board

    @classmethod
    def from_grid(cls, grid: Grid) -> Self:
        """Inverse of `to_grid()`: rows are indexed by y, columns by x."""
        board = cls.empty()
        for y, row in enumerate(grid):
            for x, tag in enumerate(row):
                if tag is not None:
                    board.place_piece(Piece.from_tag(tag), Square(x, y))
        return board

    def to_grid(self) -> Grid:
        return [
            [self._tag(Square(x, y)) for x in range(BOARD_DIMENSIONS[0])]
            for y in range(BOARD_DIMENSIONS[1])
        ]

    def _tag(self, square: Square) -> Optional[str]:
        piece = self.piece(square)
        return piece.to_tag() if piece else None

    def piece(self, square: Square) -> Cell:
        return self.position[square]

    def is_occupied(self, square: Square) -> bool:
        return self.position.get(square) is not None

    def place_piece(self, piece: Piece, square: Square) -> None:
        self.position[square] = piece

    def remove_piece(self, square: Square) -> Cell:
        removed = self.position[square]
        self.position[square] = None
        return removed

    def move_piece(
        self, from_square: Square, to_square: Square, captures: Sequence[Square] = ()
    ) -> None:
        """Update the position on the board. Whatever stood on `to_square` (or on any of `captures`) is gone afterwards."""
        for square in captures:
            self.remove_piece(square)
        piece_that_moved = self.remove_piece(from_square)
        self.position[to_square] = piece_that_moved

    def locate_player(self, player: Player) -> list[Square]:
        return [
            square
            for square, piece in self.position.items()
            if piece is not None and piece.owner == player
        ]

    def count_pieces(self) -> int:
        return sum(1 for piece in self.position.values() if piece is not None)

    def count_heroes(self) -> dict[Player, int]:
        """Pawns do not count: a player is out of the game once the last hero is gone."""
        counts = {player: 0 for player in Player}
        for piece in self.position.values():
            if piece is not None and piece.kind.is_hero:
                counts[piece.owner] += 1
        return counts
