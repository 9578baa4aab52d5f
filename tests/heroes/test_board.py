"""Unit tests for /src/heroes/board.py"""

from typing import Callable

from src.core.shared_types import Player
from src.heroes.board import Board
from src.heroes.pieces import Piece, PieceKind
from src.heroes.square import Square

BoardFactory = Callable[[dict[tuple[int, int], str]], Board]

STARTING_GRID = [
    ["A-P1", "A-H1", "A-H2", "A-H3", "A-P2"],
    [None, None, None, None, None],
    [None, None, None, None, None],
    [None, None, None, None, None],
    ["B-P1", "B-H1", "B-H2", "B-H3", "B-P2"],
]
EMPTY_GRID = [[None] * 5 for _ in range(5)]


# -- CREATION LOGIC ---
def test_creating_board_in_starting_position() -> None:
    """Back rows hold Pawn, Hero1, Hero2, Hero3, Pawn for both players. Rows in between are empty."""
    board = Board.starting_position()

    assert board.piece(Square(0, 0)) == Piece(Player.A, PieceKind.PAWN, 1)
    assert board.piece(Square(1, 0)) == Piece(Player.A, PieceKind.HERO1)
    assert board.piece(Square(2, 0)) == Piece(Player.A, PieceKind.HERO2)
    assert board.piece(Square(3, 0)) == Piece(Player.A, PieceKind.HERO3)
    assert board.piece(Square(4, 0)) == Piece(Player.A, PieceKind.PAWN, 2)

    assert board.piece(Square(0, 4)) == Piece(Player.B, PieceKind.PAWN, 1)
    assert board.piece(Square(3, 4)) == Piece(Player.B, PieceKind.HERO3)

    for y in range(1, 4):
        for x in range(5):
            assert board.piece(Square(x, y)) is None


def test_starting_position_to_grid() -> None:
    assert Board.starting_position().to_grid() == STARTING_GRID


def test_empty_board() -> None:
    board = Board.empty()
    assert board.count_pieces() == 0
    assert board.to_grid() == EMPTY_GRID


def test_board_from_grid() -> None:
    assert Board.from_grid(STARTING_GRID) == Board.starting_position()


# -- POSITION UPDATES ---
def test_move_piece(board_with_pieces: BoardFactory) -> None:
    board = board_with_pieces({(1, 0): "A-H1"})
    board.move_piece(Square(1, 0), Square(1, 2))

    assert board.piece(Square(1, 0)) is None
    assert board.piece(Square(1, 2)) == Piece(Player.A, PieceKind.HERO1)


def test_move_piece_overwrites_destination(board_with_pieces: BoardFactory) -> None:
    """No validation on the board: whatever stood on the destination is gone"""
    board = board_with_pieces({(1, 0): "A-H1", (1, 1): "B-P1"})
    board.move_piece(Square(1, 0), Square(1, 1))

    assert board.piece(Square(1, 1)) == Piece(Player.A, PieceKind.HERO1)
    assert board.count_pieces() == 1


def test_move_piece_with_captures(board_with_pieces: BoardFactory) -> None:
    """Squares passed as captures are cleared, other squares on the way are not touched"""
    board = board_with_pieces(
        {(3, 0): "A-H3", (3, 1): "B-P1", (3, 2): "A-P1", (3, 3): "B-H1"}
    )
    board.move_piece(Square(3, 0), Square(3, 3), captures=[Square(3, 1)])

    assert board.piece(Square(3, 1)) is None
    assert board.piece(Square(3, 2)) == Piece(Player.A, PieceKind.PAWN, 1)
    assert board.piece(Square(3, 3)) == Piece(Player.A, PieceKind.HERO3)
    assert board.count_pieces() == 2


def test_remove_piece_returns_removed(board_with_pieces: BoardFactory) -> None:
    board = board_with_pieces({(2, 2): "B-H2"})
    assert board.remove_piece(Square(2, 2)) == Piece(Player.B, PieceKind.HERO2)
    assert board.remove_piece(Square(2, 2)) is None


# -- QUERIES ---
def test_locate_player() -> None:
    board = Board.starting_position()
    assert sorted(board.locate_player(Player.A), key=lambda sq: sq.x) == [
        Square(x, 0) for x in range(5)
    ]
    assert all(square.y == 4 for square in board.locate_player(Player.B))


def test_count_heroes_ignores_pawns(board_with_pieces: BoardFactory) -> None:
    board = board_with_pieces(
        {(0, 0): "A-P1", (4, 0): "A-P2", (1, 4): "B-H1", (3, 4): "B-H3"}
    )
    assert board.count_heroes() == {Player.A: 0, Player.B: 2}
    assert Board.starting_position().count_heroes() == {Player.A: 3, Player.B: 3}


def test_is_occupied() -> None:
    board = Board.starting_position()
    assert board.is_occupied(Square(0, 0))
    assert not board.is_occupied(Square(2, 2))
    assert not board.is_occupied(Square(7, 7))
