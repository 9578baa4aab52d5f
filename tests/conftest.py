"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.core.shared_types import Player, Status
from src.heroes.board import Board
from src.heroes.match import Match
from src.heroes.pieces import Piece
from src.heroes.square import Square
from src.services.game_service import GameService

CONNECTION_A = "connection-a"
CONNECTION_B = "connection-b"


@pytest.fixture
def board_with_pieces() -> Callable[[dict[tuple[int, int], str]], Board]:
    """Call the inner function with a mapping of (x, y) -> piece tag to get a board with only those pieces on it."""

    def _create_board(pieces: dict[tuple[int, int], str]) -> Board:
        board = Board.empty()
        for (x, y), tag in pieces.items():
            board.place_piece(Piece.from_tag(tag), Square(x, y))
        return board

    return _create_board


@pytest.fixture
def match_in_progress() -> Callable[[Board], Match]:
    """A match with both players seated, A to move, on the supplied board."""

    def _create_match(board: Board) -> Match:
        return Match(
            board=board,
            current_player=Player.A,
            players={Player.A: CONNECTION_A, Player.B: CONNECTION_B},
            history=[],
            status=Status.IN_PROGRESS,
        )

    return _create_match


@pytest.fixture
def service() -> GameService:
    return GameService()


@pytest.fixture
def seated_service(service: GameService) -> GameService:
    """Both players joined: the match is in progress in the starting position."""
    service.join_game(CONNECTION_A, "A")
    service.join_game(CONNECTION_B, "B")
    return service
