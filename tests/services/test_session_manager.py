"""Unit tests for src/services/session_manager.py"""

from src.core.shared_types import Player, Status
from src.heroes.board import Board
from src.heroes.moves import Move
from src.heroes.square import Square
from src.services.session_manager import JoinOutcome, SessionManager


def test_pairing() -> None:
    sessions = SessionManager()
    assert sessions.join(Player.A, "a") == JoinOutcome.ASSIGNED
    assert sessions.bound_count == 1
    assert sessions.join(Player.B, "b") == JoinOutcome.STARTED
    assert sessions.match.status == Status.IN_PROGRESS


def test_redundant_join_does_not_rebind() -> None:
    sessions = SessionManager()
    sessions.join(Player.A, "a")
    assert sessions.join(Player.A, "intruder") == JoinOutcome.ALREADY_TAKEN
    assert sessions.match.players == {Player.A: "a"}


def test_leave_resets_the_match() -> None:
    """Whatever happened before: the match is replaced by a fresh, empty one"""
    sessions = SessionManager()
    sessions.join(Player.A, "a")
    sessions.join(Player.B, "b")
    sessions.match.make_move(Player.A, Move(Square(3, 0), Square(3, 3)))
    previous_match = sessions.match

    assert sessions.leave("b")

    assert sessions.match is not previous_match
    assert sessions.match.status == Status.WAITING_FOR_PLAYERS
    assert sessions.match.players == {}
    assert sessions.match.history == []
    assert sessions.match.current_player == Player.A
    assert sessions.match.board == Board.empty()


def test_unknown_connection_leaving_a_full_match() -> None:
    sessions = SessionManager()
    sessions.join(Player.A, "a")
    sessions.join(Player.B, "b")

    assert not sessions.leave("spectator")
    assert sessions.match.status == Status.IN_PROGRESS
    assert sessions.bound_count == 2


def test_any_leave_while_waiting_clears_the_remaining_player() -> None:
    sessions = SessionManager()
    sessions.join(Player.A, "a")

    assert sessions.leave("someone else")
    assert sessions.bound_count == 0
