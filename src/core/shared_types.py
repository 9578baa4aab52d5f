"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    WAITING_FOR_PLAYERS = "waiting for players"
    IN_PROGRESS = "in progress"
    FINISHED = "finished"


class Player(StrEnum):
    A = "A"
    B = "B"

    @property
    def opponent(self) -> "Player":
        return Player.B if self == Player.A else Player.A


class Result(StrEnum):
    """Outcome of a finished match: one of the identities won, or the move limit was reached."""

    A = "A"
    B = "B"
    DRAW = "draw"
