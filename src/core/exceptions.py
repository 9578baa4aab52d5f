"""
Errors raised by the domain and service layers.

None of these are fatal: the service layer catches `GameError`, informs the sender and carries on.
"""


class GameError(Exception):
    """Base class for everything that can go wrong while playing."""


class InvalidRequestError(GameError):
    """Inbound payload could not be interpreted."""


class InvalidIdentityError(GameError):
    """Join request for an identity other than the two known ones."""


class GameStateError(GameError):
    """The requested operation does not fit the current state of the match."""


class NotYourTurnError(GameError):
    """A player tried to move while it is the opponent's turn."""


class IllegalMoveError(GameError):
    """The move breaks the movement rules of the piece (or there is no piece of yours to move)."""


class OutOfBoundsError(IllegalMoveError):
    """The destination lies outside of the board."""
