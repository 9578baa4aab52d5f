"""Which connection plays which side. Pairing, re-sync of late joiners, and teardown when a player leaves."""

import logging
from enum import Enum, auto

from src.core.shared_types import Player
from src.heroes.match import Match

logger = logging.getLogger(__name__)


class JoinOutcome(Enum):
    ASSIGNED = auto()  # seated, still waiting for the opponent
    STARTED = auto()  # seated as the second player: the match has begun
    ALREADY_TAKEN = auto()  # identity belongs to someone else (or to this connection already)


class SessionManager:
    """Owns the one and only Match, and replaces it whenever the pairing breaks up."""

    def __init__(self) -> None:
        self.match = Match.new_match()

    @property
    def bound_count(self) -> int:
        return len(self.match.players)

    def join(self, identity: Player, connection_id: str) -> JoinOutcome:
        """
        Claim an identity for this connection.
        ---

        An identity that is already claimed is never rebound: the caller just gets to see the current state.
        """
        if self.match.is_bound(identity):
            logger.info(
                "Connection %s asked for %s, which is already taken", connection_id, identity
            )
            return JoinOutcome.ALREADY_TAKEN

        started = self.match.register_player(identity, connection_id)
        logger.info("Connection %s plays as %s", connection_id, identity)
        if started:
            logger.info("Both players seated, match started")
            return JoinOutcome.STARTED
        return JoinOutcome.ASSIGNED

    def leave(self, connection_id: str) -> bool:
        """
        Drop whatever identity this connection held.
        Returns True if the match got reset, which happens whenever fewer than two players are left seated
        (the remaining player is unseated as well).
        """
        released = self.match.release(connection_id)
        for player in released:
            logger.info("Player %s left (connection %s)", player, connection_id)

        if self.bound_count < len(Player):
            self.match = Match.new_match()
            logger.info("Fewer than two players seated, match reset")
            return True
        return False
