"""Orchestration of inbound intents into domain calls and the outbound events they produce.

Transport agnostic: the gateway decides how to actually deliver the events to the sender / everyone.
"""

import logging
from typing import Any, Callable

from pydantic import ValidationError

from src.api.events import EventName, OutboundEvent, Recipient
from src.api.models import (
    GameOverPayload,
    InboundMessage,
    JoinGameRequest,
    MatchSnapshot,
    MoveRequest,
)
from src.core.exceptions import GameError, InvalidRequestError, NotYourTurnError
from src.core.shared_types import Status
from src.heroes.match import Match
from src.heroes.moves import Move
from src.heroes.square import Square
from src.services.session_manager import JoinOutcome, SessionManager

logger = logging.getLogger(__name__)

Handler = Callable[[str, Any], list[OutboundEvent]]


class GameService:
    """Orchestration of layers for a match."""

    def __init__(self, sessions: SessionManager | None = None) -> None:
        self.sessions = sessions or SessionManager()
        self._handlers: dict[str, Handler] = {
            EventName.JOIN_GAME: self.join_game,
            EventName.MOVE: self.make_move,
        }

    @property
    def match(self) -> Match:
        return self.sessions.match

    def handle(self, connection_id: str, message: InboundMessage) -> list[OutboundEvent]:
        """Dispatch an inbound message to its handler. Unknown events are ignored."""
        handler = self._handlers.get(message.event)
        if handler is None:
            logger.warning(
                "Ignoring unknown event %r from connection %s", message.event, connection_id
            )
            return []
        return handler(connection_id, message.data)

    # -- Intents ---
    def join_game(self, connection_id: str, data: Any) -> list[OutboundEvent]:
        """A connection wants to play as A or B."""
        try:
            request = JoinGameRequest(identity=data)
        except (GameError, ValidationError) as exc:
            # Unknown identities get the same treatment as an identity that is already taken.
            logger.info("Connection %s sent an invalid join request: %s", connection_id, exc)
            return [self._snapshot_event(EventName.GAME_UPDATE, Recipient.SENDER)]

        outcome = self.sessions.join(request.identity, connection_id)
        if outcome == JoinOutcome.ALREADY_TAKEN:
            return [self._snapshot_event(EventName.GAME_UPDATE, Recipient.SENDER)]

        events = [
            OutboundEvent(
                EventName.PLAYER_ASSIGNED, Recipient.SENDER, str(request.identity)
            )
        ]
        if outcome == JoinOutcome.STARTED:
            events.append(self._snapshot_event(EventName.GAME_START, Recipient.ALL))
        return events

    def make_move(self, connection_id: str, data: Any) -> list[OutboundEvent]:
        """
        Make a move attempt.
        ---

        Any rejection (malformed request, not your turn, illegal move, match not running)
        only goes back to the sender and leaves the match untouched.
        """
        try:
            request = self._parse_move_request(data)
            if not self.match.is_bound_to(request.player, connection_id):
                raise NotYourTurnError(
                    f"Connection {connection_id} does not play as {request.player}."
                )
            move = Move(
                from_square=Square(request.from_x, request.from_y),
                to_square=Square(request.to_x, request.to_y),
            )
            result = self.match.make_move(request.player, move)
        except GameError as exc:
            logger.debug("Rejected move from connection %s: %s", connection_id, exc)
            return [OutboundEvent(EventName.INVALID_MOVE, Recipient.SENDER)]

        logger.info("Accepted move %s", result.record.describe())
        events = [self._snapshot_event(EventName.GAME_UPDATE, Recipient.ALL)]

        if self.match.status == Status.FINISHED:
            # for the type checker: a finished match always has a result
            assert self.match.result is not None
            logger.info("Game over, result: %s", self.match.result)
            payload = GameOverPayload(result=self.match.result)
            events.append(
                OutboundEvent(EventName.GAME_OVER, Recipient.ALL, payload.model_dump(mode="json"))
            )
        return events

    def disconnect(self, connection_id: str) -> list[OutboundEvent]:
        """A connection went away. Tear down the match if the pairing broke up."""
        if self.sessions.leave(connection_id):
            return [OutboundEvent(EventName.GAME_RESET, Recipient.ALL)]
        return []

    def snapshot(self) -> MatchSnapshot:
        return MatchSnapshot.from_model(self.match.to_model())

    # -- Internal helpers --
    def _snapshot_event(self, name: EventName, recipient: Recipient) -> OutboundEvent:
        return OutboundEvent(name, recipient, self.snapshot().model_dump(by_alias=True))

    def _parse_move_request(self, data: Any) -> MoveRequest:
        try:
            return MoveRequest.model_validate(data)
        except ValidationError as exc:
            raise InvalidRequestError(f"Cannot interpret move request: {exc}") from exc
