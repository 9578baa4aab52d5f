"""Requests and Response models"""

from typing import Any, Optional, Self

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from src.core.exceptions import InvalidIdentityError
from src.core.models import MatchModel
from src.core.shared_types import Player, Result

PieceTag = str
PlayerName = str
ConnectionId = str


class CamelModel(BaseModel):
    """Clients speak camelCase (fromX, currentPlayer, ...)"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- ENVELOPES ---
class InboundMessage(BaseModel):
    event: str
    data: Any = None


class OutboundMessage(BaseModel):
    event: str
    data: Any = None


# --- REQUEST MODELS ---
class JoinGameRequest(BaseModel):
    identity: Player

    @field_validator("identity", mode="before")
    @classmethod
    def validate_identity(cls, value: Any) -> Player:
        if value not in [player.value for player in Player]:
            raise InvalidIdentityError(
                f"Cannot join as {value!r}. Pick one from {','.join(Player)}."
            )
        return Player(value)


class MoveRequest(CamelModel):
    player: Player
    from_x: int
    from_y: int
    to_x: int
    to_y: int


# --- RESPONSE MODELS ---
class MatchSnapshot(CamelModel):
    board: list[list[Optional[PieceTag]]]
    current_player: PlayerName
    players: dict[PlayerName, ConnectionId]
    move_history: list[str]
    status: str
    result: Optional[str] = None

    @classmethod
    def from_model(cls, model: MatchModel) -> Self:
        return cls(
            board=model.board,
            current_player=model.current_player,
            players=model.players,
            move_history=model.move_history,
            status=model.status,
            result=model.result,
        )


class GameOverPayload(BaseModel):
    result: Result


class HealthResponse(CamelModel):
    status: str
    players: int
    match_status: str
