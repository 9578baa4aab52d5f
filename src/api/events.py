"""Names of the events travelling over the realtime channel, and who receives the outbound ones."""

from dataclasses import dataclass
from enum import Enum, StrEnum, auto
from typing import Any

from src.api.models import OutboundMessage


class EventName(StrEnum):
    # inbound
    JOIN_GAME = "joinGame"
    MOVE = "move"
    # outbound
    PLAYER_ASSIGNED = "playerAssigned"
    GAME_START = "gameStart"
    GAME_UPDATE = "gameUpdate"
    INVALID_MOVE = "invalidMove"
    GAME_OVER = "gameOver"
    GAME_RESET = "gameReset"


class Recipient(Enum):
    SENDER = auto()
    ALL = auto()


@dataclass(frozen=True)
class OutboundEvent:
    name: EventName
    recipient: Recipient
    payload: Any = None

    def to_message(self) -> dict[str, Any]:
        return OutboundMessage(event=self.name, data=self.payload).model_dump(by_alias=True)
