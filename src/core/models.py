"""
Boundary layer data model(s).

The Match hands a MatchModel to the Service, and the Service turns it into whatever the API layer sends out.
Neither side needs to know how the other one represents a match internally.
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make MatchModel easier to read
PieceTag = str
PlayerName = str
ConnectionId = str


@dataclass
class MatchModel:
    """Transport-safe snapshot of the match used between API, Service, and Game layers."""

    board: list[list[Optional[PieceTag]]]
    current_player: PlayerName
    players: dict[PlayerName, ConnectionId]
    move_history: list[str]
    status: str
    result: Optional[str] = None
