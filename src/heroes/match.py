"""
The Match is the entrypoint into the domain layer for the service layer.
It owns the board, whose turn it is, which connection plays which side, and the history of moves.

States: WAITING_FOR_PLAYERS -> IN_PROGRESS -> FINISHED.
There is no way back from FINISHED: the service throws the match away (and creates a new one) when a player leaves.
"""

from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import GameStateError, NotYourTurnError
from src.core.models import MatchModel
from src.core.shared_types import Player, Result, Status
from src.heroes.board import Board
from src.heroes.moves import Move, MoveRecord, MoveResult, apply_move, validate_move

# A match that reaches this many moves without a side losing all its heroes is a draw.
DRAW_MOVE_LIMIT = 100


@dataclass
class Match:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    current_player: Player
    players: dict[Player, str]
    history: list[MoveRecord]
    status: Status
    result: Optional[Result] = None

    @classmethod
    def new_match(cls) -> Self:
        """Nobody is seated yet, so the board stays empty until the second player arrives."""
        return cls(
            board=Board.empty(),
            current_player=Player.A,
            players={},
            history=[],
            status=Status.WAITING_FOR_PLAYERS,
        )

    def to_model(self) -> MatchModel:
        """Encode into the snapshot format the Service layer uses"""
        return MatchModel(
            board=self.board.to_grid(),
            current_player=str(self.current_player),
            players={str(player): conn for player, conn in self.players.items()},
            move_history=[record.describe() for record in self.history],
            status=str(self.status),
            result=str(self.result) if self.result else None,
        )

    @property
    def is_full(self) -> bool:
        return len(self.players) == len(Player)

    def is_bound(self, player: Player) -> bool:
        return player in self.players

    def is_bound_to(self, player: Player, connection_id: str) -> bool:
        return self.players.get(player) == connection_id

    def register_player(self, player: Player, connection_id: str) -> bool:
        """
        Seat a connection as the given player.
        Returns True if this completed the pairing (and so started the match).
        """
        if self.is_bound(player):
            raise GameStateError(f"Player {player} is already taken.")

        self.players[player] = connection_id
        if self.is_full:
            self._start()
            return True
        return False

    def release(self, connection_id: str) -> list[Player]:
        """Unseat every player bound to this connection. Returns the players that were released."""
        released = [
            player for player, conn in self.players.items() if conn == connection_id
        ]
        for player in released:
            del self.players[player]
        return released

    def make_move(self, player: Player, move: Move) -> MoveResult:
        """
        Attempt to make a move
        -----

        1. the match must be in progress
        2. it must be your turn
        3. the move must be legal (see moves.py)
        4. update the board, append to the history, hand the turn over
        5. check whether the match has ended
        """
        if self.status != Status.IN_PROGRESS:
            raise GameStateError(f"Match is not in progress. status: {self.status}")

        if player != self.current_player:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for player {self.current_player} to make a move first."
            )

        validate_move(self.board, player, move)

        result = apply_move(self.board, player, move)
        self.history.append(result.record)
        self.current_player = self.current_player.opponent
        self._update_status()
        return result

    def outcome(self) -> Optional[Result]:
        """
        The result of the match as the board stands now (None: keep playing).
        A side without heroes loses, even if it still has pawns.
        """
        heroes = self.board.count_heroes()
        if heroes[Player.A] == 0:
            return Result.B
        if heroes[Player.B] == 0:
            return Result.A
        if len(self.history) >= DRAW_MOVE_LIMIT:
            return Result.DRAW
        return None

    # -- PRIVATE HELPERS ---
    def _start(self) -> None:
        self.board = Board.starting_position()
        self.current_player = Player.A
        self.history = []
        self.result = None
        self.status = Status.IN_PROGRESS

    def _update_status(self) -> None:
        result = self.outcome()
        if result is not None:
            self.result = result
            self.status = Status.FINISHED
