"""
Realtime gateway: one websocket per client, JSON frames of the form {"event": ..., "data": ...}.

All inbound events are handled one at a time (including delivering the resulting events),
so every client sees the same sequence of match snapshots.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Optional
from uuid import uuid4

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError

from src.api.events import OutboundEvent, Recipient
from src.api.models import HealthResponse, InboundMessage
from src.config import Settings, get_settings
from src.services.game_service import GameService

logger = logging.getLogger(__name__)


class ConnectionManager:
    """Registry of the open websockets, by connection id."""

    def __init__(self) -> None:
        self.active: dict[str, WebSocket] = {}

    async def connect(self, websocket: WebSocket) -> str:
        await websocket.accept()
        connection_id = uuid4().hex
        self.active[connection_id] = websocket
        logger.info("Client connected: %s", connection_id)
        return connection_id

    def disconnect(self, connection_id: str) -> None:
        self.active.pop(connection_id, None)
        logger.info("Client disconnected: %s", connection_id)

    async def send(self, connection_id: str, message: dict[str, Any]) -> None:
        websocket = self.active.get(connection_id)
        if websocket is None:
            return
        try:
            await websocket.send_json(message)
        except (WebSocketDisconnect, RuntimeError) as exc:
            # The socket's own receive loop will notice and handle the disconnect.
            logger.warning("Could not deliver %s to %s: %s", message["event"], connection_id, exc)

    async def broadcast(self, message: dict[str, Any]) -> None:
        for connection_id in list(self.active):
            await self.send(connection_id, message)


class RealtimeGateway:
    def __init__(
        self,
        service: Optional[GameService] = None,
        connections: Optional[ConnectionManager] = None,
    ) -> None:
        self.service = service or GameService()
        self.connections = connections or ConnectionManager()
        self._lock = asyncio.Lock()

    async def serve(self, websocket: WebSocket) -> None:
        """Lifetime of a single client connection."""
        connection_id = await self.connections.connect(websocket)
        try:
            while True:
                frame = await websocket.receive()
                if frame["type"] == "websocket.disconnect":
                    break
                raw = frame.get("text")
                if raw is None:
                    logger.warning("Ignoring non-text frame from %s", connection_id)
                    continue
                await self._on_message(connection_id, raw)
        except WebSocketDisconnect:
            pass
        finally:
            self.connections.disconnect(connection_id)
            async with self._lock:
                events = self.service.disconnect(connection_id)
                await self.deliver(connection_id, events)

    async def deliver(self, sender_id: str, events: list[OutboundEvent]) -> None:
        for event in events:
            message = event.to_message()
            if event.recipient == Recipient.ALL:
                await self.connections.broadcast(message)
            else:
                await self.connections.send(sender_id, message)

    async def _on_message(self, connection_id: str, raw: str) -> None:
        try:
            message = InboundMessage.model_validate_json(raw)
        except ValidationError:
            logger.warning("Ignoring malformed message from %s: %r", connection_id, raw)
            return

        async with self._lock:
            events = self.service.handle(connection_id, message)
            await self.deliver(connection_id, events)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with a fresh match."""
    settings = settings or get_settings()
    gateway = RealtimeGateway()

    app = FastAPI(
        title="Heroes API",
        description="Realtime server for a two-player strategy game on a 5x5 board",
        version="1.0.0",
    )
    app.state.gateway = gateway

    @app.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        match = gateway.service.match
        return HealthResponse(
            status="ok", players=len(match.players), match_status=str(match.status)
        )

    @app.websocket(settings.ws_path)
    async def realtime(websocket: WebSocket) -> None:
        await gateway.serve(websocket)

    if settings.static_dir:
        static_dir = Path(settings.static_dir)
        if static_dir.is_dir():
            app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
        else:
            logger.warning("Static directory %s does not exist, not serving it", static_dir)

    return app
