"""WebSocket connection management and state serialization."""

import json
import logging
from typing import Optional, Union

from fastapi import WebSocket

from .constants import DIRECTIONS, KEY_BINDINGS
from .game import Game
from .models import Command, Direction

logger = logging.getLogger(__name__)


class ConnectionManager:
    def __init__(self):
        self.connections: dict[WebSocket, Game] = {}

    async def connect(self, ws: WebSocket, game: Game):
        await ws.accept()
        self.connections[ws] = game
        logger.info("Session opened (%d active)", len(self.connections))

    def disconnect(self, ws: WebSocket):
        if self.connections.pop(ws, None) is not None:
            logger.info("Session closed (%d active)", len(self.connections))

    async def send_personal(self, ws: WebSocket, message: str) -> bool:
        """Send to one socket, dropping it if the send fails."""
        if ws not in self.connections:
            return False
        try:
            await ws.send_text(message)
        except Exception as exc:
            logger.debug("Dropping connection after failed send: %s", exc)
            self.disconnect(ws)
            return False
        return True


def build_welcome_msg(game: Game) -> str:
    return json.dumps({
        "type": "welcome",
        "grid": [game.grid_width, game.grid_height],
        "refresh_rate": game.refresh_rate_ms,
    })


def build_state_msg(game: Game) -> str:
    return json.dumps({
        "type": "state",
        "snake": list(game.snake),
        "food": game.food.position,
        "score": game.score,
        "status": game.status.value,
        "direction": game.snake.direction.value,
        "death_reason": game.death_reason,
        "events": game.events,
    })


def action_from_key(key) -> Union[Direction, Command, None]:
    action = KEY_BINDINGS.get(key) if isinstance(key, str) else None
    if action in DIRECTIONS:
        return Direction(action)
    if action is not None:
        return Command(action)
    return None


def parse_client_msg(raw: str) -> Union[Direction, Command, None]:
    """Decode a client message into a direction or command, None if unusable."""
    try:
        msg = json.loads(raw)
    except json.JSONDecodeError:
        logger.debug("Ignoring malformed message: %r", raw[:80])
        return None
    if not isinstance(msg, dict):
        return None

    msg_type = msg.get("type")
    if msg_type == "input":
        d = msg.get("direction")
        if isinstance(d, str) and d in DIRECTIONS:
            return Direction(d)
        return action_from_key(msg.get("key"))
    elif msg_type == "restart":
        return Command.RESTART
    elif msg_type == "quit":
        return Command.QUIT

    logger.debug("Ignoring unknown message type: %r", msg_type)
    return None
