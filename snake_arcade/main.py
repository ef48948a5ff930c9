"""FastAPI application: HTTP routes, WebSocket endpoint, per-session game loop."""

import asyncio
import logging
import os
from contextlib import asynccontextmanager, suppress
from typing import Optional, Sequence

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.responses import FileResponse

from .config import Settings, parse_args
from .connection_manager import ConnectionManager, build_state_msg, build_welcome_msg, parse_client_msg
from .game import Game, new_game
from .models import Command

logger = logging.getLogger(__name__)

HTML_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static", "index.html")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(
        "Snake server ready: %dx%d grid, refresh rate %dms",
        settings.grid_width, settings.grid_height, settings.refresh_rate_ms,
    )
    yield


app = FastAPI(lifespan=lifespan)
app.state.settings = Settings()
manager = ConnectionManager()


@app.get("/")
async def serve_index():
    return FileResponse(HTML_PATH, media_type="text/html")


@app.get("/config")
async def get_config():
    settings: Settings = app.state.settings
    return {
        "grid": [settings.grid_width, settings.grid_height],
        "refresh_rate": settings.refresh_rate_ms,
    }


@app.websocket("/ws")
async def websocket_endpoint(ws: WebSocket):
    settings: Settings = app.state.settings
    game = new_game(settings.grid_width, settings.grid_height, settings.refresh_rate_ms)
    await manager.connect(ws, game)
    loop_task = None
    try:
        await manager.send_personal(ws, build_welcome_msg(game))
        await manager.send_personal(ws, build_state_msg(game))
        loop_task = asyncio.create_task(game_loop(ws, game))
        while True:
            message = await ws.receive()
            if message["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(message.get("code", 1000))
            raw = message.get("text")
            if raw is None:
                logger.debug("Ignoring non-text frame")
                continue
            action = parse_client_msg(raw)
            if action is Command.QUIT:
                await ws.close()
                break
            was_running = game.is_running
            game.handle_input(action)
            if game.is_running and not was_running:
                # Push the fresh board without waiting for a tick.
                await manager.send_personal(ws, build_state_msg(game))
    except WebSocketDisconnect:
        pass
    finally:
        if loop_task is not None:
            loop_task.cancel()
            with suppress(asyncio.CancelledError):
                await loop_task
        manager.disconnect(ws)


async def game_loop(ws: WebSocket, game: Game):
    interval = game.refresh_rate_ms / 1000
    while True:
        await asyncio.sleep(interval)
        if not game.tick():
            continue
        if not await manager.send_personal(ws, build_state_msg(game)):
            return


def main(argv: Optional[Sequence[str]] = None):
    import uvicorn

    settings = parse_args(argv)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.state.settings = settings
    logger.info("Use arrow keys to move, R to restart, ESC to exit")
    print(f"Snake server starting on http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
