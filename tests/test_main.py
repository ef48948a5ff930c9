"""Tests for the HTTP and WebSocket surface."""

import asyncio

import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from snake_arcade.config import Settings
from snake_arcade import main as main_module
from snake_arcade.main import app, manager


@pytest.fixture
def client():
    app.state.settings = Settings(grid_width=10, grid_height=10, refresh_rate_ms=10)
    with TestClient(app) as c:
        yield c
    app.state.settings = Settings()


def receive_until(ws, predicate, limit=200):
    for _ in range(limit):
        msg = ws.receive_json()
        if predicate(msg):
            return msg
    raise AssertionError("expected message never arrived")


class TestHttp:
    def test_index_page(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "<canvas" in response.text

    def test_config(self, client):
        response = client.get("/config")
        assert response.status_code == 200
        assert response.json() == {"grid": [10, 10], "refresh_rate": 10}


class TestWebSocket:
    def test_welcome_then_state(self, client):
        with client.websocket_connect("/ws") as ws:
            welcome = ws.receive_json()
            assert welcome == {"type": "welcome", "grid": [10, 10], "refresh_rate": 10}
            state = ws.receive_json()
            assert state["type"] == "state"
            assert state["snake"] == [[5, 5]]
            assert state["status"] == "running"
            assert state["score"] == 0

    def test_runs_into_wall_then_restarts(self, client):
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            over = receive_until(ws, lambda m: m["status"] == "game_over")
            assert over["death_reason"] == "wall"
            assert "game_over" in over["events"]

            ws.send_json({"type": "restart"})
            fresh = ws.receive_json()
            assert fresh["status"] == "running"
            assert fresh["score"] == 0
            assert len(fresh["snake"]) == 1

    def test_quit_closes_socket(self, client):
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            ws.send_json({"type": "input", "key": "Escape"})
            with pytest.raises(WebSocketDisconnect):
                receive_until(ws, lambda m: False)

    def test_session_removed_on_disconnect(self, client):
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            ws.send_json({"type": "quit"})
            with pytest.raises(WebSocketDisconnect):
                receive_until(ws, lambda m: False)
        assert not manager.connections

    def test_binary_frame_ignored(self, client):
        app.state.settings = Settings(grid_width=10, grid_height=10, refresh_rate_ms=100)
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            ws.receive_json()
            ws.send_bytes(b"\x00\x01")
            ws.send_json({"type": "input", "direction": "down"})
            state = receive_until(ws, lambda m: m["direction"] == "down", limit=20)
            assert state["status"] == "running"
            assert state["snake"][0][1] > 5

    def test_tick_task_finished_on_disconnect(self, client, monkeypatch):
        cancelled = []

        async def idle_loop(ws, game):
            try:
                await asyncio.sleep(3600)
            except asyncio.CancelledError:
                cancelled.append(True)
                raise

        monkeypatch.setattr(main_module, "game_loop", idle_loop)
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            ws.receive_json()
        assert cancelled == [True]
        assert not manager.connections
