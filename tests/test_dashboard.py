"""Tests for the read-only dashboard."""

import pytest
from fastapi.testclient import TestClient

from bot.dashboard import create_dashboard
from commands.basic_commands import register_basic_commands
from middleware import CooldownMiddleware
from modules import StatsModule

from conftest import make_command


@pytest.fixture
def client(bot):
    register_basic_commands(bot)
    bot.register_command(make_command("ban", category="Moderation", permissions=["BAN_MEMBERS"]))
    bot.register_module(StatsModule())
    bot.add_middleware(CooldownMiddleware(1.0))

    with TestClient(create_dashboard(bot, interval=0.01)) as client:
        yield client


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"name": "DiscordBotForge", "version": "1.0.0", "status": "stopped"}


def test_status(client):
    body = client.get("/api/status").json()

    assert body["commands"] == 4
    assert body["modules"] == 1
    assert body["middleware"] == 1
    assert body["running"] is False
    assert body["stats"]["messages"] == 0


def test_commands(client):
    body = client.get("/api/commands").json()

    ban = next(cmd for cmd in body if cmd["name"] == "ban")
    assert ban == {
        "name": "ban",
        "description": "ban command",
        "usage": "ban",
        "category": "Moderation",
        "cooldown": 0,
        "permissions": ["BAN_MEMBERS"],
    }


def test_modules(client):
    assert client.get("/api/modules").json() == [
        {"name": "Statistics", "version": "1.0.0", "status": "Stopped"},
    ]


def test_websocket_pushes_status(client):
    with client.websocket_connect("/ws") as websocket:
        first = websocket.receive_json()
        second = websocket.receive_json()

    assert first["version"] == "1.0.0"
    assert second["commands"] == 4


def test_dashboard_is_read_only(client):
    assert client.post("/api/commands").status_code == 405


def test_websocket_ignores_binary_frames(client):
    with client.websocket_connect("/ws") as websocket:
        websocket.receive_json()
        websocket.send_bytes(b"\x00\x01")
        status = websocket.receive_json()

    assert status["running"] is False
