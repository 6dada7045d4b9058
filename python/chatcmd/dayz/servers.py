"""Formatting helpers for the DayZ server commands."""
from __future__ import annotations

import random
from typing import Sequence

from chatcmd.steam.models import GameServer

RANDOM_SERVER_FIELDS = ("name", "ip", "players")
DEFAULT_RANDOM_FIELDS = "ip"


class PlayerCountUnavailableError(Exception):
    """Raised when a matched server does not report its player counts."""


def pick_server(
    servers: Sequence[GameServer], port: int, query_port: int | None = None
) -> GameServer | None:
    """Choose the server listening on game *port* (and *query_port*, when given)."""
    for server in servers:
        if server.gameport != port:
            continue
        if query_port is not None and server.query_port != query_port:
            continue
        return server
    return None


def player_count(server: GameServer) -> str:
    if server.players is None or server.max_players is None:
        raise PlayerCountUnavailableError(server.addr)
    return f"{server.players}/{server.max_players}"


def describe_server(server: GameServer, fields: str = DEFAULT_RANDOM_FIELDS) -> str:
    """Render the requested comma-separated *fields* of *server*, joined by " - ".

    Unknown or empty fields are skipped; when nothing remains the game
    address is used.
    """
    options = {
        "name": server.name,
        "ip": server.game_address,
        "players": (
            f"{server.players}/{server.max_players}"
            if server.players is not None and server.max_players is not None
            else ""
        ),
    }
    parts = [options[f] for f in (f.strip() for f in fields.split(",")) if options.get(f)]
    if not parts:
        parts = [options["ip"]]
    return " - ".join(parts)


def choose_random(servers: Sequence[GameServer], rng: random.Random | None = None) -> GameServer:
    rng = rng or random.SystemRandom()
    return rng.choice(list(servers))
