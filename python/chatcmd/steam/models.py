"""Pydantic models for the Steam IGameServersService/GetServerList response.

All models use extra="ignore" to tolerate the many fields Steam returns that
the commands never read.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class GameServer(BaseModel):
    """One entry of the master server list."""

    model_config = ConfigDict(extra="ignore")

    addr: str
    gameport: int
    name: str = ""
    players: Optional[int] = None
    max_players: Optional[int] = None
    map: Optional[str] = None
    version: Optional[str] = None

    @property
    def ip(self) -> str:
        """Host part of ``addr`` (which carries the query port)."""
        return self.addr.rsplit(":", 1)[0]

    @property
    def query_port(self) -> Optional[int]:
        _, _, port = self.addr.rpartition(":")
        return int(port) if port.isdigit() else None

    @property
    def game_address(self) -> str:
        return f"{self.ip}:{self.gameport}"


class ServerListBody(BaseModel):
    model_config = ConfigDict(extra="ignore")

    servers: List[GameServer] = []


class ServerListResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    response: ServerListBody = ServerListBody()
