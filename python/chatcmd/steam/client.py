"""SteamClient — DayZ server lookups against the Steam master server API.

Usage::

    async with SteamClient(settings) as client:
        servers = await client.servers(r"\\gameaddr\\1.2.3.4:2302")
"""
from __future__ import annotations

from chatcmd.config import Settings
from chatcmd.steam.models import GameServer, ServerListResponse
from chatcmd.upstream import UpstreamClient, parse_body

SERVER_LIST_PATH = "/IGameServersService/GetServerList/v1/"
DAYZ_GAMEDIR = r"\gamedir\dayz"


class SteamClient(UpstreamClient):
    """Async client for IGameServersService/GetServerList."""

    def __init__(self, settings: Settings) -> None:
        super().__init__(settings, base_url=settings.steam_api_base_url)
        self._api_key = settings.steam_api_key
        self._limit = settings.steam_server_limit

    async def servers(self, extra_filter: str = "", limit: int | None = None) -> list[GameServer]:
        """Return DayZ servers matching *extra_filter*.

        Args:
            extra_filter: Additional master-server filter clauses appended to
                ``\\gamedir\\dayz``, e.g. ``\\name_match\\*``.
            limit: Maximum number of servers; defaults to settings.steam_server_limit.

        Raises:
            UpstreamError: Steam could not be reached or returned garbage.
        """
        params = {
            "filter": DAYZ_GAMEDIR + extra_filter,
            "limit": limit or self._limit,
            "key": self._api_key,
        }
        body = await self._get_json(SERVER_LIST_PATH, params=params)
        return parse_body(ServerListResponse, body).response.servers

    async def find_server(self, ip: str, port: int) -> list[GameServer]:
        """Servers whose game address is ``ip:port``."""
        return await self.servers(rf"\gameaddr\{ip}:{port}", limit=10)
