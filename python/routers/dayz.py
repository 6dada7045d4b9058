"""Router for the DayZ chatbot commands backed by Steam and dayz.com."""

import logging

from fastapi import APIRouter, Request

from chatcmd import responses
from chatcmd.config import Settings
from chatcmd.dayz.news import NewsClient, article_link, find_article
from chatcmd.dayz.servers import (
    DEFAULT_RANDOM_FIELDS,
    PlayerCountUnavailableError,
    choose_random,
    describe_server,
    pick_server,
    player_count,
)
from chatcmd.steam.client import SteamClient
from chatcmd.upstream import UpstreamError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dayz", tags=["dayz"])

# Initialised at startup, torn down at shutdown.
_steam: SteamClient | None = None
_news: NewsClient | None = None
_article_base_url: str = ""


async def startup(settings: Settings) -> None:
    """Open the Steam and news HTTP clients.  Called from main.py lifespan."""
    global _steam, _news, _article_base_url
    _steam = SteamClient(settings)
    _news = NewsClient(settings)
    _article_base_url = settings.dayz_article_base_url
    logger.info("DayZ clients ready")


async def shutdown() -> None:
    """Close the Steam and news HTTP clients.  Called from main.py lifespan."""
    global _steam, _news
    for client in (_steam, _news):
        if client is not None:
            await client.aclose()
    _steam = None
    _news = None


@router.get("")
def base(request: Request):
    """List the DayZ endpoints."""
    names = ["izurvive", "dayz_players", "dayz_random_server", "dayz_status_report",
             "dayz_steam_status_report"]
    return responses.json({"endpoints": [str(request.url_for(n)) for n in names]})


@router.get("/players", name="dayz_players")
async def players(ip: str | None = None, port: str | None = None, query: str | None = None):
    """Current player count of the server whose game address is ``ip:port``."""
    game_port = responses.int_param(port, 0)
    if not ip or not game_port:
        return responses.text('[Error: Please specify "ip" AND "port".]')
    query_port = responses.int_param(query, 0) or None

    address = f"{ip}:{game_port}"
    try:
        servers = await _steam.find_server(ip, game_port)
    except UpstreamError as exc:
        logger.error("Unable to query gameserver address %s: %s", address, exc)
        return responses.text("[Error: Unable to query server.]")

    server = pick_server(servers, game_port, query_port)
    if server is None:
        logger.error("Unable to query gameserver address: %s", address)
        return responses.text("[Error: Unable to query server.]")

    try:
        return responses.text(player_count(server))
    except PlayerCountUnavailableError:
        return responses.text("[Error: Unable to retrieve player count.]")


@router.get("/random-server", name="dayz_random_server")
async def random_server(results: str = DEFAULT_RANDOM_FIELDS):
    """A random DayZ server from the master list, rendered as the requested fields."""
    try:
        servers = await _steam.servers(r"\name_match\*")
    except UpstreamError:
        servers = []

    if not servers:
        return responses.text("An error occurred while retrieving server info.")

    return responses.text(describe_server(choose_random(servers), results))


@router.get("/news", name="dayz_news")
@router.get("/status-report", name="dayz_status_report")
@router.get("/steam-status-report", name="dayz_steam_status_report")
async def news(search: str | None = None):
    """Latest DayZ news article, optionally the first one whose title matches ``search``."""
    try:
        articles = await _news.articles()
    except UpstreamError:
        articles = []

    if not articles:
        return responses.text("No DayZ news articles found.")

    article = find_article(articles, search)
    if article is None:
        return responses.text(
            f"No DayZ news articles were found matching the following search: {search}"
        )
    return responses.text(article_link(article, _article_base_url))
