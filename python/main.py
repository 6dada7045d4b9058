"""FastAPI application for the chatbot command endpoints.

Endpoints:
    GET /dayz                  — List of DayZ endpoints
    GET /dayz/izurvive         — Location search → izurvive.com map links (or ?list)
    GET /dayz/players          — Player count of a DayZ server
    GET /dayz/random-server    — Random DayZ server from the Steam master list
    GET /dayz/news             — Latest DayZ news article (also /status-report)
    GET /misc/currency         — Currency conversion
    GET /misc/time             — Current time in a timezone
    GET /misc/time-difference  — Human-readable difference between two dates
    GET /misc/timezones        — Supported timezones
    GET /health                — Health check

Run with:
    uvicorn main:app --reload
"""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chatcmd.config import Settings, get_settings
from chatcmd.izurvive.store import AliasStore
from routers import dayz, izurvive, misc

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, store: AliasStore | None = None) -> FastAPI:
    """Build the application.

    Args:
        settings: Defaults to the cached environment settings.
        store: Pre-built location catalog; loaded from
            ``settings.izurvive_db_path`` at startup when omitted.
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # CatalogUnavailableError propagates and aborts startup.
        izurvive.startup(settings, store)
        await dayz.startup(settings)
        await misc.startup(settings)
        try:
            yield
        finally:
            await misc.shutdown()
            await dayz.shutdown()
            izurvive.shutdown()

    app = FastAPI(title="Chatbot Command API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(izurvive.router)
    app.include_router(dayz.router)
    app.include_router(misc.router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
