"""Router for /dayz/izurvive — maps location searches to izurvive.com map links."""

import logging

from fastapi import APIRouter, Request

from chatcmd import responses
from chatcmd.config import Settings
from chatcmd.izurvive.formatter import render_listing_text
from chatcmd.izurvive.models import (
    DEFAULT_MAX_RESULTS,
    DEFAULT_SEPARATOR,
    DEFAULT_ZOOM,
    FormatOptions,
)
from chatcmd.izurvive.resolver import LocationResolver, NoResultsError, NoSearchTermError
from chatcmd.izurvive.store import AliasStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dayz", tags=["izurvive"])

# Initialised at startup.
_resolver: LocationResolver | None = None


def startup(settings: Settings, store: AliasStore | None = None) -> None:
    """Load the location catalog.  A missing catalog aborts application startup."""
    global _resolver
    if store is None:
        store = AliasStore.from_sqlite(settings.izurvive_db_path)
    _resolver = LocationResolver(store, prefix=settings.izurvive_prefix)
    logger.info("izurvive resolver ready (%d locations)", len(store))


def shutdown() -> None:
    global _resolver
    _resolver = None


@router.get("/izurvive", name="izurvive")
def izurvive(
    request: Request,
    search: str | None = None,
    max_results: str | None = None,
    separator: str = DEFAULT_SEPARATOR,
    zoom_level: str | None = None,
):
    """Resolve ``search`` to izurvive.com links, or list every known location with ``?list``."""
    if _resolver is None:
        return responses.text("Location search is not available right now.")

    zoom = responses.int_param(zoom_level, DEFAULT_ZOOM)

    if "list" in request.query_params:
        listing = _resolver.listing(zoom=zoom)
        if responses.wants_json(request):
            return responses.json(listing.model_dump())
        return responses.text(render_listing_text(listing, _resolver.prefix))

    options = FormatOptions(
        max_results=max(1, responses.int_param(max_results, DEFAULT_MAX_RESULTS)),
        separator=separator,
        zoom=zoom,
    )
    try:
        return responses.text(_resolver.search(search, options))
    except NoSearchTermError:
        list_url = f"{request.url_for('izurvive')}?list"
        return responses.text(
            f"Please specify ?search= or see a list of available locations: {list_url}"
        )
    except NoResultsError as exc:
        return responses.text(f"No results found for search: {exc.search}")
