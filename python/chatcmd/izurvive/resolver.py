"""LocationResolver — wires the alias store, candidate filter, ranker and formatter.

Usage::

    store = AliasStore.from_sqlite(settings.izurvive_db_path)
    resolver = LocationResolver(store, prefix=settings.izurvive_prefix)
    text = resolver.search("Cherno", FormatOptions(max_results=3))
"""
from __future__ import annotations

import logging
from urllib.parse import unquote_plus

from chatcmd.izurvive.formatter import build_listing, format_matches
from chatcmd.izurvive.models import DEFAULT_ZOOM, FormatOptions, LocationListing, RankedMatch
from chatcmd.izurvive.search import CandidateFilter, rank
from chatcmd.izurvive.store import AliasStore

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class LocationSearchError(Exception):
    """Base class for user-facing search failures."""


class NoSearchTermError(LocationSearchError):
    """Raised when the search text is missing or blank."""


class NoResultsError(LocationSearchError):
    """Raised when no location matches the search text."""

    def __init__(self, search: str):
        self.search = search
        super().__init__(f"No results found for search: {search}")


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------


class LocationResolver:
    """Maps free-text searches to catalog locations."""

    def __init__(self, store: AliasStore, prefix: str) -> None:
        self.store = store
        self.prefix = prefix
        self._filter = CandidateFilter(store)

    @staticmethod
    def clean(search: str | None) -> str:
        """Trim and percent-decode raw search input.

        Raises:
            NoSearchTermError: Input is None or blank.
        """
        if search is None or not search.strip():
            raise NoSearchTermError("A search term is required")
        cleaned = unquote_plus(search.strip()).strip()
        if not cleaned:
            raise NoSearchTermError("A search term is required")
        return cleaned

    def find(self, search: str | None, max_results: int = 1) -> list[RankedMatch]:
        """Return ranked matches for *search*.

        Raises:
            NoSearchTermError: *search* is missing or blank.
            NoResultsError: Nothing in the catalog matched.
        """
        cleaned = self.clean(search)
        candidates = self._filter.candidates(cleaned)
        matches = rank(cleaned, candidates, self.store, max_results=max_results)
        if not matches:
            logger.debug("No izurvive candidates for %r", cleaned)
            raise NoResultsError(cleaned)
        return matches

    def search(self, search: str | None, options: FormatOptions | None = None) -> str:
        options = options or FormatOptions()
        matches = self.find(search, max_results=options.max_results)
        return format_matches(matches, self.prefix, options)

    def listing(self, zoom: int = DEFAULT_ZOOM) -> LocationListing:
        return build_listing(self.store, self.prefix, zoom)
