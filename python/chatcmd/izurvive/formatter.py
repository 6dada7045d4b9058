"""Rendering of search results and the catalog listing."""
from __future__ import annotations

from typing import Sequence

from chatcmd.izurvive.models import DEFAULT_ZOOM, FormatOptions, LocationListing, RankedMatch
from chatcmd.izurvive.store import AliasStore

ESCAPED_SEMICOLON = "%3B"


def format_matches(matches: Sequence[RankedMatch], prefix: str, options: FormatOptions) -> str:
    """Join ranked matches into a single deep-link string.

    Each entry is ``"<name> - <prefix>#c=<lat>;<lon>;<zoom>"`` with every
    semicolon percent-encoded.  Escaping is applied per entry, before joining,
    so the separator is left untouched.
    """
    entries = []
    for match in matches:
        url = f"{match.location.name} - {prefix}{match.location.fragment(options.zoom)}"
        entries.append(url.replace(";", ESCAPED_SEMICOLON))
    return options.separator.join(entries)


def build_listing(store: AliasStore, prefix: str, zoom: int = DEFAULT_ZOOM) -> LocationListing:
    locations: dict[str, str] = {}
    spellings: dict[str, list[str]] = {}
    for location in store.all_locations():
        locations[location.name] = location.fragment(zoom)
        spellings[location.name] = store.spellings_of(location.id)
    return LocationListing(
        url_template=prefix + "{location}",
        locations=locations,
        spellings=spellings,
    )


def render_listing_text(listing: LocationListing, prefix: str) -> str:
    """Human-readable rendering of a listing, one location per block."""
    lines = ["Available Search Locations", ""]
    for name, fragment in listing.locations.items():
        lines.append(f"{name} - {prefix}{fragment}")
        aliases = listing.spellings.get(name, [])
        if aliases:
            lines.append("    " + ", ".join(aliases))
    return "\n".join(lines)
