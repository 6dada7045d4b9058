"""Pydantic models for the izurvive location catalog and search results.

Hierarchy:
  Catalog entities (read-only once loaded)
    Location        -- canonical name + map coordinates
    Spelling        -- one alias of a Location, back-referenced by id

  Search
    RankedMatch     -- (Location, matched alias, edit distance)
    FormatOptions   -- per-request rendering parameters

  Listing
    LocationListing -- url template + name→fragment + name→aliases
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ZOOM = 6
DEFAULT_SEPARATOR = " | "
DEFAULT_MAX_RESULTS = 1


class Location(BaseModel):
    """A named in-game map location."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    latitude: float
    longitude: float

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("location name must not be empty")
        return v

    def fragment(self, zoom: int = DEFAULT_ZOOM) -> str:
        """Map fragment centred on this location, coordinates truncated toward zero."""
        return f"#c={int(self.latitude)};{int(self.longitude)};{zoom}"


class Spelling(BaseModel):
    """Alias text that resolves to a Location."""

    model_config = ConfigDict(frozen=True)

    spelling: str
    location_id: int

    @field_validator("spelling")
    @classmethod
    def _spelling_not_blank(cls, v: str) -> str:
        if not v:
            raise ValueError("spelling must not be empty")
        return v


class RankedMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    location: Location
    spelling: str
    distance: int


class FormatOptions(BaseModel):
    """Rendering parameters taken from a single request."""

    max_results: int = Field(DEFAULT_MAX_RESULTS, ge=1)
    separator: str = DEFAULT_SEPARATOR
    zoom: int = DEFAULT_ZOOM


class LocationListing(BaseModel):
    """Full catalog listing keyed by canonical location name."""

    url_template: str
    locations: dict[str, str]
    spellings: dict[str, list[str]]
