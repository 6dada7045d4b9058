"""Alias store — the read-only location catalog and its spellings.

Loaded once at startup and shared across requests without locking; nothing
in the request path mutates it.  The canonical name of every location is
also held as a spelling so that canonical-name search goes through the same
path as alias search.
"""
from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Iterable

from pandas.errors import DatabaseError

from chatcmd.izurvive.models import Location, Spelling
from data import query

logger = logging.getLogger(__name__)

LOCATIONS_TABLE = "izurvive_locations"
SPELLINGS_TABLE = "izurvive_spellings"


class CatalogUnavailableError(Exception):
    """Raised when the location catalog cannot be loaded."""


class AliasStore:
    """In-memory catalog of locations and their spellings.

    Locations keep catalog insertion order; spellings keep the order they
    were supplied in, which is the order candidates are produced in and so
    the tie-break order for ranking.
    """

    def __init__(self, locations: Iterable[Location], spellings: Iterable[Spelling]) -> None:
        self._locations: dict[int, Location] = {}
        for location in locations:
            self._locations[location.id] = location

        self._spellings: list[Spelling] = []
        self._by_location: dict[int, list[str]] = {loc_id: [] for loc_id in self._locations}
        for spelling in spellings:
            self._add_spelling(spelling)

        for location in self._locations.values():
            if location.name not in self._by_location[location.id]:
                self._add_spelling(Spelling(spelling=location.name, location_id=location.id))

    def _add_spelling(self, spelling: Spelling) -> None:
        if spelling.location_id not in self._locations:
            raise CatalogUnavailableError(
                f"Spelling {spelling.spelling!r} references unknown location {spelling.location_id}"
            )
        aliases = self._by_location[spelling.location_id]
        if spelling.spelling in aliases:
            return
        aliases.append(spelling.spelling)
        self._spellings.append(spelling)

    # -----------------------------------------------------------------------
    # Loading
    # -----------------------------------------------------------------------

    @classmethod
    def from_sqlite(cls, db_path: Path) -> "AliasStore":
        """Load the catalog from the sqlite database built by data/izurvive/create_db.py.

        Raises:
            CatalogUnavailableError: The file or either table is missing.
        """
        db_path = Path(db_path)
        if not db_path.exists():
            raise CatalogUnavailableError(f"Catalog database not found: {db_path}")

        try:
            loc_df = query(
                LOCATIONS_TABLE,
                query=f"SELECT id, name_en, latitude, longitude FROM {LOCATIONS_TABLE} ORDER BY id",
                db_path=db_path,
            )
            sp_df = query(
                SPELLINGS_TABLE,
                query=f"SELECT location_id, spelling FROM {SPELLINGS_TABLE} ORDER BY id",
                db_path=db_path,
            )
        except (DatabaseError, sqlite3.Error) as exc:
            raise CatalogUnavailableError(f"Catalog database unreadable: {exc}") from exc

        locations = [
            Location(
                id=int(row.id),
                name=row.name_en,
                latitude=float(row.latitude),
                longitude=float(row.longitude),
            )
            for row in loc_df.itertuples(index=False)
        ]
        spellings = [
            Spelling(spelling=row.spelling, location_id=int(row.location_id))
            for row in sp_df.itertuples(index=False)
        ]
        store = cls(locations, spellings)
        logger.info(
            "Loaded izurvive catalog: %d locations, %d spellings",
            len(store), len(store.spellings()),
        )
        return store

    # -----------------------------------------------------------------------
    # Read API
    # -----------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._locations)

    def all_locations(self) -> list[Location]:
        return list(self._locations.values())

    def get(self, location_id: int) -> Location:
        return self._locations[location_id]

    def spellings_of(self, location_id: int) -> list[str]:
        """Aliases of *location_id* in catalog order; empty for unknown ids."""
        return list(self._by_location.get(location_id, []))

    def spellings(self) -> list[Spelling]:
        return list(self._spellings)
