"""Shared fixtures for the izurvive location search tests."""
import json

import pytest

from chatcmd.izurvive.models import Location, Spelling
from chatcmd.izurvive.store import AliasStore

PREFIX = "https://www.izurvive.com/"

LOCATIONS = [
    Location(id=1, name="Chernogorsk", latitude=4.2, longitude=9.8),
    Location(id=2, name="Elektrozavodsk", latitude=-11.93, longitude=93.21),
    Location(id=3, name="Berezino", latitude=25.47, longitude=106.92),
    Location(id=4, name="Stary Sobor", latitude=24.06, longitude=69.03),
    Location(id=5, name="Novy Sobor", latitude=24.63, longitude=75.11),
    Location(id=6, name="Northwest Airfield", latitude=38.24, longitude=45.98),
]

SPELLINGS = [
    Spelling(spelling="Chernogorsk", location_id=1),
    Spelling(spelling="Cherno", location_id=1),
    Spelling(spelling="Elektro", location_id=2),
    Spelling(spelling="Electro", location_id=2),
    Spelling(spelling="Березино", location_id=3),
    Spelling(spelling="Stary", location_id=4),
    Spelling(spelling="Novy", location_id=5),
    Spelling(spelling="NW", location_id=6),
    Spelling(spelling="NWAF", location_id=6),
]


@pytest.fixture
def store() -> AliasStore:
    return AliasStore(LOCATIONS, SPELLINGS)


@pytest.fixture
def seed_file(tmp_path):
    """A three-location seed catalog in the data/izurvive/locations.json format."""
    path = tmp_path / "locations.json"
    path.write_text(
        json.dumps(
            [
                {"name": "Chernogorsk", "latitude": 4.2, "longitude": 9.8,
                 "spellings": ["Cherno", "Chernogorsk"]},
                {"name": "Balota", "latitude": -13.71, "longitude": 50.38,
                 "spellings": ["Balota Airstrip"]},
                {"name": "Vybor", "latitude": 29.87, "longitude": 57.18, "spellings": []},
            ]
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def catalog_db(tmp_path, seed_file):
    """A sqlite catalog built from seed_file by the real build script."""
    from data.izurvive.create_db import populate_db

    db_path = tmp_path / "izurvive.db"
    populate_db(db_path, seed_path=seed_file)
    return db_path
