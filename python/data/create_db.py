"""
Top-level script to build the shared catalog database.

Creates data/izurvive.db and populates it by calling each
data source's populate_db function.
"""
import sys
from pathlib import Path

from data.izurvive.create_db import populate_db as populate_izurvive

DB_PATH = Path(__file__).resolve().parent / "izurvive.db"


def build_db(db_path: Path = DB_PATH):
    print(f"Building database at {db_path}")

    print("  Populating izurvive locations and spellings...")
    populate_izurvive(db_path)

    print("Done.")


if __name__ == "__main__":
    build_db(Path(sys.argv[1]) if len(sys.argv) > 1 else DB_PATH)
