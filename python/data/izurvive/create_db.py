import sqlite3
from pathlib import Path

from data.izurvive.parse import SEED_PATH, parse_data

DB_PATH = Path(__file__).resolve().parent.parent / "izurvive.db"


def init_db(db_path):
    conn = sqlite3.connect(db_path)
    cursor = conn.cursor()

    cursor.execute("DROP TABLE IF EXISTS izurvive_spellings")
    cursor.execute("DROP TABLE IF EXISTS izurvive_locations")

    cursor.execute("""
        CREATE TABLE izurvive_locations (
            id INTEGER PRIMARY KEY,
            name_en TEXT NOT NULL,
            latitude REAL NOT NULL,
            longitude REAL NOT NULL
        )
    """)

    cursor.execute("""
        CREATE TABLE izurvive_spellings (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            location_id INTEGER NOT NULL
                REFERENCES izurvive_locations(id) ON DELETE CASCADE,
            spelling TEXT NOT NULL
        )
    """)

    conn.commit()
    conn.close()


def insert_records(locations, spellings, db_path):
    conn = sqlite3.connect(db_path)
    cursor = conn.cursor()

    cursor.executemany("""
        INSERT INTO izurvive_locations (id, name_en, latitude, longitude)
        VALUES (?, ?, ?, ?)
    """, locations)

    cursor.executemany("""
        INSERT INTO izurvive_spellings (location_id, spelling)
        VALUES (?, ?)
    """, spellings)

    conn.commit()
    conn.close()


def populate_db(db_path, seed_path=SEED_PATH):
    init_db(db_path)
    locations, spellings = parse_data(seed_path)
    insert_records(locations, spellings, db_path)


if __name__ == "__main__":
    populate_db(DB_PATH)
