import sqlite3
from pathlib import Path

import pandas as pd

DB_PATH = Path(__file__).resolve().parent / "izurvive.db"


def query(table: str, sql: str = "SELECT *", query: str = None, db_path: Path = DB_PATH) -> pd.DataFrame:
    conn = sqlite3.connect(db_path)
    try:
        if query:
            df = pd.read_sql_query(query, conn)
        else:
            df = pd.read_sql_query(f"{sql} FROM {table}", conn)
    finally:
        conn.close()
    return df
