import sqlite3

import pandas as pd

from errors import CreateTableError, DatabaseConnectionError, InsertError

DB_FILE = "wikiDatabase.db"


def open_database(database_name: str = DB_FILE) -> sqlite3.Connection:
    """
    Opens (or creates) the SQLite database file.
    Raises DatabaseConnectionError when the file cannot be opened.
    """
    try:
        return sqlite3.connect(database_name)
    except sqlite3.Error as exc:
        print(f"[open_database] Could not connect to sqlite3 database {database_name}: {exc}")
        raise DatabaseConnectionError(
            f"Failed to connect to sqlite3 database {database_name}: {exc}"
        ) from exc


def create_table(conn: sqlite3.Connection, create_table_statement: str):
    """Executes a CREATE TABLE statement."""
    try:
        conn.execute(create_table_statement)
    except sqlite3.Error as exc:
        raise CreateTableError(exc, create_table_statement) from exc
    print("[create_table] Successfully Created table")


def insert_rows(conn: sqlite3.Connection, insert_statement: str):
    """
    Executes the INSERT statement and commits it.
    The table created before is left in place when this fails.
    """
    print("[insert_rows] Inserting rows")
    try:
        conn.execute(insert_statement)
        conn.commit()
    except sqlite3.Error as exc:
        raise InsertError(exc, insert_statement) from exc


def read_table(table_name: str, database_name: str = DB_FILE) -> pd.DataFrame:
    """
    Reads a stored table back into a pandas DataFrame.
    Returns an empty DataFrame when the table cannot be read.
    """
    conn = None
    try:
        conn = sqlite3.connect(database_name)
        return pd.read_sql_query(f'SELECT * FROM "{table_name}"', conn)
    except Exception as e:
        print(f"Error querying database: {e}")
        return pd.DataFrame()
    finally:
        if conn is not None:
            conn.close()


if __name__ == "__main__":
    conn = open_database()
    print(f"Opened {DB_FILE}.")
    conn.close()
