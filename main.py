"""
Wiki Table Dump controller.

Usage: wtd https://en.wikipedia.org/wiki/Member_states_of_the_United_Nations [myDataBase.db]
"""
import argparse
import sys

import database
import page_downloader
import sql_builder
import table_parser
from errors import WikiTableError


def setup_cli(argv=None):
    """
    Configure and parse command-line arguments.
    """
    parser = argparse.ArgumentParser(
        prog="wtd",
        description="Dump the first wikitable of a page into a SQLite database.",
    )
    parser.add_argument(
        "url",
        type=str,
        help="The url to pull information from.",
    )
    parser.add_argument(
        "file_name",
        nargs="?",
        default=database.DB_FILE,
        help=f"Database file to write to. Defaults to {database.DB_FILE}.",
    )
    parser.add_argument(
        "--preview",
        type=int,
        default=5,
        help="Number of stored rows to print after a successful run (0 disables).",
    )
    return parser.parse_args(argv)


def extract_data(body: str, database_name: str) -> table_parser.Table:
    """
    Writes the first wikitable of an HTML page into the database.

    The table is created first and the rows are inserted with a second
    statement. A failed insert leaves the created table behind.
    """
    table = table_parser.extract_table(body)
    print(f"[extract_data] Columns: {table_parser.column_summary(table.columns)}")

    create_statement = sql_builder.build_create_table(table.name, table.columns)
    cleaned_rows = sql_builder.clean_rows(table.rows)
    insert_statement = sql_builder.build_insert(table.name, cleaned_rows)

    conn = database.open_database(database_name)
    try:
        database.create_table(conn, create_statement)
        if cleaned_rows:
            database.insert_rows(conn, insert_statement)
        else:
            print("[extract_data] No rows to insert. Skipping INSERT.")
    finally:
        conn.close()

    return table


def dump_table(url: str, database_name: str = database.DB_FILE) -> table_parser.Table:
    """
    Fetches the page at url and writes its first wikitable into database_name.
    """
    print(f"[dump_table] Fetching {url}...")
    body = page_downloader.fetch_page(url)
    return extract_data(body, database_name)


def main(argv=None) -> int:
    args = setup_cli(argv)

    try:
        table = dump_table(args.url, args.file_name)
    except WikiTableError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print("Success!")

    if args.preview > 0:
        print("\n--- Verifying Data in Database ---")
        table_name = sql_builder.table_identifier(table.name)
        df = database.read_table(table_name, args.file_name)
        if not df.empty:
            print(f"Successfully fetched {len(df)} rows from {table_name}.")
            print(df.head(args.preview))
        else:
            print(f"No rows found in DB for {table_name}.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
