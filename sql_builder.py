"""
Builds the SQL text for a wiki table.

Values are embedded as literals produced by text_cleaning.clean_row; this
module is the only place that knows the statement layout, so a variant using
bound parameters only has to replace these functions.
"""
from typing import List, Sequence

from table_parser import Column
from text_cleaning import clean_row


def table_identifier(table_name: str) -> str:
    """Page titles become table names with spaces replaced by underscores."""
    return table_name.replace(" ", "_")


def build_create_table(table_name: str, columns: Sequence[Column]) -> str:
    """
    Builds the CREATE TABLE statement, e.g.
    CREATE TABLE 'Member_states' ('Flag' TEXT, 'Date' TEXT);
    """
    table_columns = ", ".join(f"'{column.name}' {column.sql_type}" for column in columns)
    return f"CREATE TABLE '{table_identifier(table_name)}' ({table_columns});"


def clean_rows(rows: Sequence[Sequence[str]]) -> List[List[str]]:
    """
    Cleans every raw row into literal tokens. Rows without cells are dropped.
    """
    cleaned_rows = []
    for row in rows:
        cleaned_row = clean_row(row)
        if cleaned_row:
            cleaned_rows.append(cleaned_row)
    return cleaned_rows


def build_insert(table_name: str, cleaned_rows: Sequence[Sequence[str]]) -> str:
    """
    Builds a single INSERT covering every cleaned row.

    With no rows the result is the degenerate "INSERT into <name> VALUES ;",
    which is not valid SQL; callers skip executing it.
    """
    values = ", ".join(f"({', '.join(row)})" for row in cleaned_rows)
    return f"INSERT into {table_identifier(table_name)} VALUES {values};"
