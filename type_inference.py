from enum import Enum

from text_cleaning import (
    clean_integer_or_double_string,
    coerce_numeric,
    remove_html_tags,
    remove_wiki_citation_links,
)


class SqlType(Enum):
    """SQLite column affinities a wiki table column can be stored as."""
    INTEGER = "INTEGER"
    REAL = "REAL"
    NUMERIC = "NUMERIC"
    TEXT = "TEXT"

    def __str__(self) -> str:
        return self.name


BOOLEAN_LITERALS = {"true", "false"}


def infer_type(sample_datum: str) -> SqlType:
    """
    Derives the SQL type of a single sample cell.

    Markup and citations are removed first. Numbers may carry thousands
    separators or a percent sign. Dates are not recognized and stay TEXT.

    Args:
        sample_datum: Raw cell content, possibly containing HTML.

    Returns:
        INTEGER, REAL, NUMERIC (for true/false) or TEXT.
    """
    html_cleaned = remove_html_tags(sample_datum)
    removed_citations = remove_wiki_citation_links(html_cleaned)
    cleaned = clean_integer_or_double_string(removed_citations)

    number = coerce_numeric(cleaned)
    if isinstance(number, int):
        return SqlType.INTEGER
    if isinstance(number, float):
        return SqlType.REAL

    if removed_citations in BOOLEAN_LITERALS:
        return SqlType.NUMERIC

    return SqlType.TEXT
