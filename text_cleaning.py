"""
Cell level cleaning for wiki table markup.

Cells arrive as the inner HTML of <td>/<th> elements. The helpers here strip
markup and footnote markers, normalize number formatting and turn a row of
cells into SQL literal tokens ready to be spliced into an INSERT statement.
"""
import re
from typing import List, Sequence

HTML_TAG_PATTERN = re.compile(r"(<.*?>)")
CITATION_PATTERN = re.compile(r"(\[[a-zA-Z0-9]+\])")
LINE_BREAK_PATTERN = re.compile(r"<br\s*/?>", re.IGNORECASE)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def _replace_spacing_markup(s: str) -> str:
    return LINE_BREAK_PATTERN.sub(" ", s.replace("&nbsp;", " ").replace("\xa0", " "))


def remove_html_tags(s: str) -> str:
    """
    Replaces non-breaking spaces and line breaks (<br>, <br/>) with a plain
    space, removes every tag with a single non-greedy regex pass and trims
    the result. Entities other than &nbsp; are left as they are.
    """
    cleaned = _replace_spacing_markup(s)
    cleaned = HTML_TAG_PATTERN.sub("", cleaned)
    # Removing a tag can join the two halves of an entity, e.g. "&nb<i>sp;".
    cleaned = _replace_spacing_markup(cleaned)
    return cleaned.strip()


sanitize = remove_html_tags


def remove_wiki_citation_links(s: str) -> str:
    """
    Removes footnote markers such as [4], [b] or [B12].
    """
    return CITATION_PATTERN.sub("", s)


def clean_integer_or_double_string(s: str) -> str:
    """
    Drops thousands separators and percent signs so "1,402,843,280" and
    "18.0%" can be read as numbers.
    """
    return s.replace(",", "").replace("%", "")


def escape_apostrophes(s: str) -> str:
    # Values are quoted with single quotes in the INSERT statement.
    return s.replace("'", "''")


def clean_header_string(header: str) -> str:
    """Removes markup, citations and surrounding whitespace from a header cell."""
    without_tags = remove_html_tags(header)
    return remove_wiki_citation_links(without_tags).strip()


def coerce_numeric(value_text: str):
    """
    Attempts to read an already cleaned string as a number.

    Returns an int for 64-bit signed integer literals, a float for other
    decimal literals (optional sign, fraction and exponent) and None for
    everything else. Surrounding whitespace, digit separators and spelled
    out values like "inf" or "nan" are not numbers here.
    """
    if value_text is None:
        return None

    if _INTEGER_PATTERN.fullmatch(value_text):
        number = int(value_text)
        if INT64_MIN <= number <= INT64_MAX:
            return number

    if _FLOAT_PATTERN.fullmatch(value_text):
        return float(value_text)

    return None


def clean_cell(cell: str) -> str:
    """
    Converts one raw cell into a SQL literal token.

    Numbers are returned bare with their separators and percent signs
    removed; anything else is returned single quoted with apostrophes doubled.
    """
    text = remove_html_tags(cell)
    text = escape_apostrophes(text)
    text = remove_wiki_citation_links(text).strip()

    numeric_text = clean_integer_or_double_string(text).strip()
    if coerce_numeric(numeric_text) is not None:
        return numeric_text

    return f"'{text}'"


def clean_row(row: Sequence[str]) -> List[str]:
    """
    Cleans every cell of a row, keeping cell order.
    An empty row gives an empty list; callers drop those rows.
    """
    return [clean_cell(cell) for cell in row]
