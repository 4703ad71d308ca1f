"""
Locates the first wikitable on a page and turns it into a typed Table.

The page is parsed with lxml's forgiving HTML parser; cells are kept as their
inner HTML so the cleaning helpers see the same markup a browser would.
"""
from dataclasses import dataclass
from html import escape
from typing import List, Sequence

from lxml import etree

from errors import (
    HeaderAndTypesAmountMismatch,
    TableBodyNotFound,
    TableHeaderNotFound,
    TableNotFound,
)
from text_cleaning import clean_header_string, remove_html_tags
from type_inference import SqlType, infer_type

# Equivalent of the CSS selector "table.wikitable".
WIKI_TABLE_XPATH = "//table[contains(concat(' ', normalize-space(@class), ' '), ' wikitable ')]"
PAGE_TITLE_XPATH = "//h1"


@dataclass(frozen=True)
class Column:
    """A column name and the SQL type inferred for it."""
    name: str
    sql_type: SqlType


@dataclass(frozen=True)
class RawTable:
    """The pieces of a located table before any type inference."""
    headers: List[str]
    rows: List[List[str]]
    samples: List[str]


@dataclass(frozen=True)
class Table:
    """A wiki table ready to be written: name, typed columns and raw rows."""
    name: str
    columns: List[Column]
    rows: List[List[str]]


def _parse_html(html: str):
    """
    Parses an HTML string into an lxml tree. Returns None for empty input.
    """
    if not html or not html.strip():
        return None
    # lxml refuses str input that carries an XML encoding declaration.
    return etree.HTML(html.encode("utf-8"), parser=etree.HTMLParser(encoding="utf-8"))


def inner_html(element) -> str:
    """
    Serializes the content of an element without the element's own tag.
    Leading text is escaped the way lxml escapes the tails of child elements.
    """
    parts = [escape(element.text or "", quote=False)]
    for child in element:
        parts.append(etree.tostring(child, method="html", encoding="unicode", with_tail=True))
    return "".join(parts)


def get_page_title(html: str) -> str:
    """
    Returns the text of the first <h1> on the page, used as the table name.
    Raises TableHeaderNotFound when the page has no <h1>.
    """
    tree = _parse_html(html)
    if tree is None:
        raise TableHeaderNotFound("Page title (h1) was not found")

    titles = tree.xpath(PAGE_TITLE_XPATH)
    if not titles:
        raise TableHeaderNotFound("Page title (h1) was not found")

    return remove_html_tags(inner_html(titles[0]))


def locate_table(html: str, table_xpath: str = WIKI_TABLE_XPATH) -> RawTable:
    """
    Finds the first matching table and splits it into headers, rows and samples.

    Header names come from the <th> cells of the first body row only. Every
    later row becomes a list of its <td> and <th> cells, since some tables
    mark row-leading cells as headers. Samples are all <td> cells of the
    table in document order.

    Raises:
        TableNotFound: No element matches table_xpath.
        TableBodyNotFound: The table has neither a <tbody> nor rows of its own.
        TableHeaderNotFound: The body has no rows or its first row has no <th>.
    """
    tree = _parse_html(html)
    if tree is None:
        raise TableNotFound()

    tables = tree.xpath(table_xpath)
    if not tables:
        raise TableNotFound()
    table = tables[0]

    bodies = table.xpath(".//tbody")
    if bodies:
        tbody = bodies[0]
    elif table.xpath("./tr"):
        # Rows written straight under <table> form an implied body.
        tbody = table
    else:
        raise TableBodyNotFound()

    table_rows = tbody.xpath(".//tr")
    header_rows = [
        [inner_html(th) for th in row.xpath(".//th")]
        for row in table_rows
    ]
    if not header_rows or not header_rows[0]:
        raise TableHeaderNotFound()
    headers = [clean_header_string(header) for header in header_rows[0]]

    rows = [
        [inner_html(cell) for cell in row.xpath(".//td | .//th")]
        for row in table_rows[1:]
    ]

    samples = [inner_html(td) for td in table.xpath(".//td")]

    return RawTable(headers=headers, rows=rows, samples=samples)


def get_headers_and_types(raw_table: RawTable) -> List[Column]:
    """
    Pairs each header with a type inferred from the sample at its position.

    Only the first len(headers) data cells of the table are sampled, so the
    first data row decides every column's type.
    """
    headers = raw_table.headers
    header_types = [infer_type(sample) for sample in raw_table.samples[:len(headers)]]

    if len(headers) != len(header_types):
        raise HeaderAndTypesAmountMismatch(
            f"Headers and types must be the same length "
            f"({len(headers)} headers, {len(header_types)} types)"
        )

    return [Column(name=name, sql_type=sql_type) for name, sql_type in zip(headers, header_types)]


def extract_table(html: str, table_xpath: str = WIKI_TABLE_XPATH) -> Table:
    """
    Runs the whole extraction for one page: locate the table, infer the
    column types, then read the page title for the table name.
    """
    raw_table = locate_table(html, table_xpath)
    columns = get_headers_and_types(raw_table)
    table_name = get_page_title(html)

    print(f"[extract_table] Found table '{table_name}' with {len(columns)} columns and {len(raw_table.rows)} rows.")

    return Table(name=table_name, columns=columns, rows=raw_table.rows)


def column_summary(columns: Sequence[Column]) -> str:
    return ", ".join(f"{column.name} ({column.sql_type})" for column in columns)
