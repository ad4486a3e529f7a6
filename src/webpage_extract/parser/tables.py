"""Table classification and structuring.

Layout tables are skipped; data tables become header/row records padded to
a common width.
"""

from collections.abc import Iterable
from typing import Any, NamedTuple

from bs4 import BeautifulSoup, Tag

from webpage_extract.parser.document import element_text

LAYOUT_ROLES = frozenset({"presentation", "none"})
CELL_TAGS = ("th", "td")


class TableRecord(NamedTuple):
    """A data table normalized to rectangular headers and rows."""

    headers: list[str]
    rows: list[list[str]]
    caption: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the record as a JSON-ready dict, omitting an absent caption."""
        result: dict[str, Any] = {"headers": self.headers, "rows": self.rows}
        if self.caption is not None:
            result["caption"] = self.caption
        return result


def is_layout_table(table: Tag, class_hints: Iterable[str]) -> bool:
    """Decide whether a table is used for page layout rather than data.

    A table is layout if its role is presentation/none, its class contains one of
    ``class_hints`` (case-insensitive substring), or it sits inside two or more
    other tables.
    """
    role = str(table.get("role") or "").strip().lower()
    if role in LAYOUT_ROLES:
        return True

    class_attr = table.get("class") or []
    class_name = " ".join(class_attr) if isinstance(class_attr, list) else str(class_attr)
    class_name = class_name.lower()
    if any(hint.lower() in class_name for hint in class_hints):
        return True

    # Tables nested too deeply are often layout tables
    return len(table.find_parents("table")) > 1


def _own_rows(table: Tag) -> list[Tag]:
    """Rows belonging to this table, excluding rows of nested tables."""
    return [row for row in table.find_all("tr") if row.find_parent("table") is table]


def _cells(row: Tag) -> list[Tag]:
    """Cells of this row, excluding cells of tables nested inside it."""
    return [cell for cell in row.find_all(CELL_TAGS) if cell.find_parent("tr") is row]


def _in_header_block(row: Tag, table: Tag) -> bool:
    """True if the row sits in a <thead> of this table."""
    for parent in row.parents:
        if parent is table:
            return False
        if parent.name == "thead":
            return True
    return False


def _caption(table: Tag) -> str | None:
    caption = table.find("caption")
    if caption is None:
        return None
    text = caption.get_text().strip()
    return text or None


def structure_table(table: Tag) -> TableRecord | None:
    """Build a TableRecord from a data table.

    Header resolution, first match wins:
    (a) the first row of the table's <thead>;
    (b) the first row, if it has any <th>, which is then excluded from rows;
    (c) empty strings sized to the first row's cell count.

    Args:
        table: A table already classified as data.

    Returns:
        The record, or None if the table has no rows and no non-empty header.

    """
    rows = _own_rows(table)
    header_rows = [row for row in rows if _in_header_block(row, table)]

    headers: list[str]
    consumed: Tag | None = None
    if header_rows:
        headers = [element_text(cell) for cell in _cells(header_rows[0])]
    elif rows and any(cell.name == "th" for cell in _cells(rows[0])):
        consumed = rows[0]
        headers = [element_text(cell) for cell in _cells(consumed)]
    else:
        headers = [""] * (len(_cells(rows[0])) if rows else 0)

    body: list[list[str]] = []
    for row in rows:
        if row is consumed or _in_header_block(row, table):
            continue
        values = [element_text(cell) for cell in _cells(row)]
        if values:
            body.append(values)

    if not body and not any(headers):
        return None

    width = max([len(headers), *(len(values) for values in body)])
    headers.extend([""] * (width - len(headers)))
    for values in body:
        values.extend([""] * (width - len(values)))

    return TableRecord(headers=headers, rows=body, caption=_caption(table))


def extract_tables(soup: BeautifulSoup, class_hints: Iterable[str]) -> list[TableRecord]:
    """Classify and structure every table in the document, in document order."""
    hints = list(class_hints)
    records: list[TableRecord] = []
    for table in soup.find_all("table"):
        if is_layout_table(table, hints):
            continue
        record = structure_table(table)
        if record is not None:
            records.append(record)
    return records
