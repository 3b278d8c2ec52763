from typing import Any, List, Sequence


def cell_text(value: Any) -> str:
    """Cell value as a trimmed string; None and missing cells read as ''."""
    if value is None:
        return ""
    # Spreadsheet readers hand back whole numbers as floats (1.0)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def cell_at(row: Sequence[Any] | None, col: int | None) -> str:
    if row is None or col is None or col < 0 or col >= len(row):
        return ""
    return cell_text(row[col])


def row_is_blank(row: Sequence[Any] | None) -> bool:
    if not row:
        return True
    return all(not cell_text(v) for v in row)


def table_width(table: Sequence[Sequence[Any] | None]) -> int:
    return max((len(r) for r in table if r), default=0)


def table_from_tsv(text: str) -> List[List[str]]:
    """Split pasted tab-separated text into rows of trimmed cells.

    Blank lines stay in the table as empty rows so that row numbers in
    import messages match the line numbers of the pasted text. Trailing
    blank lines are dropped.
    """
    rows: List[List[str]] = []
    if not text:
        return rows
    for line in text.splitlines():
        if not line.strip():
            rows.append([])
            continue
        rows.append([p.strip() for p in line.split("\t")])
    while rows and not rows[-1]:
        rows.pop()
    return rows
