"""Layout helpers shared by pages."""

from rich import box
from rich.table import Table
from rich.text import Text


def get_column_string(text: str, width: int) -> str:
    """Fit text into a fixed-width column.

    Short text is padded with spaces; long text is cut and ends with "...".
    Columns narrower than the ellipsis get only dots.
    """
    if width <= 0:
        return ""
    if len(text) <= width:
        return text.ljust(width)
    if width <= 3:
        return "." * width
    return text[:width - 3] + "..."


def build_table(title: str, columns: list[tuple[str, int]], rows: list[list[str]]) -> Table:
    """Build a fixed-width rich table; cell text is truncated, never wrapped."""
    table = Table(title=title, box=box.SIMPLE_HEAD, show_edge=False, title_justify="left")
    for header, width in columns:
        table.add_column(header, width=width, no_wrap=True)
    for row in rows:
        table.add_row(*(
            Text(get_column_string(cell, width))
            for cell, (_, width) in zip(row, columns)
        ))
    return table
