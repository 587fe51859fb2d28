from __future__ import annotations

from typing import Any, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from record_store.domain.models import SearchOutput

DEFAULT_COLUMNS = ("id", "name", "scientific_name", "location", "created_at")


def _cell(value: Any) -> str:
    if value is None:
        return "-"
    if hasattr(value, "isoformat"):
        return value.isoformat(timespec="seconds")
    return str(value)


def build_table(result: SearchOutput[Any], columns: Sequence[str] = DEFAULT_COLUMNS) -> Table:
    """
    Render one search page as a rich table.

    The caption carries the pagination state and the effective query so the
    reader can tell how the page was produced.
    """
    query_parts = []
    if result.filter is not None:
        query_parts.append(f"filter={result.filter!r}")
    if result.sort is not None:
        query_parts.append(f"sort={result.sort} {result.sort_dir}")

    caption = f"Page {result.current_page}/{result.last_page} │ {result.total:,} matching"
    if query_parts:
        caption = f"{caption} │ {' '.join(query_parts)}"

    table = Table(title="Living Beings", box=box.ROUNDED, caption=caption)
    for column in columns:
        style = "cyan" if column == "name" else None
        table.add_column(column, style=style, no_wrap=column == "id")

    for record in result.data:
        table.add_row(*(_cell(getattr(record, column, None)) for column in columns))

    return table


def print_page(
    result: SearchOutput[Any],
    columns: Sequence[str] = DEFAULT_COLUMNS,
    console: Optional[Console] = None,
) -> None:
    console = console or Console()

    if not result.data:
        console.print(f"[yellow]No records on page {result.current_page} ({result.total} matching).[/yellow]")
        return

    console.print(build_table(result, columns))
