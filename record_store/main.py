from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from record_store.config import get_settings
from record_store.domain.errors import ConflictError
from record_store.domain.models import SearchInput, SearchOutput
from record_store.living_beings import LivingBeing, LivingBeingInMemoryRepository, load_living_beings
from record_store.reporter import print_page
from record_store.utils.logging import configure_logging, get_logger

app = typer.Typer(help="In-memory record store CLI.")
log = get_logger(__name__)


async def _search(path: Path, params: SearchInput) -> SearchOutput[LivingBeing]:
    repository = LivingBeingInMemoryRepository()
    for being in load_living_beings(path):
        await repository.insert_unique(being)
    log.info("Loaded living beings", extra={"path": str(path), "records": len(repository)})
    return await repository.get(params)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} json_logs={settings.log_json} | "
        f"data_file={settings.data_file}"
    )


@app.command()
def search(
    page: Optional[int] = typer.Option(None, "--page", "-p", help="1-indexed page (default 1)."),
    per_page: Optional[int] = typer.Option(
        None, "--per-page", "-n", help="Page size (default 15)."
    ),
    sort: Optional[str] = typer.Option(
        None, "--sort", "-s", help="Sort field: name or created_at (default created_at)."
    ),
    sort_dir: Optional[str] = typer.Option(None, "--sort-dir", "-d", help="asc or desc."),
    filter_: Optional[str] = typer.Option(
        None, "--filter", "-f", help="Case-insensitive substring of the name."
    ),
    data_file: Optional[Path] = typer.Option(
        None, "--data-file", help="JSON file of living beings (default from settings)."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the raw search output as JSON."),
) -> None:
    """
    Load living beings from a JSON file and print one page of a search.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    path = data_file or settings.data_file

    if not path.exists():
        typer.echo(f"Data file not found: {path}", err=True)
        raise typer.Exit(code=1)

    params = SearchInput(page=page, per_page=per_page, sort=sort, sort_dir=sort_dir, filter=filter_)
    try:
        result = asyncio.run(_search(path, params))
    except (ConflictError, ValidationError) as exc:
        typer.echo(f"Invalid data file {path}: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
    else:
        print_page(result)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
