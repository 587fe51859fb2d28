"""
Synthetic data generator for the record store CLI.

Writes a deterministic JSON array of living beings that `record-store search`
(or `load_living_beings`) can load. Names are unique, so the file can be fed
through `insert_unique` without conflicts.
"""

from __future__ import annotations

import json
import random
import sys
import time
import uuid
from datetime import UTC, datetime, timedelta
from pathlib import Path

import typer

app = typer.Typer(help="Generate synthetic living beings as JSON.")

_SPECIES = [
    ("Lambari", "Astyanax ribeirae", "América do Sul"),
    ("Neon", "Paracheirodon innesi", "Bacia Amazônica"),
    ("Guppy", "Poecilia reticulata", "América Central"),
    ("Betta", "Betta splendens", "Sudeste Asiático"),
    ("Coridora", "Corydoras paleatus", "Bacia do Prata"),
    ("Acará-bandeira", "Pterophyllum scalare", "Bacia Amazônica"),
    ("Cascudo", "Hypostomus plecostomus", "América do Sul"),
    ("Platy", "Xiphophorus maculatus", "América Central"),
]
_WATER_TYPES = ["doce", "salobra", "salgada"]
_CATEGORIES = ["peixe", "planta", "invertebrado"]
_EPOCH = datetime(2025, 1, 1, tzinfo=UTC)


def _seeded_uuid(rng: random.Random) -> str:
    return str(uuid.UUID(int=rng.getrandbits(128), version=4))


def _generate_living_beings(rows: int, seed: int) -> list[dict]:
    rng = random.Random(seed)
    water_type_ids = {name: _seeded_uuid(rng) for name in _WATER_TYPES}
    category_ids = {name: _seeded_uuid(rng) for name in _CATEGORIES}

    beings: list[dict] = []
    created_at = _EPOCH
    for i in range(rows):
        common, scientific, location = _SPECIES[i % len(_SPECIES)]
        created_at += timedelta(minutes=rng.randint(1, 600))
        beings.append(
            {
                "id": _seeded_uuid(rng),
                "name": f"{common} {i // len(_SPECIES) + 1}",
                "scientific_name": scientific,
                "location": location,
                "size": str(rng.randint(2, 30)),
                "life_expectancy": rng.randint(1, 15),
                "ph": round(rng.uniform(5.5, 8.5), 1),
                "temperature": rng.randint(18, 30),
                "description": f"{common} ({scientific}), nativo de {location}.",
                "water_type_id": water_type_ids[rng.choice(_WATER_TYPES)],
                "category_id": category_ids[rng.choice(_CATEGORIES)],
                "created_at": created_at.isoformat(),
                "updated_at": created_at.isoformat(),
            }
        )
    return beings


def _write_json(path: Path, beings: list[dict]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(beings, f, indent=2, ensure_ascii=False)


@app.command()
def main(
    rows: int = typer.Option(
        40,
        "--rows",
        "-r",
        help="Number of living beings to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path = typer.Option(
        Path("data/living_beings.json"),
        "--output",
        "-o",
        help="JSON output path.",
    ),
) -> None:
    """
    Generate synthetic living beings and write them to a JSON file.
    """
    start = time.perf_counter()
    typer.echo(f"Generating {rows:,} living beings -> {output} (seed={seed})")
    _write_json(output, _generate_living_beings(rows, seed))
    typer.echo(f"Done in {time.perf_counter() - start:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
