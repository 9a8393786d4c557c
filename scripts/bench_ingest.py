#!/usr/bin/env python3
"""Load pytest-benchmark JSON reports into a DuckDB history.

Usage:
    uv run pytest tests/bench --benchmark-only --benchmark-json bench/raw/philo.json
    uv run scripts/bench_ingest.py [--db bench/philo_bench.duckdb] [--notes "initial baseline"]

Every *.json report in the raw directory is loaded under one new run. The
report's file stem names the variant (philo.json, philo-pypy.json, ...), so
interpreters can be compared side by side within a run.
"""

from __future__ import annotations

import json
import platform
import subprocess
import sys
from dataclasses import astuple, dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import click
import duckdb

DEFAULT_DB = "bench/philo_bench.duckdb"
DEFAULT_RAW_DIR = "bench/raw"

# test_bench_{scenario}_{phase}; names ending in anything else are "create".
PHASES = frozenset({"create", "is", "project", "dispatch"})

NS_PER_SECOND = 1_000_000_000

DDL = """
CREATE SEQUENCE IF NOT EXISTS run_ids START 1;

CREATE TABLE IF NOT EXISTS runs (
    id          INTEGER PRIMARY KEY DEFAULT nextval('run_ids'),
    commit_sha  VARCHAR NOT NULL,
    created_at  TIMESTAMPTZ NOT NULL,
    host        VARCHAR,
    python      VARCHAR,
    notes       VARCHAR
);

CREATE TABLE IF NOT EXISTS samples (
    run_id      INTEGER NOT NULL REFERENCES runs(id),
    variant     VARCHAR NOT NULL,
    scenario    VARCHAR NOT NULL,
    phase       VARCHAR NOT NULL,
    mean_ns     DOUBLE NOT NULL,
    stddev_ns   DOUBLE,
    min_ns      DOUBLE,
    max_ns      DOUBLE,
    rounds      BIGINT,
    PRIMARY KEY (run_id, variant, scenario, phase)
);
"""


@dataclass(frozen=True, slots=True)
class Sample:
    """One benchmark's timings, in nanoseconds."""

    variant: str
    scenario: str
    phase: str
    mean_ns: float
    stddev_ns: float | None
    min_ns: float | None
    max_ns: float | None
    rounds: int | None


def head_commit() -> str:
    proc = subprocess.run(
        ["git", "rev-parse", "--short", "HEAD"],
        capture_output=True,
        text=True,
        check=False,
    )
    return proc.stdout.strip() if proc.returncode == 0 else "unknown"


def split_name(name: str) -> tuple[str, str]:
    """Split a benchmark test name into (scenario, phase)."""
    stem = name.removeprefix("test_bench_")
    scenario, _, phase = stem.rpartition("_")
    if scenario and phase in PHASES:
        return scenario, phase
    return stem, "create"


def _ns(seconds: float | None) -> float | None:
    return None if seconds is None else seconds * NS_PER_SECOND


def read_report(path: Path) -> tuple[list[Sample], str | None]:
    """Parse one pytest-benchmark report into samples plus its interpreter."""
    report: dict[str, Any] = json.loads(path.read_text())
    samples = []
    for bench in report.get("benchmarks", []):
        scenario, phase = split_name(bench.get("name", ""))
        stats = bench.get("stats", {})
        samples.append(
            Sample(
                variant=path.stem,
                scenario=scenario,
                phase=phase,
                mean_ns=_ns(stats.get("mean", 0.0)) or 0.0,
                stddev_ns=_ns(stats.get("stddev")),
                min_ns=_ns(stats.get("min")),
                max_ns=_ns(stats.get("max")),
                rounds=stats.get("rounds"),
            )
        )
    info = report.get("machine_info", {})
    python = " ".join(filter(None, [info.get("python_implementation"), info.get("python_version")]))
    return samples, python or None


def open_run(con: duckdb.DuckDBPyConnection, notes: str | None, python: str | None) -> int:
    """Insert a runs row and return its id."""
    con.execute(DDL)
    row = con.execute(
        "INSERT INTO runs (commit_sha, created_at, host, python, notes) "
        "VALUES (?, ?, ?, ?, ?) RETURNING id",
        [head_commit(), datetime.now(UTC), f"{platform.node()}/{platform.machine()}", python, notes],
    ).fetchone()
    return row[0]


@click.command()
@click.option("--db", default=DEFAULT_DB, show_default=True, help="DuckDB database path")
@click.option("--notes", default=None, help="Free-form notes stored with the run")
@click.option(
    "--raw-dir",
    default=DEFAULT_RAW_DIR,
    show_default=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory holding pytest-benchmark JSON reports",
)
def main(db: str, notes: str | None, raw_dir: Path) -> None:
    """Load benchmark reports into DuckDB as one run."""
    reports = sorted(raw_dir.glob("*.json")) if raw_dir.is_dir() else []
    if not reports:
        click.echo(f"No pytest-benchmark reports in {raw_dir}", err=True)
        sys.exit(1)

    parsed = {path: read_report(path) for path in reports}
    python = next((py for _, py in parsed.values() if py), None)

    with duckdb.connect(db) as con:
        run_id = open_run(con, notes, python)
        total = 0
        for path, (samples, _) in parsed.items():
            if samples:
                con.executemany(
                    "INSERT INTO samples VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
                    [(run_id, *astuple(s)) for s in samples],
                )
            total += len(samples)
            click.echo(f"  {path.name}: {len(samples)} samples ({path.stem})")

    click.echo(f"\nRun #{run_id}: {total} samples stored in {db}")


if __name__ == "__main__":
    main()
