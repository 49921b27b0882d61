"""Command-line entrypoints for BeakerLab."""

from __future__ import annotations

import json
import logging
import sqlite3
from enum import Enum
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer

from beakerlab.bench import Bench
from beakerlab.errors import BeakerLabError
from beakerlab.mixing import MixingEngine
from beakerlab.persistence import SQLitePersister, connect, ensure_schema, load_snapshots
from beakerlab.reference import StaticReferenceTable, default_reference_table, load_reference_table
from beakerlab.simulation import cadence_events, load_pour_script, replay

app = typer.Typer(add_completion=False)


class UnknownChemicals(str, Enum):
    accept = "accept"
    warn = "warn"
    reject = "reject"


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """Simulated beaker mixing with a pH and color readout."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _parse_reference(path: Path | None) -> StaticReferenceTable:
    if path is None:
        return default_reference_table()
    return load_reference_table(path)


def _build_bench(
    reference: Path | None,
    unknown: UnknownChemicals,
    project_file: Path | None,
) -> tuple[Bench, sqlite3.Connection | None]:
    engine = MixingEngine(
        reference=_parse_reference(reference),
        unknown_chemicals=unknown.value,
    )
    connection = None
    persister = None
    if project_file is not None:
        connection = connect(project_file)
        persister = SQLitePersister(connection)
    return Bench(engine, persister), connection


def _fail(exc: BeakerLabError) -> NoReturn:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


ReferenceOption = Annotated[
    Optional[Path], typer.Option(help="JSON chemical reference table.")
]
UnknownOption = Annotated[
    UnknownChemicals, typer.Option(help="Handling of chemicals missing from the reference table.")
]
ProjectOption = Annotated[
    Optional[Path], typer.Option(help="Optional .labproj file to persist readouts.")
]


@app.command()
def pour(
    vessel: Annotated[str, typer.Argument(help="Vessel identifier.")],
    chemical: Annotated[str, typer.Argument(help="Chemical identifier.")],
    amount: Annotated[float, typer.Argument(help="Amount in ml.")] = 1.0,
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON instead of text.")] = False,
    reference: ReferenceOption = None,
    unknown: UnknownOption = UnknownChemicals.accept,
) -> None:
    """Pour once into an empty vessel and print the readout."""
    try:
        bench, _ = _build_bench(reference, unknown, None)
        summary = bench.pour(vessel, chemical, amount)
    except BeakerLabError as exc:
        _fail(exc)

    if as_json:
        typer.echo(json.dumps(summary.to_dict(), indent=2))
    else:
        typer.echo(summary.as_text())


@app.command()
def run(
    script_file: Annotated[Path, typer.Argument(help="Path to JSON pour script.")],
    output: Annotated[Optional[Path], typer.Option(help="Path to save output JSON.")] = None,
    project_file: ProjectOption = None,
    reference: ReferenceOption = None,
    unknown: UnknownOption = UnknownChemicals.accept,
) -> None:
    """Replay a pour script and print the final readout of each vessel."""
    connection = None
    try:
        events = load_pour_script(script_file)
        bench, connection = _build_bench(reference, unknown, project_file)
        finals = replay(bench, events)
    except BeakerLabError as exc:
        _fail(exc)
    finally:
        if connection is not None:
            connection.close()

    payload = {
        vessel_id: dict(summary.to_dict(), hazards=bench.hazards(vessel_id))
        for vessel_id, summary in finals.items()
    }
    json_output = json.dumps(payload, indent=2)
    typer.echo(json_output)

    if output:
        with open(output, "w") as f:
            f.write(json_output)


@app.command()
def titrate(
    acid: Annotated[float, typer.Option(help="Initial HCl volume (ml).")] = 10.0,
    duration_ms: Annotated[
        float, typer.Option(help="How long NaOH is poured, 1 ml per 120 ms.")
    ] = 3000.0,
    indicator: Annotated[bool, typer.Option(help="Add 1 ml phenolphthalein first.")] = True,
    vessel: Annotated[str, typer.Option(help="Vessel identifier.")] = "beaker1",
    project_file: ProjectOption = None,
) -> None:
    """Run an HCl/NaOH titration demo at the instrument pour cadence."""
    connection = None
    trace = []
    try:
        bench, connection = _build_bench(None, UnknownChemicals.accept, project_file)
        if acid:
            bench.pour(vessel, "hcl", acid)
        if indicator:
            bench.pour(vessel, "phenolph", 1.0)
        for event in cadence_events(vessel, "naoh", duration_ms):
            summary = bench.pour(event.vessel_id, event.chemical_id, event.amount)
            trace.append({"volume": summary.volume, "ph": summary.ph, "color": summary.color})
        final = bench.summarize(vessel)
    except BeakerLabError as exc:
        _fail(exc)
    finally:
        if connection is not None:
            connection.close()

    typer.echo(json.dumps({"trace": trace, "final": final.to_dict()}, indent=2))


@app.command()
def chemicals(reference: ReferenceOption = None) -> None:
    """List the chemical reference table."""
    try:
        table = _parse_reference(reference)
    except BeakerLabError as exc:
        _fail(exc)

    for chemical_id in table.identifiers():
        descriptor = table.lookup(chemical_id)
        line = f"{chemical_id}: {descriptor.name} ({descriptor.formula})"
        if descriptor.hazard:
            line += f" - {descriptor.hazard}"
        typer.echo(line)


@app.command()
def history(
    project_file: Annotated[Path, typer.Argument(help="Path to a .labproj file.")],
    vessel: Annotated[Optional[str], typer.Option(help="Only show this vessel.")] = None,
) -> None:
    """Print readouts saved in a project file."""
    if not project_file.exists():
        typer.echo(f"Error: {project_file} does not exist", err=True)
        raise typer.Exit(code=1)

    connection = connect(project_file)
    try:
        ensure_schema(connection)
        rows = load_snapshots(connection, vessel)
    finally:
        connection.close()
    typer.echo(json.dumps(rows, indent=2))
