"""
Measurement sheet CLI commands.

Usage:
    tailorbook measurements show <customer_id> <clothing_type_id>
    tailorbook measurements set <customer_id> <clothing_type_id> -v 1=38 -v 3=102.5
"""

from typing import List

import typer

app = typer.Typer(no_args_is_help=True)


@app.command("show")
def show(
    customer_id: int = typer.Argument(..., help="Customer ID"),
    clothing_type_id: int = typer.Argument(..., help="Clothing type ID"),
):
    """Show a customer's measurement sheet for one clothing type."""
    from tailorbook.core import get_db
    from tailorbook.measurements.db import get_measurements

    with get_db(readonly=True) as conn:
        sheet = get_measurements(conn, customer_id, clothing_type_id)

    if not sheet:
        typer.echo(f"No measurement template for clothing type {clothing_type_id}.")
        raise typer.Exit()

    typer.echo(f"{'ID':<5} {'Measurement':<25} {'Value'}")
    typer.echo("-" * 40)
    for m in sheet:
        value = "-" if m["value"] is None else f"{m['value']:g}"
        typer.echo(f"{m['measurement_id']:<5} {m['name']:<25} {value}")


def _parse_pairs(pairs: List[str]) -> List[dict]:
    entries = []
    for pair in pairs:
        measurement_id, sep, value = pair.partition("=")
        if not sep:
            raise typer.BadParameter(f"Expected ID=VALUE, got {pair!r}")
        entries.append({"measurement_id": measurement_id, "value": value})
    return entries


@app.command("set")
def set_values(
    customer_id: int = typer.Argument(..., help="Customer ID"),
    clothing_type_id: int = typer.Argument(..., help="Clothing type ID"),
    values: List[str] = typer.Option(..., "--value", "-v", help="MEASUREMENT_ID=VALUE (empty value clears)"),
):
    """Record measurement values for a customer and clothing type."""
    from tailorbook.core import TailorBookError, get_db
    from tailorbook.measurements.db import save_measurements

    entries = _parse_pairs(values)
    try:
        with get_db() as conn:
            saved = save_measurements(conn, customer_id, clothing_type_id, entries)
    except TailorBookError as exc:
        typer.echo(exc.message, err=True)
        raise typer.Exit(1)

    skipped = len(entries) - saved
    typer.echo(f"Saved {saved} measurement(s)" + (f", skipped {skipped}" if skipped else ""))
