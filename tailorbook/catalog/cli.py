"""
Catalog CLI commands.

Usage:
    tailorbook catalog types
    tailorbook catalog definitions
    tailorbook catalog template <clothing_type_id>
"""

import typer

app = typer.Typer(no_args_is_help=True)


@app.command("types")
def types():
    """List clothing types."""
    from tailorbook.catalog.db import list_clothing_types
    from tailorbook.core import get_db

    with get_db(readonly=True) as conn:
        rows = list_clothing_types(conn)

    for r in rows:
        typer.echo(f"{r['id']:<5} {r['name']}")


@app.command("definitions")
def definitions():
    """List every measurement definition."""
    from tailorbook.catalog.db import list_measurement_definitions
    from tailorbook.core import get_db

    with get_db(readonly=True) as conn:
        rows = list_measurement_definitions(conn)

    for r in rows:
        typer.echo(f"{r['id']:<5} {r['name']}")


@app.command("template")
def template(clothing_type_id: int = typer.Argument(..., help="Clothing type ID")):
    """Show the measurements taken for a clothing type."""
    from tailorbook.catalog.db import get_clothing_type, get_template
    from tailorbook.core import get_db

    with get_db(readonly=True) as conn:
        clothing_type = get_clothing_type(conn, clothing_type_id)
        rows = get_template(conn, clothing_type_id)

    if not clothing_type:
        typer.echo(f"Clothing type {clothing_type_id} not found.")
        raise typer.Exit(1)

    typer.echo(f"{clothing_type['name']} ({len(rows)} measurements)")
    for r in rows:
        typer.echo(f"  {r['measurement_id']:<5} {r['name']}")
