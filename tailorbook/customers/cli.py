"""
Customer CLI commands.

Usage:
    tailorbook customers list
    tailorbook customers add <name>
    tailorbook customers delete <id>
"""

import typer

app = typer.Typer(no_args_is_help=True)


@app.command("list")
def list_customers(
    search: str = typer.Option(None, "--search", "-s", help="Only names containing this text"),
):
    """List all customers."""
    from tailorbook.core import get_db
    from tailorbook.customers.db import list_customers as _list

    with get_db(readonly=True) as conn:
        rows = _list(conn)

    if search:
        needle = search.lower()
        rows = [r for r in rows if needle in r["name"].lower()]

    if not rows:
        typer.echo("No customers found.")
        raise typer.Exit()

    typer.echo(f"{'ID':<6} {'Name'}")
    typer.echo("-" * 40)
    for r in rows:
        typer.echo(f"{r['id']:<6} {r['name']}")


@app.command("add")
def add(name: str = typer.Argument(..., help="Customer name")):
    """Register a new customer."""
    from tailorbook.core import TailorBookError, get_db
    from tailorbook.customers.db import add_customer

    try:
        with get_db() as conn:
            customer_id = add_customer(conn, name)
    except TailorBookError as exc:
        typer.echo(exc.message, err=True)
        raise typer.Exit(1)

    typer.echo(f"Added customer {customer_id}: {name.strip()}")


@app.command("delete")
def delete(
    customer_id: int = typer.Argument(..., help="Customer ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
):
    """Delete a customer and all of their measurements."""
    from tailorbook.core import TailorBookError, get_db
    from tailorbook.customers.db import delete_customer

    if not yes:
        typer.confirm(f"Delete customer {customer_id} and all their measurements?", abort=True)

    try:
        with get_db() as conn:
            removed = delete_customer(conn, customer_id)
    except TailorBookError as exc:
        typer.echo(exc.message, err=True)
        raise typer.Exit(1)

    typer.echo(f"Deleted customer {customer_id} ({removed} measurement values removed)")
