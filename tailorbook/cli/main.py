"""
TailorBook CLI - Main Entry Point

Unified Typer CLI that assembles all module sub-commands.

Usage:
    tailorbook version
    tailorbook migrate
    tailorbook serve
    tailorbook customers [command]
    tailorbook measurements [command]
    tailorbook catalog [command]
"""

import importlib

import typer

import tailorbook

app = typer.Typer(
    name="tailorbook",
    help="Customer measurement book for tailoring shops.",
    no_args_is_help=True,
)


@app.command()
def version():
    """Show TailorBook version."""
    typer.echo(f"tailorbook {tailorbook.__version__}")


@app.command()
def migrate(
    no_seed: bool = typer.Option(False, "--no-seed", help="Apply schemas without seeding the catalog"),
):
    """Run database schema migrations and seed the clothing catalog."""
    from tailorbook.core.db import migrate_all

    migrate_all(seed=not no_seed)
    typer.echo("Database migration complete.")


@app.command()
def serve(
    port: int = typer.Option(None, "--port", "-p", help="Port number (default: server.port)"),
    host: str = typer.Option(None, "--host", "-h", help="Host address (default: server.host, 127.0.0.1 debug)"),
    debug: bool = typer.Option(False, "--debug", help="Use Flask dev server with auto-reload (localhost only)"),
    threads: int = typer.Option(None, "--threads", "-t", help="Waitress worker threads (production only)"),
):
    """Launch the customer-manager API.

    Default: Waitress production server.
    With --debug: Flask dev server on 127.0.0.1 with auto-reload.
    """
    from tailorbook.api import create_app
    from tailorbook.core.config import get_config_value

    web = create_app()
    _port = port or get_config_value("server", "port", default=5000)

    if debug:
        _host = host or "127.0.0.1"
        typer.echo(f"Starting Flask dev server at http://{_host}:{_port}")
        web.run(host=_host, port=_port, debug=True)
        return

    from waitress import serve as waitress_serve

    _host = host or get_config_value("server", "host", default="0.0.0.0")
    _threads = threads or get_config_value("server", "threads", default=8)
    typer.echo(f"Starting Waitress production server on {_host}:{_port} ({_threads} threads)")
    waitress_serve(web, host=_host, port=_port, threads=_threads)


def _register_modules():
    """Register module CLI sub-apps."""
    module_registry = [
        ("tailorbook.customers.cli", "customers", "Customer registry"),
        ("tailorbook.measurements.cli", "measurements", "Customer measurement sheets"),
        ("tailorbook.catalog.cli", "catalog", "Clothing types & measurement templates"),
    ]

    for module_path, name, help_text in module_registry:
        mod = importlib.import_module(module_path)
        app.add_typer(mod.app, name=name, help=help_text)


_register_modules()


def main():
    """Entry point for the tailorbook CLI."""
    app()


if __name__ == "__main__":
    main()
