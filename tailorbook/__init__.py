"""
TailorBook - Customer measurement book for tailoring shops

Modules:
    core         - Shared services (db, config, logging, errors)
    customers    - Customer registry
    catalog      - Clothing types, measurement definitions, templates
    measurements - Per-customer, per-garment measurement values
    api          - Flask JSON endpoint consumed by the shop UI
    cli          - Typer command-line interface
"""

__version__ = "0.1.0"
