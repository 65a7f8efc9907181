"""
Catalog queries: clothing types, measurement definitions, templates.

Pure Python, no Flask imports. The catalog is reference data; nothing here
writes except the seed module.
"""

import sqlite3
from typing import List, Optional, Set


def list_clothing_types(conn: sqlite3.Connection, limit: Optional[int] = None) -> list:
    """List clothing types by id, optionally capped at *limit* rows."""
    if limit is None:
        return conn.execute("SELECT id, name FROM clothing_type ORDER BY id").fetchall()
    return conn.execute(
        "SELECT id, name FROM clothing_type ORDER BY id LIMIT ?",
        (limit,),
    ).fetchall()


def get_clothing_type(conn: sqlite3.Connection, clothing_type_id: int) -> Optional[sqlite3.Row]:
    return conn.execute(
        "SELECT id, name FROM clothing_type WHERE id = ?",
        (clothing_type_id,),
    ).fetchone()


def list_measurement_definitions(conn: sqlite3.Connection) -> list:
    """All measurement definitions, ordered by id."""
    return conn.execute("SELECT id, name FROM measurements_list ORDER BY id").fetchall()


def get_template(conn: sqlite3.Connection, clothing_type_id: int) -> List[dict]:
    """
    Measurement definitions that apply to a clothing type, in template order.

    Returns:
        List of {"measurement_id", "name"} dicts (empty for unknown types)
    """
    rows = conn.execute(
        """SELECT ml.id AS measurement_id, ml.name
           FROM clothing_measurements cm
           JOIN measurements_list ml ON ml.id = cm.measurement_id
           WHERE cm.clothing_type_id = ?
           ORDER BY cm.sort_order, ml.id""",
        (clothing_type_id,),
    ).fetchall()
    return [dict(r) for r in rows]


def get_template_ids(conn: sqlite3.Connection, clothing_type_id: int) -> Set[int]:
    """Set of measurement ids templated for a clothing type."""
    rows = conn.execute(
        "SELECT measurement_id FROM clothing_measurements WHERE clothing_type_id = ?",
        (clothing_type_id,),
    ).fetchall()
    return {r["measurement_id"] for r in rows}
