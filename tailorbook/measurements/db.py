"""
Measurement book business logic: pure Python, no Flask imports.

Reads overlay stored values onto the clothing type's template; writes are
filtered against the same template, upserted per (customer, clothing type,
measurement) triple, and committed as one transaction per batch.
"""

import math
import sqlite3
from typing import Any, Iterable, List, Optional

from tailorbook.catalog.db import get_template, get_template_ids
from tailorbook.core import ErrorKind, TailorBookError, get_logger
from tailorbook.customers.db import get_customer

logger = get_logger("tailorbook.measurements")

_UPSERT_SQL = """
    INSERT INTO measurements (customer_id, clothing_type_id, measurement_id, value)
    VALUES (?, ?, ?, ?)
    ON CONFLICT(customer_id, clothing_type_id, measurement_id)
    DO UPDATE SET value = excluded.value,
                  updated_at = datetime('now')
"""

# SQLite INTEGER is a signed 64-bit value
_MIN_ID = -(2 ** 63)
_MAX_ID = 2 ** 63 - 1


def coerce_id(value: Any) -> Optional[int]:
    """Interpret *value* as an integer id, or return None.

    Values outside the SQLite INTEGER range are rejected as well.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        result = value
    elif isinstance(value, float) and value.is_integer():
        result = int(value)
    elif isinstance(value, str):
        try:
            result = int(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not _MIN_ID <= result <= _MAX_ID:
        return None
    return result


def parse_value(raw: Any) -> Optional[float]:
    """
    Convert a submitted measurement value to a float.

    Empty strings mean "clear this measurement" and become None.

    Raises:
        TailorBookError: INVALID_REQUEST for anything non-numeric
    """
    if isinstance(raw, str):
        raw = raw.strip()
        if raw == "":
            return None
    if isinstance(raw, bool):
        raise TailorBookError(ErrorKind.INVALID_REQUEST, "Measurement values must be numeric")
    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError):
        raise TailorBookError(
            ErrorKind.INVALID_REQUEST, "Measurement values must be numeric"
        ) from None
    if not math.isfinite(value):
        raise TailorBookError(ErrorKind.INVALID_REQUEST, "Measurement values must be numeric")
    return value


def get_measurements(
    conn: sqlite3.Connection,
    customer_id: int,
    clothing_type_id: int,
) -> List[dict]:
    """
    Full measurement sheet for one customer and clothing type.

    Every templated measurement appears once, in template order, with
    value None unless a value has been stored.

    Returns:
        List of {"measurement_id", "name", "value"} dicts
    """
    sheet = {
        t["measurement_id"]: {**t, "value": None}
        for t in get_template(conn, clothing_type_id)
    }

    stored = conn.execute(
        """SELECT measurement_id, value FROM measurements
           WHERE customer_id = ? AND clothing_type_id = ?""",
        (customer_id, clothing_type_id),
    ).fetchall()
    for row in stored:
        entry = sheet.get(row["measurement_id"])
        if entry is not None:
            entry["value"] = row["value"]

    return list(sheet.values())


def _accepted_entries(
    entries: Iterable[Any],
    template_ids: set,
) -> List[tuple]:
    """Filter submitted entries down to (measurement_id, value) pairs to store."""
    accepted = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        if entry.get("measurement_id") is None or entry.get("value") is None:
            continue
        measurement_id = coerce_id(entry["measurement_id"])
        if measurement_id is None or measurement_id not in template_ids:
            continue
        accepted.append((measurement_id, parse_value(entry["value"])))
    return accepted


def save_measurements(
    conn: sqlite3.Connection,
    customer_id: int,
    clothing_type_id: int,
    entries: Iterable[Any],
) -> int:
    """
    Upsert a batch of measurement values.

    Entries lacking a measurement_id or value, or naming a measurement that
    is not templated for the clothing type, are skipped. The batch is
    atomic: a store failure rolls back every upsert in it.

    Returns:
        Number of values stored

    Raises:
        TailorBookError: NOT_FOUND for an unknown customer,
            INVALID_REQUEST for a non-numeric value
        sqlite3.Error: store failures, after rollback
    """
    if not get_customer(conn, customer_id):
        raise TailorBookError(ErrorKind.NOT_FOUND, "Customer not found")

    template_ids = get_template_ids(conn, clothing_type_id)
    accepted = _accepted_entries(entries, template_ids)

    with conn:
        for measurement_id, value in accepted:
            conn.execute(_UPSERT_SQL, (customer_id, clothing_type_id, measurement_id, value))

    logger.info(
        "Saved %d measurement(s) for customer %d, clothing type %d",
        len(accepted), customer_id, clothing_type_id,
    )
    return len(accepted)
