"""
Seed the catalog tables with the shop's reference data.

Populates clothing_type, measurements_list and clothing_measurements.
Ids are fixed so saved measurement values stay meaningful across
re-seeds; every insert is INSERT OR IGNORE.
"""

import sqlite3
from typing import Dict, List, Tuple

from tailorbook.core import get_logger

logger = get_logger("tailorbook.catalog.seed")


# ---------------------------------------------------------------------------
# Measurement definitions (measurements_list)
# ---------------------------------------------------------------------------

MEASUREMENTS: List[Tuple[int, str]] = [
    (1, "Neck circumference"),
    (2, "Shoulder width"),
    (3, "Chest circumference"),
    (4, "Bust height"),
    (5, "Bust point distance"),
    (6, "Front bodice length"),
    (7, "Back bodice length"),
    (8, "Across front"),
    (9, "Across back"),
    (10, "Hip circumference"),
    (11, "Hip depth"),
    (12, "Sleeve length"),
    (13, "Wrist circumference"),
    (14, "Upper arm circumference"),
    (15, "Jacket length"),
    (16, "Manteau length"),
    (17, "Blouse length"),
    (18, "Top length"),
    (19, "Evening dress length"),
    (20, "Armhole circumference"),
    (21, "Armhole depth"),
    (22, "Waist circumference"),
    (23, "Skirt length"),
    (24, "Trouser length"),
    (25, "Crotch depth"),
    (26, "Thigh circumference"),
    (27, "Ankle circumference"),
    (28, "Knee circumference"),
    (29, "Knee height"),
]

# ---------------------------------------------------------------------------
# Clothing types
# ---------------------------------------------------------------------------

CLOTHING_TYPES: List[Tuple[int, str]] = [
    (1, "Jacket"),
    (2, "Manteau"),
    (3, "Blouse"),
    (4, "Evening dress"),
    (5, "Skirt"),
    (6, "Trousers"),
]

# ---------------------------------------------------------------------------
# Templates: clothing type id -> measurement ids, in display order
# ---------------------------------------------------------------------------

TEMPLATES: Dict[int, List[int]] = {
    1: [1, 2, 3, 4, 5, 6, 7, 8, 9, 22, 10, 12, 13, 14, 20, 21, 15],
    2: [1, 2, 3, 4, 5, 6, 7, 8, 9, 22, 10, 11, 12, 13, 14, 20, 21, 16],
    3: [1, 2, 3, 4, 5, 6, 7, 8, 9, 22, 12, 13, 14, 20, 21, 17, 18],
    4: [1, 2, 3, 4, 5, 6, 7, 8, 9, 22, 10, 11, 20, 21, 19],
    5: [22, 10, 11, 23],
    6: [22, 10, 11, 24, 25, 26, 28, 29, 27],
}


def seed_catalog(conn: sqlite3.Connection) -> Dict[str, int]:
    """
    Insert the reference catalog. Safe to run repeatedly.

    Returns:
        Row counts inserted per table (0 on a re-run).
    """
    counts = {"clothing_types": 0, "measurements": 0, "templates": 0}

    with conn:
        for mid, name in MEASUREMENTS:
            cur = conn.execute(
                "INSERT OR IGNORE INTO measurements_list (id, name) VALUES (?, ?)",
                (mid, name),
            )
            counts["measurements"] += cur.rowcount

        for tid, name in CLOTHING_TYPES:
            cur = conn.execute(
                "INSERT OR IGNORE INTO clothing_type (id, name) VALUES (?, ?)",
                (tid, name),
            )
            counts["clothing_types"] += cur.rowcount

        for tid, measurement_ids in TEMPLATES.items():
            for position, mid in enumerate(measurement_ids, start=1):
                cur = conn.execute(
                    """INSERT OR IGNORE INTO clothing_measurements
                       (clothing_type_id, measurement_id, sort_order)
                       VALUES (?, ?, ?)""",
                    (tid, mid, position),
                )
                counts["templates"] += cur.rowcount

    logger.debug("Catalog seed counts: %s", counts)
    return counts
