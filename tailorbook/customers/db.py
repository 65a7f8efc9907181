"""
Customer business logic: pure Python, no Flask imports.

Customers are identified by a generated id and a unique, case-sensitive
name. Deleting a customer removes their whole measurement book.
"""

import sqlite3
from typing import Optional

from tailorbook.core import ErrorKind, TailorBookError, get_logger

logger = get_logger("tailorbook.customers")


def list_customers(conn: sqlite3.Connection) -> list:
    """List every customer, oldest first."""
    return conn.execute("SELECT id, name FROM customers ORDER BY id").fetchall()


def get_customer(conn: sqlite3.Connection, customer_id: int) -> Optional[sqlite3.Row]:
    return conn.execute(
        "SELECT id, name, created_at FROM customers WHERE id = ?",
        (customer_id,),
    ).fetchone()


def find_customer_by_name(conn: sqlite3.Connection, name: str) -> Optional[sqlite3.Row]:
    """Exact, case-sensitive name lookup."""
    return conn.execute(
        "SELECT id, name FROM customers WHERE name = ?",
        (name,),
    ).fetchone()


def add_customer(conn: sqlite3.Connection, name: Optional[str]) -> int:
    """
    Register a new customer.

    Args:
        conn: Open database connection
        name: Customer name; surrounding whitespace is stripped

    Returns:
        The generated customer id

    Raises:
        TailorBookError: INVALID_REQUEST for a blank name,
            DUPLICATE_NAME when the name is already taken
    """
    if not isinstance(name, str) or not name.strip():
        raise TailorBookError(ErrorKind.INVALID_REQUEST, "Customer name is required")
    name = name.strip()

    if find_customer_by_name(conn, name):
        raise TailorBookError(ErrorKind.DUPLICATE_NAME)

    try:
        with conn:
            cur = conn.execute("INSERT INTO customers (name) VALUES (?)", (name,))
    except sqlite3.IntegrityError:
        # Lost a race with another insert of the same name
        raise TailorBookError(ErrorKind.DUPLICATE_NAME) from None

    logger.info("Added customer %d (%s)", cur.lastrowid, name)
    return cur.lastrowid


def delete_customer(conn: sqlite3.Connection, customer_id: int) -> int:
    """
    Delete a customer and every measurement value recorded for them.

    Returns:
        Number of measurement values removed

    Raises:
        TailorBookError: NOT_FOUND when no such customer exists
    """
    if not get_customer(conn, customer_id):
        raise TailorBookError(ErrorKind.NOT_FOUND, "Customer not found")

    with conn:
        removed = conn.execute(
            "DELETE FROM measurements WHERE customer_id = ?", (customer_id,)
        ).rowcount
        conn.execute("DELETE FROM customers WHERE id = ?", (customer_id,))

    logger.info("Deleted customer %d (%d measurement values)", customer_id, removed)
    return removed
