"""Tests for the customer registry."""

from unittest.mock import patch

import pytest

from tailorbook.core.errors import ErrorKind, TailorBookError
from tailorbook.customers.db import (
    add_customer,
    delete_customer,
    find_customer_by_name,
    get_customer,
    list_customers,
)


def _store_value(conn, customer_id, clothing_type_id, measurement_id, value):
    conn.execute(
        "INSERT INTO measurements (customer_id, clothing_type_id, measurement_id, value) "
        "VALUES (?, ?, ?, ?)",
        (customer_id, clothing_type_id, measurement_id, value),
    )
    conn.commit()


class TestAddCustomer:
    def test_returns_generated_id(self, memory_db):
        assert add_customer(memory_db, "Ali") == 1
        assert add_customer(memory_db, "Sara") == 2

    def test_strips_whitespace(self, memory_db):
        cid = add_customer(memory_db, "  Ali  ")
        assert get_customer(memory_db, cid)["name"] == "Ali"

    @pytest.mark.parametrize("name", ["", "   ", "\t\n", None, 42])
    def test_blank_name_rejected(self, memory_db, name):
        with pytest.raises(TailorBookError) as exc_info:
            add_customer(memory_db, name)
        assert exc_info.value.kind is ErrorKind.INVALID_REQUEST
        assert exc_info.value.status == 400
        assert list_customers(memory_db) == []

    def test_duplicate_name_rejected(self, memory_db):
        add_customer(memory_db, "Ali")
        with pytest.raises(TailorBookError) as exc_info:
            add_customer(memory_db, "Ali")
        assert exc_info.value.kind is ErrorKind.DUPLICATE_NAME
        assert "already registered" in exc_info.value.message
        assert len(list_customers(memory_db)) == 1

    def test_duplicate_after_trimming_rejected(self, memory_db):
        add_customer(memory_db, "Ali")
        with pytest.raises(TailorBookError):
            add_customer(memory_db, " Ali ")

    def test_names_are_case_sensitive(self, memory_db):
        add_customer(memory_db, "Ali")
        add_customer(memory_db, "ali")
        assert [r["name"] for r in list_customers(memory_db)] == ["Ali", "ali"]

    def test_unique_constraint_maps_to_duplicate(self, memory_db):
        add_customer(memory_db, "Ali")
        # Simulate a concurrent insert slipping past the lookup
        with patch("tailorbook.customers.db.find_customer_by_name", return_value=None):
            with pytest.raises(TailorBookError) as exc_info:
                add_customer(memory_db, "Ali")
        assert exc_info.value.kind is ErrorKind.DUPLICATE_NAME


class TestListCustomers:
    def test_ordered_by_id(self, memory_db):
        add_customer(memory_db, "Zahra")
        add_customer(memory_db, "Ali")
        rows = list_customers(memory_db)
        assert [dict(r) for r in rows] == [
            {"id": 1, "name": "Zahra"},
            {"id": 2, "name": "Ali"},
        ]

    def test_find_by_name_exact(self, memory_db, seed_customer):
        assert find_customer_by_name(memory_db, "Ali")["id"] == seed_customer
        assert find_customer_by_name(memory_db, "ALI") is None


class TestDeleteCustomer:
    def test_removes_customer(self, memory_db, seed_customer):
        delete_customer(memory_db, seed_customer)
        assert get_customer(memory_db, seed_customer) is None

    def test_removes_measurements_for_every_clothing_type(self, memory_db, seed_customer):
        _store_value(memory_db, seed_customer, 1, 1, 38)
        _store_value(memory_db, seed_customer, 2, 1, 39)
        _store_value(memory_db, seed_customer, 3, 20, 80)

        removed = delete_customer(memory_db, seed_customer)

        assert removed == 3
        left = memory_db.execute(
            "SELECT COUNT(*) FROM measurements WHERE customer_id = ?", (seed_customer,)
        ).fetchone()[0]
        assert left == 0

    def test_leaves_other_customers_alone(self, memory_db, seed_customer):
        other = add_customer(memory_db, "Sara")
        _store_value(memory_db, seed_customer, 1, 1, 38)
        _store_value(memory_db, other, 1, 1, 36)

        delete_customer(memory_db, seed_customer)

        rows = memory_db.execute("SELECT customer_id FROM measurements").fetchall()
        assert [r["customer_id"] for r in rows] == [other]

    def test_unknown_customer(self, memory_db):
        with pytest.raises(TailorBookError) as exc_info:
            delete_customer(memory_db, 999)
        assert exc_info.value.kind is ErrorKind.NOT_FOUND

    def test_name_reusable_after_delete(self, memory_db, seed_customer):
        delete_customer(memory_db, seed_customer)
        assert add_customer(memory_db, "Ali") != seed_customer
