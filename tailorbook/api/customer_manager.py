"""
Customer Manager Blueprint: the single JSON endpoint behind the shop UI.

GET reads query parameters, POST dispatches on the body's ``action``.
Thin delivery layer: business logic lives in customers.db, catalog.db and
measurements.db. Each request opens its own connection and hands it to
those functions explicitly.
"""

import sqlite3

from flask import Blueprint, jsonify, request

from tailorbook.core import ErrorKind, TailorBookError, get_config_value, get_db, get_logger
from tailorbook.catalog.db import list_clothing_types
from tailorbook.customers.db import add_customer, delete_customer, list_customers
from tailorbook.measurements.db import coerce_id, get_measurements, save_measurements

bp = Blueprint("customer_manager", __name__)

logger = get_logger("tailorbook.api")


def _ok(message=None, **payload):
    body = {"success": True}
    if message:
        body["message"] = message
    body.update(payload)
    return jsonify(body)


def _require_id(raw, field: str) -> int:
    value = coerce_id(raw)
    if value is None:
        raise TailorBookError(ErrorKind.INVALID_REQUEST, f"{field} must be an integer")
    return value


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------


@bp.errorhandler(TailorBookError)
def handle_tailorbook_error(exc: TailorBookError):
    logger.warning("%s %s rejected (%s): %s", request.method, request.path, exc.kind.value, exc.message)
    return jsonify(exc.to_dict()), exc.status


@bp.errorhandler(sqlite3.Error)
def handle_store_error(exc: sqlite3.Error):
    # Full detail stays in the server log; the client gets the generic message
    logger.error("Store failure on %s %s: %s", request.method, request.path, exc, exc_info=exc)
    err = TailorBookError(ErrorKind.STORE_FAILURE)
    return jsonify(err.to_dict()), err.status


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------


@bp.route("", methods=["GET", "POST"])
def customer_manager():
    if request.method == "POST":
        return _handle_post()
    return _handle_get()


def _handle_get():
    customer_id = request.args.get("customer_id")
    clothing_type_id = request.args.get("clothing_type_id")

    if customer_id is not None and clothing_type_id is not None:
        cid = _require_id(customer_id, "customer_id")
        ctid = _require_id(clothing_type_id, "clothing_type_id")
        with get_db(readonly=True) as conn:
            rows = get_measurements(conn, cid, ctid)
        return _ok(measurements=rows)

    limit = get_config_value("catalog", "clothing_type_limit", default=6)
    with get_db(readonly=True) as conn:
        customers = [dict(r) for r in list_customers(conn)]
        clothing_types = [dict(r) for r in list_clothing_types(conn, limit=limit)]
    return _ok(customers=customers, clothing_types=clothing_types)


def _handle_post():
    # Body is JSON whatever the Content-Type header says
    data = request.get_json(force=True, silent=True)
    action = data.get("action") if isinstance(data, dict) else None
    if not isinstance(action, str) or not action:
        raise TailorBookError(ErrorKind.INVALID_REQUEST, "Action is required")

    handler = _ACTIONS.get(action)
    if handler is None:
        raise TailorBookError(ErrorKind.UNKNOWN_ACTION)
    return handler(data)


# ---------------------------------------------------------------------------
# POST actions
# ---------------------------------------------------------------------------


def _add_customer(data: dict):
    with get_db() as conn:
        customer_id = add_customer(conn, data.get("name"))
    return _ok("Customer added successfully", customer_id=customer_id)


def _save_measurements(data: dict):
    if any(data.get(k) is None for k in ("customer_id", "clothing_type_id", "measurements")):
        raise TailorBookError(
            ErrorKind.INVALID_REQUEST,
            "Customer ID, clothing type ID, and measurements are required",
        )
    customer_id = _require_id(data["customer_id"], "customer_id")
    clothing_type_id = _require_id(data["clothing_type_id"], "clothing_type_id")
    if not isinstance(data["measurements"], list):
        raise TailorBookError(ErrorKind.INVALID_REQUEST, "measurements must be a list")

    with get_db() as conn:
        saved = save_measurements(conn, customer_id, clothing_type_id, data["measurements"])
    return _ok("Measurements saved successfully", saved=saved)


def _delete_customer(data: dict):
    if data.get("customer_id") is None:
        raise TailorBookError(ErrorKind.INVALID_REQUEST, "Customer ID is required")
    customer_id = _require_id(data["customer_id"], "customer_id")

    with get_db() as conn:
        delete_customer(conn, customer_id)
    return _ok("Customer deleted successfully")


_ACTIONS = {
    "add_customer": _add_customer,
    "save_measurements": _save_measurements,
    "delete_customer": _delete_customer,
}
