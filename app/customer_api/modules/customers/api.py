from __future__ import annotations

from flask import Blueprint, jsonify, request

from app.customer_api.db import db_session
from app.customer_api.modules.customers import service
from app.customer_api.modules.customers.service import ServiceResult

bp = Blueprint("customers", __name__)


def _respond(result: ServiceResult):
    return jsonify(result.to_dict()), result.status_code


def _json_body():
    # Shape problems surface as validation errors, so never let Flask abort here.
    return request.get_json(silent=True)


@bp.post("/customers")
def customers_create():
    return _respond(service.create_customer(db_session(), _json_body(), request.headers.get("Content-Type")))


@bp.get("/customers")
def customers_list():
    return _respond(service.list_customers(db_session()))


@bp.get("/customers/<customer_id>")
def customers_detail(customer_id: str):
    return _respond(service.get_customer(db_session(), customer_id))


@bp.put("/customers/<customer_id>")
def customers_update(customer_id: str):
    return _respond(
        service.update_customer(db_session(), customer_id, _json_body(), request.headers.get("Content-Type"))
    )


@bp.delete("/customers/<customer_id>")
def customers_delete(customer_id: str):
    return _respond(service.delete_customer(db_session(), customer_id))
