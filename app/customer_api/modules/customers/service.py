"""
Customer operations.

Each public function runs one request's worth of work against the Session it
is given and returns a ServiceResult; none of them raise. Cheap shape checks
(content type, id, payload) always run before anything touches the database.

The email pre-check before insert/update is advisory. Two concurrent requests
can both pass it; the unique constraint rejects the second write and the
repository reports it as DuplicateEmailError, so callers see 409 either way.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.customer_api.modules.customers import repository
from app.customer_api.modules.customers.errors import (
    CustomerError,
    CustomerNotFoundError,
    CustomerValidationError,
    DuplicateEmailError,
    InternalFailureError,
    InvalidContentTypeError,
    InvalidCustomerIdError,
)
from app.customer_api.modules.customers.validation import (
    normalize_customer_payload,
    parse_customer_id,
    validate_customer_payload,
)

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


@dataclass
class ServiceResult:
    status_code: int
    message: str
    is_error: bool = False
    payload: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_error(cls, err: CustomerError) -> "ServiceResult":
        payload: dict[str, Any] = {}
        if isinstance(err, CustomerValidationError):
            payload["errors"] = err.errors
        return cls(status_code=err.status_code, message=err.message, is_error=True, payload=payload)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "statusCode": self.status_code,
            "message": self.message,
            "isError": self.is_error,
        }
        body.update(self.payload)
        return body


def _rollback_quietly(s: Session) -> None:
    try:
        s.rollback()
    except SQLAlchemyError:
        logger.warning("Session rollback failed", exc_info=True)


def _run(s: Session, action: str, fn: Callable[[], ServiceResult]) -> ServiceResult:
    try:
        return fn()
    except CustomerError as e:
        _rollback_quietly(s)
        logger.info("%s rejected: %s (%s)", action, e.message, e.status_code)
        return ServiceResult.from_error(e)
    except Exception:
        logger.exception("%s failed", action)
        _rollback_quietly(s)
        return ServiceResult.from_error(InternalFailureError())


def _require_json(content_type: str | None) -> None:
    # Exact match: parameters such as "; charset=utf-8" are rejected too.
    if content_type != JSON_MEDIA_TYPE:
        raise InvalidContentTypeError()


def _require_id(raw_id: Any) -> int:
    customer_id = parse_customer_id(raw_id)
    if customer_id is None:
        raise InvalidCustomerIdError()
    return customer_id


def _require_valid(payload: Any) -> dict[str, str]:
    errors = validate_customer_payload(payload)
    if errors:
        raise CustomerValidationError(errors)
    return normalize_customer_payload(payload)


def create_customer(s: Session, payload: Any, content_type: str | None) -> ServiceResult:
    def _create() -> ServiceResult:
        _require_json(content_type)
        fields = _require_valid(payload)
        if repository.find_by_email(s, fields["email"]) is not None:
            raise DuplicateEmailError()
        customer_id = repository.insert_customer(s, fields)
        s.commit()
        logger.info("Created customer %s", customer_id)
        customer = repository.find_by_id(s, customer_id)
        return ServiceResult(
            status_code=201,
            message="Customer created successfully.",
            payload={"customer": customer.to_dict() if customer else {"id": customer_id, **fields}},
        )

    return _run(s, "create customer", _create)


def list_customers(s: Session) -> ServiceResult:
    def _list() -> ServiceResult:
        customers = repository.list_all(s)
        total = repository.count(s)
        return ServiceResult(
            status_code=200,
            message="Customers listed successfully.",
            payload={"total": total, "customers": [c.to_dict() for c in customers]},
        )

    return _run(s, "list customers", _list)


def get_customer(s: Session, raw_id: Any) -> ServiceResult:
    def _get() -> ServiceResult:
        customer_id = _require_id(raw_id)
        customer = repository.find_by_id(s, customer_id)
        if customer is None:
            raise CustomerNotFoundError()
        return ServiceResult(
            status_code=200,
            message="Customer found.",
            payload={"customer": customer.to_dict()},
        )

    return _run(s, "get customer", _get)


def update_customer(s: Session, raw_id: Any, payload: Any, content_type: str | None) -> ServiceResult:
    def _update() -> ServiceResult:
        _require_json(content_type)
        customer_id = _require_id(raw_id)
        if repository.find_by_id(s, customer_id) is None:
            raise CustomerNotFoundError()
        fields = _require_valid(payload)
        owner = repository.find_by_email(s, fields["email"])
        if owner is not None and owner.id != customer_id:
            raise DuplicateEmailError("Email is already registered to another customer.")
        if not repository.update_by_id(s, customer_id, fields):
            raise CustomerNotFoundError()
        s.commit()
        logger.info("Updated customer %s", customer_id)
        customer = repository.find_by_id(s, customer_id)
        if customer is None:
            raise CustomerNotFoundError()
        return ServiceResult(
            status_code=200,
            message="Customer updated successfully.",
            payload={"customer": customer.to_dict()},
        )

    return _run(s, "update customer", _update)


def delete_customer(s: Session, raw_id: Any) -> ServiceResult:
    def _delete() -> ServiceResult:
        customer_id = _require_id(raw_id)
        customer = repository.find_by_id(s, customer_id)
        if customer is None:
            raise CustomerNotFoundError()
        last_known = customer.to_dict()
        if not repository.delete_by_id(s, customer_id):
            raise CustomerNotFoundError()
        s.commit()
        logger.info("Deleted customer %s", customer_id)
        return ServiceResult(
            status_code=200,
            message="Customer deleted successfully.",
            payload={"deletedCustomer": last_known},
        )

    return _run(s, "delete customer", _delete)
