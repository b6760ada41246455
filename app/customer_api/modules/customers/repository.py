"""
Persistence gateway for the ``customers`` table.

Every function takes the caller's Session explicitly; nothing here holds
module-level state. Mutations are flushed, never committed: the service owns
the transaction.

The unique constraint on ``customers.email`` is the real uniqueness guarantee.
A violation surfaced by the database is translated to DuplicateEmailError; any
other database error propagates unchanged.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.customer_api.models import Customer, utcnow
from app.customer_api.modules.customers.errors import DuplicateEmailError
from app.customer_api.modules.customers.validation import normalize_email

# Largest value a signed 64-bit INTEGER column can hold; ids above it match no row.
MAX_CUSTOMER_ID = 2**63 - 1


def _is_duplicate_email(s: Session, email: str, *, exclude_id: int | None = None) -> bool:
    # Re-check after rollback: the row that won the race is committed by now.
    other = find_by_email(s, email)
    return other is not None and other.id != exclude_id


def insert_customer(s: Session, fields: dict[str, Any]) -> int:
    c = Customer(
        name=fields["name"],
        email=normalize_email(fields["email"]),
        phone=fields["phone"],
    )
    s.add(c)
    try:
        s.flush()
    except IntegrityError as e:
        s.rollback()
        if _is_duplicate_email(s, fields["email"]):
            raise DuplicateEmailError() from e
        raise
    return c.id


def find_by_id(s: Session, customer_id: int) -> Customer | None:
    if customer_id > MAX_CUSTOMER_ID:
        return None
    return (
        s.query(Customer)
        .populate_existing()
        .filter(Customer.id == customer_id)
        .one_or_none()
    )


def find_by_email(s: Session, email: str) -> Customer | None:
    return (
        s.query(Customer)
        .populate_existing()
        .filter(Customer.email == normalize_email(email))
        .one_or_none()
    )


def list_all(s: Session) -> list[Customer]:
    return s.query(Customer).order_by(Customer.name.asc(), Customer.id.asc()).all()


def count(s: Session) -> int:
    return int(s.query(func.count(Customer.id)).scalar() or 0)


def update_by_id(s: Session, customer_id: int, fields: dict[str, Any]) -> bool:
    if customer_id > MAX_CUSTOMER_ID:
        return False
    values = {
        Customer.name: fields["name"],
        Customer.email: normalize_email(fields["email"]),
        Customer.phone: fields["phone"],
        Customer.updated_at: utcnow(),
    }
    try:
        affected = (
            s.query(Customer)
            .filter(Customer.id == customer_id)
            .update(values, synchronize_session=False)
        )
    except IntegrityError as e:
        s.rollback()
        if _is_duplicate_email(s, fields["email"], exclude_id=customer_id):
            raise DuplicateEmailError("Email is already registered to another customer.") from e
        raise
    return affected > 0


def delete_by_id(s: Session, customer_id: int) -> bool:
    if customer_id > MAX_CUSTOMER_ID:
        return False
    affected = (
        s.query(Customer)
        .filter(Customer.id == customer_id)
        .delete(synchronize_session=False)
    )
    return affected > 0
