from __future__ import annotations

import re
from typing import Any

EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

NAME_MIN_LENGTH = 2
PHONE_MIN_LENGTH = 10

NAME_ERROR = "Name is required and must have at least 2 characters."
EMAIL_ERROR = "Email is required and must be a valid address."
PHONE_ERROR = "Phone is required and must have at least 10 characters."


def _clean(value: Any) -> str:
    """Trimmed string value; anything that is not a string counts as missing."""
    if not isinstance(value, str):
        return ""
    return value.strip()


def validate_email_format(value: Any) -> bool:
    """True if ``value`` looks like ``local@domain.tld``."""
    if not isinstance(value, str):
        return False
    return EMAIL_RE.fullmatch(value) is not None


def validate_customer_payload(payload: Any) -> list[str]:
    """
    Validate a customer create/update payload. Returns the list of violations.

    Every rule is checked even when an earlier one fails, so callers can fix
    all fields in one round trip.
    """
    if not isinstance(payload, dict):
        payload = {}
    errors: list[str] = []
    if len(_clean(payload.get("name"))) < NAME_MIN_LENGTH:
        errors.append(NAME_ERROR)
    if not validate_email_format(_clean(payload.get("email"))):
        errors.append(EMAIL_ERROR)
    if len(_clean(payload.get("phone"))) < PHONE_MIN_LENGTH:
        errors.append(PHONE_ERROR)
    return errors


def normalize_email(value: Any) -> str:
    return _clean(value).lower()


def normalize_customer_payload(payload: dict[str, Any]) -> dict[str, str]:
    """Storage form of a validated payload."""
    return {
        "name": _clean(payload.get("name")),
        "email": normalize_email(payload.get("email")),
        "phone": _clean(payload.get("phone")),
    }


def parse_customer_id(raw: Any) -> int | None:
    """
    Parse a path id. Only positive decimal integers are accepted.

    >>> parse_customer_id("42")
    42
    >>> parse_customer_id("0") is None
    True
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw if raw > 0 else None
    if not isinstance(raw, str):
        return None
    raw = raw.strip()
    if not raw.isascii() or not raw.isdigit():
        return None
    value = int(raw)
    return value if value > 0 else None
