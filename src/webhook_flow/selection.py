"""Payload selection by registration number parity."""

from __future__ import annotations

import re

from webhook_flow.models import PayloadChoice

_NON_DIGITS = re.compile(r"\D+")


def trailing_digits(registration_id: str, count: int = 2) -> str:
    """Return the last ``count`` digits of an identifier, ignoring other characters."""
    digits = _NON_DIGITS.sub("", registration_id)
    return digits[-count:]


def is_last_two_digits_odd(registration_id: str) -> bool:
    last_two = trailing_digits(registration_id)
    if not last_two:
        raise ValueError(f"Registration number must contain digits: {registration_id!r}")
    return int(last_two) % 2 == 1


def select_payload(registration_id: str) -> PayloadChoice:
    """Odd trailing digits pick payload A, even ones payload B."""
    return PayloadChoice.A if is_last_two_digits_odd(registration_id) else PayloadChoice.B
