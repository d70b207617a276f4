"""Conversion between hex quantity strings and Python integers."""

from __future__ import annotations

import re
from typing import Any, Optional

from ..errors import InvalidArgumentError, MalformedNumberError

MAX_QUANTITY = 2**256 - 1

_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]+")


def decode_quantity(value: Any) -> int:
    """
    Parse a node-reported quantity.

    The ``0x`` prefix is optional and digits are case-insensitive.

    Raises:
        MalformedNumberError: If the value is not a hex string or does not
            fit in 256 bits.
    """
    if not isinstance(value, str):
        raise MalformedNumberError(f"Quantity must be a hex string, got {value!r}", raw=value)

    digits = value[2:] if value[:2] in ("0x", "0X") else value
    if not _HEX_DIGITS.fullmatch(digits):
        raise MalformedNumberError(f"Invalid hex quantity: {value!r}", raw=value)

    number = int(digits, 16)
    if number > MAX_QUANTITY:
        raise MalformedNumberError(f"Quantity exceeds 256 bits: {value!r}", raw=value)
    return number


def decode_optional_quantity(value: Any) -> Optional[int]:
    if value is None:
        return None
    return decode_quantity(value)


def encode_quantity(number: int) -> str:
    """Render an integer as a minimal lowercase ``0x`` quantity (``0x0`` for zero)."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise InvalidArgumentError(f"Quantity must be an integer, got {number!r}")
    if number < 0:
        raise InvalidArgumentError(f"Quantity must be non-negative, got {number}")
    if number > MAX_QUANTITY:
        raise InvalidArgumentError(f"Quantity exceeds 256 bits: {number}")
    return hex(number)
