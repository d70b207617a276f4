"""
Parameter encoding - block selectors and argument shape checks.

A block selector is either a named tag or an absolute height.  Callers of
the provider pass both as optional arguments; a tag always wins over a
height and the absence of both means ``latest``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..errors import InvalidArgumentError
from .quantity import encode_quantity

ADDRESS_PATTERN = re.compile(r"0x[0-9A-Fa-f]{40}")
HASH_PATTERN = re.compile(r"0x[0-9A-Fa-f]{64}")
SLOT_PATTERN = re.compile(r"0x[0-9A-Fa-f]{1,64}")
DATA_PATTERN = re.compile(r"0x(?:[0-9A-Fa-f]{2})*")

MAX_BLOCK_HEIGHT = 2**128 - 1


class BlockTag(str, Enum):
    EARLIEST = "earliest"
    SAFE = "safe"
    FINALIZED = "finalized"
    LATEST = "latest"
    PENDING = "pending"

    def to_param(self) -> str:
        return self.value


@dataclass(frozen=True)
class BlockHeight:
    number: int

    def __post_init__(self) -> None:
        if isinstance(self.number, bool) or not isinstance(self.number, int):
            raise InvalidArgumentError(f"Block number must be an integer, got {self.number!r}")
        if not 0 <= self.number <= MAX_BLOCK_HEIGHT:
            raise InvalidArgumentError(f"Block number out of range: {self.number}")

    def to_param(self) -> str:
        return encode_quantity(self.number)


BlockSelector = Union[BlockTag, BlockHeight]


def _coerce_tag(tag: Union[BlockTag, str]) -> BlockTag:
    if isinstance(tag, BlockTag):
        return tag
    try:
        return BlockTag(str(tag).lower())
    except ValueError:
        choices = ", ".join(t.value for t in BlockTag)
        raise InvalidArgumentError(f"Unknown block tag {tag!r} (expected one of: {choices})") from None


def resolve_block_selector(
    tag: Optional[Union[BlockSelector, str]] = None,
    height: Optional[int] = None,
) -> BlockSelector:
    """
    Collapse the optional tag/height pair into a single selector.

    Args:
        tag: Named tag or a ready-made selector; takes precedence when given.
        height: Absolute block height, used only without a tag.

    Returns:
        The tag, a ``BlockHeight``, or ``BlockTag.LATEST``.
    """
    if isinstance(tag, BlockHeight):
        return tag
    if tag is not None:
        return _coerce_tag(tag)
    if height is not None:
        return BlockHeight(height)
    return BlockTag.LATEST


def encode_block_selector(
    tag: Optional[Union[BlockSelector, str]] = None,
    height: Optional[int] = None,
) -> str:
    return resolve_block_selector(tag, height).to_param()


def validate_address(value: object) -> bool:
    return isinstance(value, str) and ADDRESS_PATTERN.fullmatch(value) is not None


def validate_hash(value: object) -> bool:
    return isinstance(value, str) and HASH_PATTERN.fullmatch(value) is not None


def validate_slot(value: object) -> bool:
    return isinstance(value, str) and SLOT_PATTERN.fullmatch(value) is not None


def validate_data(value: object) -> bool:
    return isinstance(value, str) and DATA_PATTERN.fullmatch(value) is not None


def require_address(value: str, name: str = "address") -> str:
    if not validate_address(value):
        raise InvalidArgumentError(f"Invalid {name}: {value!r}")
    return value


def require_hash(value: str, name: str = "hash") -> str:
    if not validate_hash(value):
        raise InvalidArgumentError(f"Invalid {name}: {value!r}")
    return value


def require_slot(value: str) -> str:
    if not validate_slot(value):
        raise InvalidArgumentError(f"Invalid storage slot: {value!r}")
    return value


def require_data(value: str, name: str = "data") -> str:
    if not validate_data(value):
        raise InvalidArgumentError(f"Invalid {name}: {value!r}")
    return value
