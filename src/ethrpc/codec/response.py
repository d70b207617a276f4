"""
Response Decoder - unwrap JSON-RPC envelopes into typed results.

A well-formed response carries either ``error`` or ``result``.  A missing or
``null`` result without an error means "not found" for lookups; for calls
that must always produce a value it is a protocol violation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, TypeVar

from ..errors import MalformedResponseError, MissingResultError, RpcError
from .quantity import decode_quantity

T = TypeVar("T")

EMPTY_CODE = "0x"
ZERO_WORD = "0x" + "0" * 64


@dataclass(frozen=True)
class RpcErrorPayload:
    message: str
    code: Optional[int] = None
    data: Any = None

    @classmethod
    def from_value(cls, value: Any) -> "RpcErrorPayload":
        """Normalise an error member: an object, a bare string, or anything else."""
        if isinstance(value, dict):
            code = value.get("code")
            return cls(
                message=str(value.get("message", value)),
                code=code if isinstance(code, int) and not isinstance(code, bool) else None,
                data=value.get("data"),
            )
        if isinstance(value, str):
            return cls(message=value)
        return cls(message=str(value))


@dataclass(frozen=True)
class RpcEnvelope:
    result: Any = None
    error: Optional[RpcErrorPayload] = None

    @classmethod
    def from_dict(cls, payload: Any) -> "RpcEnvelope":
        if not isinstance(payload, dict):
            raise TypeError(f"JSON-RPC response must be an object, got {type(payload).__name__}")
        raw_error = payload.get("error")
        return cls(
            result=payload.get("result"),
            error=RpcErrorPayload.from_value(raw_error) if raw_error is not None else None,
        )

    def raise_for_error(self, method: Optional[str] = None) -> None:
        if self.error is not None:
            raise RpcError(
                self.error.message,
                code=self.error.code,
                data=self.error.data,
                method=method,
            )


def decode_scalar(envelope: RpcEnvelope, method: Optional[str] = None) -> int:
    """Quantity result that every successful call carries (``eth_blockNumber``...)."""
    envelope.raise_for_error(method)
    if envelope.result is None:
        raise MissingResultError(f"{method or 'RPC call'} returned no result")
    return decode_quantity(envelope.result)


def decode_optional_scalar(envelope: RpcEnvelope, method: Optional[str] = None) -> Optional[int]:
    envelope.raise_for_error(method)
    if envelope.result is None:
        return None
    return decode_quantity(envelope.result)


def decode_data(envelope: RpcEnvelope, default: str, method: Optional[str] = None) -> str:
    """Hex data result; ``default`` stands in for a null result."""
    envelope.raise_for_error(method)
    if envelope.result is None:
        return default
    if not isinstance(envelope.result, str):
        raise MalformedResponseError(f"{method or 'RPC call'} returned non-string data")
    return envelope.result


def decode_required_string(envelope: RpcEnvelope, method: Optional[str] = None) -> str:
    envelope.raise_for_error(method)
    if envelope.result is None:
        raise MissingResultError(f"{method or 'RPC call'} returned neither result nor error")
    if not isinstance(envelope.result, str):
        raise MalformedResponseError(f"{method or 'RPC call'} returned a non-string result")
    return envelope.result


def decode_entity(
    envelope: RpcEnvelope,
    factory: Callable[[Mapping[str, Any]], T],
    method: Optional[str] = None,
) -> Optional[T]:
    envelope.raise_for_error(method)
    if envelope.result is None:
        return None
    if not isinstance(envelope.result, dict):
        raise MalformedResponseError(f"{method or 'RPC call'} result must be an object")
    return factory(envelope.result)
