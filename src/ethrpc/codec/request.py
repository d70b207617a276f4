"""
Request Builder - JSON-RPC 2.0 envelopes and object-shaped parameters.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from .params import require_address, require_data
from .quantity import encode_quantity

JSONRPC_VERSION = "2.0"
REQUEST_ID = 1


def build_payload(method: str, params: Sequence[Any] = ()) -> dict[str, Any]:
    return {
        "method": method,
        "params": list(params),
        "id": REQUEST_ID,
        "jsonrpc": JSONRPC_VERSION,
    }


def build_request(method: str, params: Sequence[Any] = ()) -> bytes:
    """
    Serialize a single JSON-RPC request.

    Args:
        method: RPC method name (e.g., "eth_getBalance")
        params: Positional parameters, already in wire form

    Returns:
        UTF-8 encoded compact JSON body
    """
    payload = build_payload(method, params)
    return json.dumps(payload, separators=(",", ":")).encode("utf-8")


def _put_quantity(out: dict[str, Any], key: str, value: Optional[int]) -> None:
    if value is not None:
        out[key] = encode_quantity(value)


@dataclass(frozen=True)
class TransactionInput:
    """
    Parameters of ``eth_sendTransaction``.

    The node signs with the account named in ``from_address``; it must be
    unlocked on the node.
    """
    from_address: str
    to: Optional[str] = None
    gas: Optional[int] = None
    gas_price: Optional[int] = None
    value: Optional[int] = None
    data: Optional[str] = None
    nonce: Optional[int] = None

    def validate(self) -> None:
        require_address(self.from_address, "sender address")
        if self.to is not None:
            require_address(self.to, "recipient address")
        if self.data is not None:
            require_data(self.data)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"from": self.from_address}
        if self.to is not None:
            result["to"] = self.to
        _put_quantity(result, "gas", self.gas)
        _put_quantity(result, "gasPrice", self.gas_price)
        _put_quantity(result, "value", self.value)
        if self.data is not None:
            result["data"] = self.data
        _put_quantity(result, "nonce", self.nonce)
        return result


@dataclass(frozen=True)
class CallInput:
    """Parameters of ``eth_call`` (message call without a transaction)."""
    to: str
    from_address: Optional[str] = None
    gas: Optional[int] = None
    gas_price: Optional[int] = None
    value: Optional[int] = None
    data: Optional[str] = None

    def validate(self) -> None:
        require_address(self.to, "call target")
        if self.from_address is not None:
            require_address(self.from_address, "sender address")
        if self.data is not None:
            require_data(self.data)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.from_address is not None:
            result["from"] = self.from_address
        result["to"] = self.to
        _put_quantity(result, "gas", self.gas)
        _put_quantity(result, "gasPrice", self.gas_price)
        _put_quantity(result, "value", self.value)
        if self.data is not None:
            result["data"] = self.data
        return result
