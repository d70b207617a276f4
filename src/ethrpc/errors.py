"""
Error taxonomy for the ethrpc client.

Every failure raised by the library derives from ``EthRpcError``.  Transport
failures (httpx errors, undecodable JSON bodies) are not wrapped and reach the
caller as raised by httpx.
"""

from __future__ import annotations

from typing import Any, Optional


class EthRpcError(RuntimeError):
    exit_code: int = 1


class InvalidArgumentError(EthRpcError, ValueError):
    """An address, hash or other argument failed local validation.

    Raised before any request is sent.
    """

    exit_code = 2


class RpcError(EthRpcError):
    """The node answered with a non-null ``error`` member."""

    exit_code = 3

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        data: Any = None,
        method: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data
        self.method = method

    def __str__(self) -> str:
        prefix = f"{self.method}: " if self.method else ""
        if self.code is not None:
            return f"{prefix}{self.message} (code {self.code})"
        return f"{prefix}{self.message}"


class DecodeError(EthRpcError):
    exit_code = 4


class MalformedNumberError(DecodeError, ValueError):
    """A quantity was not valid hex or exceeded 256 bits."""

    def __init__(self, message: str, raw: Any = None) -> None:
        super().__init__(message)
        self.raw = raw


class MalformedResponseError(DecodeError):
    """A structured result lacked a required member."""


class MissingResultError(EthRpcError):
    """Neither ``result`` nor ``error`` was present where a value is mandatory."""

    exit_code = 5


__all__ = [
    "DecodeError",
    "EthRpcError",
    "InvalidArgumentError",
    "MalformedNumberError",
    "MalformedResponseError",
    "MissingResultError",
    "RpcError",
]
