"""Shared fixtures: a Provider wired to an in-memory httpx transport."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import httpx
import pytest

from ethrpc.provider import Provider

FIXTURES_ROOT = Path(__file__).resolve().parent / "fixtures"

RPC_URL = "http://node.test/rpc"


def load_fixture(name: str) -> dict[str, Any]:
    with (FIXTURES_ROOT / name).open("r", encoding="utf-8") as f:
        return json.load(f)


class FakeNode:
    """
    Records every JSON-RPC request and answers with a queued body.

    ``reply`` sets the JSON body returned for subsequent requests; ``status``
    sets the HTTP status.
    """

    def __init__(self) -> None:
        self.requests: list[dict[str, Any]] = []
        self.raw_bodies: list[bytes] = []
        self.headers: list[httpx.Headers] = []
        self.body: Any = {"jsonrpc": "2.0", "id": 1, "result": None}
        self.status = 200

    def reply(self, body: Any, status: int = 200) -> None:
        self.body = body
        self.status = status

    def result(self, value: Any) -> None:
        self.reply({"jsonrpc": "2.0", "id": 1, "result": value})

    def error(self, message: str, code: int = -32000) -> None:
        self.reply({"jsonrpc": "2.0", "id": 1, "error": {"code": code, "message": message}})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.raw_bodies.append(request.content)
        self.requests.append(json.loads(request.content))
        self.headers.append(request.headers)
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status, content=self.body)
        return httpx.Response(self.status, json=self.body)

    @property
    def last(self) -> dict[str, Any]:
        return self.requests[-1]


@pytest.fixture()
def node() -> FakeNode:
    return FakeNode()


@pytest.fixture()
def provider(node: FakeNode) -> Provider:
    return Provider(RPC_URL, transport=httpx.MockTransport(node.handler))

