"""
CLI integration tests using Click's test runner.

Commands run end-to-end against an in-memory node; no network access.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Iterator
from unittest.mock import patch

import httpx
import pytest
from click.testing import CliRunner

from ethrpc.cli import cli
from ethrpc.provider import Provider

from conftest import FakeNode, load_fixture

ADDRESS = "0x0000000000000000000000000000000000000000"
BLOCK_HASH = "0xb3b20624f8f0f86eb50dd04688409e5cea4bd02d700bf6e79e9384d47d6a5a35"
TX_HASH = "0x88df016429689c079f3b2f6ad39fa052532c56795b733da78a91ebe6a713944b"


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def env_path(tmp_path: Path) -> Iterator[Path]:
    """Point configuration at a temporary ~/.ethrpc/.env and clear ETHRPC_* vars."""
    path = tmp_path / ".ethrpc" / ".env"
    env = {k: v for k, v in os.environ.items() if not k.startswith("ETHRPC_")}
    with patch.dict(os.environ, env, clear=True):
        with patch("ethrpc.config.ETHRPC_ENV", path):
            yield path


@pytest.fixture()
def cli_node(node: FakeNode, env_path: Path) -> Iterator[FakeNode]:
    """Route every provider the CLI builds to the fake node."""
    built: list[Provider] = []

    def from_config(config, transport=None):
        provider = Provider(
            config.url,
            headers=config.headers,
            timeout=config.timeout,
            transport=httpx.MockTransport(node.handler),
        )
        built.append(provider)
        return provider

    node.built = built  # type: ignore[attr-defined]
    with patch.object(Provider, "from_config", staticmethod(from_config)):
        yield node


class TestVersionAndHelp:
    """Basic commands that never touch a node."""

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.3.0" in result.output

    def test_help_lists_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("block-number", "balance", "receipt", "call", "config"):
            assert name in result.output


class TestScalarCommands:
    """block-number, gas-price, balance, nonce."""

    def test_block_number(self, runner: CliRunner, cli_node: FakeNode) -> None:
        cli_node.result("0x2c")
        result = runner.invoke(cli, ["block-number"])
        assert result.exit_code == 0
        assert result.output.strip() == "44"

    def test_rpc_url_option(self, runner: CliRunner, cli_node: FakeNode) -> None:
        cli_node.result("0x1")
        result = runner.invoke(cli, ["gas-price", "--rpc-url", "http://other.test"])
        assert result.exit_code == 0
        assert cli_node.built[-1].url == "http://other.test"

    def test_balance_at_height(self, runner: CliRunner, cli_node: FakeNode) -> None:
        cli_node.result("0xde0b6b3a7640000")
        result = runner.invoke(cli, ["balance", ADDRESS, "--number", "100"])
        assert result.exit_code == 0
        assert result.output.strip() == str(10**18)
        assert cli_node.last["params"] == [ADDRESS, "0x64"]

    def test_balance_in_ether(self, runner: CliRunner, cli_node: FakeNode) -> None:
        cli_node.result("0x1bc16d674ec80000")
        result = runner.invoke(cli, ["balance", ADDRESS, "--ether"])
        assert result.exit_code == 0
        assert result.output.strip() == "2.000000000000000000"

    def test_nonce_with_tag(self, runner: CliRunner, cli_node: FakeNode) -> None:
        cli_node.result("0x3")
        result = runner.invoke(cli, ["nonce", ADDRESS, "--tag", "pending"])
        assert result.exit_code == 0
        assert cli_node.last["params"] == [ADDRESS, "pending"]

    def test_invalid_address(self, runner: CliRunner, cli_node: FakeNode) -> None:
        result = runner.invoke(cli, ["balance", "0x00"])
        assert result.exit_code == 2
        assert "Invalid address" in result.output
        assert cli_node.requests == []

    def test_node_error(self, runner: CliRunner, cli_node: FakeNode) -> None:
        cli_node.error("boom")
        result = runner.invoke(cli, ["block-number"])
        assert result.exit_code == 3
        assert "boom" in result.output

    def test_transport_error(self, runner: CliRunner, cli_node: FakeNode) -> None:
        cli_node.reply({}, status=502)
        result = runner.invoke(cli, ["gas-price"])
        assert result.exit_code == 1
        assert "Transport failure" in result.output


class TestEntityCommands:
    """block, tx, receipt."""

    def test_block_json(self, runner: CliRunner, cli_node: FakeNode) -> None:
        cli_node.result(load_fixture("block_light.json"))
        result = runner.invoke(cli, ["block", "--hash", BLOCK_HASH])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["gas_limit"] == 30_000_000
        assert cli_node.last["params"] == [BLOCK_HASH, False]

    def test_block_full(self, runner: CliRunner, cli_node: FakeNode) -> None:
        payload = load_fixture("block_light.json")
        payload["transactions"] = [load_fixture("transaction.json")]
        cli_node.result(payload)
        result = runner.invoke(cli, ["block", "--tag", "finalized", "--full"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["transactions"][0]["hash"] == TX_HASH
        assert cli_node.last["params"] == ["finalized", True]

    def test_block_hash_conflicts_with_tag(self, runner: CliRunner, cli_node: FakeNode) -> None:
        result = runner.invoke(cli, ["block", "--hash", BLOCK_HASH, "--tag", "latest"])
        assert result.exit_code == 2
        assert cli_node.requests == []

    def test_block_not_found(self, runner: CliRunner, cli_node: FakeNode) -> None:
        cli_node.reply({"error": None, "result": None})
        result = runner.invoke(cli, ["block", "--number", "99999999"])
        assert result.exit_code == 0
        assert result.output.strip() == "null"

    def test_receipt(self, runner: CliRunner, cli_node: FakeNode) -> None:
        cli_node.result(load_fixture("receipt.json"))
        result = runner.invoke(cli, ["receipt", TX_HASH])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["status"] == 1
        assert len(data["logs"]) == 1

    def test_tx_by_index(self, runner: CliRunner, cli_node: FakeNode) -> None:
        cli_node.result(load_fixture("transaction.json"))
        result = runner.invoke(cli, ["tx-by-index", "--block-hash", BLOCK_HASH, "--index", "65"])
        assert result.exit_code == 0
        assert cli_node.last["method"] == "eth_getTransactionByBlockHashAndIndex"
        assert cli_node.last["params"] == [BLOCK_HASH, "0x41"]


class TestCallCommands:
    """code, call, send."""

    def test_code_of_plain_account(self, runner: CliRunner, cli_node: FakeNode) -> None:
        cli_node.result("0x")
        result = runner.invoke(cli, ["code", ADDRESS])
        assert result.exit_code == 0
        assert result.output.strip() == "0x"

    def test_call(self, runner: CliRunner, cli_node: FakeNode) -> None:
        cli_node.result("0x" + "0" * 64)
        result = runner.invoke(cli, ["call", "--to", ADDRESS, "--data", "0x70a08231"])
        assert result.exit_code == 0
        assert cli_node.last["params"] == [{"to": ADDRESS, "data": "0x70a08231"}, "latest"]

    def test_send(self, runner: CliRunner, cli_node: FakeNode) -> None:
        cli_node.result(TX_HASH)
        result = runner.invoke(cli, ["send", "--from", ADDRESS, "--value", "1"])
        assert result.exit_code == 0
        assert TX_HASH in result.output
        assert cli_node.last["params"] == [{"from": ADDRESS, "value": "0x1"}]


class TestConfigCommands:
    """config set-url / show."""

    def test_set_url_then_show(self, runner: CliRunner, env_path: Path) -> None:
        result = runner.invoke(cli, ["config", "set-url", "https://node.example/rpc"])
        assert result.exit_code == 0
        assert env_path.exists()
        assert "ETHRPC_URL=https://node.example/rpc" in env_path.read_text(encoding="utf-8")

        result = runner.invoke(cli, ["config", "show"])
        assert result.exit_code == 0
        assert "https://node.example/rpc" in result.output

    def test_set_url_rejects_non_http(self, runner: CliRunner, env_path: Path) -> None:
        result = runner.invoke(cli, ["config", "set-url", "ftp://node"])
        assert result.exit_code == 2
        assert not env_path.exists()
