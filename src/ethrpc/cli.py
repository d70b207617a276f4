"""
ethrpc CLI

Command-line front end for the JSON-RPC provider.

Commands:
  block-number    - Latest block height
  gas-price       - Current gas price
  balance         - Account balance
  nonce           - Account transaction count
  code            - Deployed bytecode
  storage         - Storage word at a slot
  block           - Block by hash, tag or height
  block-tx-count  - Transaction count of a block
  tx              - Transaction by hash
  tx-by-index     - Transaction by block and position
  receipt         - Transaction receipt
  call            - Read-only message call
  send            - Node-signed transaction
  config          - Manage the endpoint configuration
"""

from __future__ import annotations

import logging
import sys

import click

from . import __version__
from . import config as settings


VERSION = __version__


@click.group()
@click.version_option(version=VERSION, prog_name="ethrpc")
@click.option("--verbose", "-v", is_flag=True, help="Log every JSON-RPC exchange")
def cli(verbose: bool) -> None:
    """ethrpc - typed JSON-RPC client for Ethereum nodes."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# ============ Query Commands ============

from .commands.account import balance, code, nonce, storage
from .commands.chain import block, block_number, block_tx_count, gas_price
from .commands.transactions import call, receipt, send, tx, tx_by_index

cli.add_command(block_number)
cli.add_command(gas_price)
cli.add_command(balance)
cli.add_command(nonce)
cli.add_command(code)
cli.add_command(storage)
cli.add_command(block)
cli.add_command(block_tx_count)
cli.add_command(tx)
cli.add_command(tx_by_index)
cli.add_command(receipt)
cli.add_command(call)
cli.add_command(send)


# ============ Configuration ============


@cli.group()
def config() -> None:
    """Manage the endpoint configuration."""
    pass


@config.command("set-url")
@click.argument("url")
def config_set_url(url: str) -> None:
    """Store URL as the default endpoint."""
    if not url.startswith(("http://", "https://")):
        click.secho("ERROR: URL must start with http:// or https://", fg="red")
        sys.exit(2)
    path = settings.save_rpc_url(url)
    click.echo(f"Saved endpoint to {path}")


@config.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    try:
        current = settings.load_config()
    except ValueError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)
    click.echo(f"Config file: {settings.ETHRPC_ENV}")
    click.echo(f"Endpoint:    {current.url}")
    timeout = f"{current.timeout}s" if current.timeout is not None else "transport default"
    click.echo(f"Timeout:     {timeout}")
    auth = "set" if "Authorization" in current.headers else "not set"
    click.echo(f"Auth header: {auth}")


# ============ Entry Points ============


def main() -> None:
    """ethrpc CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
