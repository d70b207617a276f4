"""
Chain queries - head height, gas price and block lookups.
"""

from __future__ import annotations

import sys
from typing import Optional

import click

from ._common import block_options, emit, make_provider, rpc_errors, rpc_url_option


@click.command("block-number")
@rpc_url_option
def block_number(rpc_url: Optional[str]) -> None:
    """Show the latest block height."""
    provider = make_provider(rpc_url)
    with rpc_errors():
        emit(provider.block_number())


@click.command("gas-price")
@rpc_url_option
def gas_price(rpc_url: Optional[str]) -> None:
    """Show the current gas price in wei."""
    provider = make_provider(rpc_url)
    with rpc_errors():
        emit(provider.gas_price())


@click.command()
@click.option("--hash", "block_hash", default=None, help="Block hash (0x + 64 hex digits)")
@block_options
@click.option("--full", is_flag=True, help="Inline full transactions instead of hashes")
@rpc_url_option
def block(
    block_hash: Optional[str],
    block_tag: Optional[str],
    block_number: Optional[int],
    full: bool,
    rpc_url: Optional[str],
) -> None:
    """
    Show a block by hash, tag or height.

    Prints null when the node does not know the block.
    """
    if block_hash and (block_tag or block_number is not None):
        click.secho("ERROR: --hash cannot be combined with --tag/--number", fg="red")
        sys.exit(2)

    provider = make_provider(rpc_url)
    with rpc_errors():
        if block_hash:
            if full:
                result = provider.get_block_by_hash_with_tx(block_hash)
            else:
                result = provider.get_block_by_hash(block_hash)
        elif full:
            result = provider.get_block_by_number_with_tx(block_tag, block_number)
        else:
            result = provider.get_block_by_number(block_tag, block_number)
        emit(result)


@click.command("block-tx-count")
@click.argument("block_hash")
@rpc_url_option
def block_tx_count(block_hash: str, rpc_url: Optional[str]) -> None:
    """Show how many transactions a block contains."""
    provider = make_provider(rpc_url)
    with rpc_errors():
        emit(provider.get_block_transaction_count_by_hash(block_hash))
