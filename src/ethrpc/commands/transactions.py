"""
Transaction commands - lookups, receipts, message calls and node-signed sends.
"""

from __future__ import annotations

import sys
from typing import Optional

import click

from ..codec.request import CallInput, TransactionInput
from ._common import block_options, emit, make_provider, rpc_errors, rpc_url_option


@click.command()
@click.argument("tx_hash")
@rpc_url_option
def tx(tx_hash: str, rpc_url: Optional[str]) -> None:
    """Show the transaction TX_HASH."""
    provider = make_provider(rpc_url)
    with rpc_errors():
        emit(provider.get_transaction_by_hash(tx_hash))


@click.command("tx-by-index")
@click.option("--index", required=True, type=click.IntRange(min=0), help="Position in the block")
@click.option("--block-hash", default=None, help="Block hash (0x + 64 hex digits)")
@block_options
@rpc_url_option
def tx_by_index(
    index: int,
    block_hash: Optional[str],
    block_tag: Optional[str],
    block_number: Optional[int],
    rpc_url: Optional[str],
) -> None:
    """Show the transaction at --index of a block."""
    if block_hash and (block_tag or block_number is not None):
        click.secho("ERROR: --block-hash cannot be combined with --tag/--number", fg="red")
        sys.exit(2)

    provider = make_provider(rpc_url)
    with rpc_errors():
        if block_hash:
            result = provider.get_transaction_by_block_hash_and_index(block_hash, index)
        else:
            result = provider.get_transaction_by_block_number_and_index(
                index, block_tag, block_number
            )
        emit(result)


@click.command()
@click.argument("tx_hash")
@rpc_url_option
def receipt(tx_hash: str, rpc_url: Optional[str]) -> None:
    """
    Show the receipt of TX_HASH.

    Prints null while the transaction is pending.
    """
    provider = make_provider(rpc_url)
    with rpc_errors():
        emit(provider.get_transaction_receipt(tx_hash))


@click.command()
@click.option("--to", "to", required=True, help="Target contract address")
@click.option("--from", "from_address", default=None, help="Caller address")
@click.option("--data", default=None, help="0x-prefixed calldata")
@click.option("--value", default=None, type=click.IntRange(min=0), help="Value in wei")
@click.option("--gas", default=None, type=click.IntRange(min=0), help="Gas limit")
@block_options
@rpc_url_option
def call(
    to: str,
    from_address: Optional[str],
    data: Optional[str],
    value: Optional[int],
    gas: Optional[int],
    block_tag: Optional[str],
    block_number: Optional[int],
    rpc_url: Optional[str],
) -> None:
    """Execute a read-only message call and print the return data."""
    provider = make_provider(rpc_url)
    call_input = CallInput(to=to, from_address=from_address, gas=gas, value=value, data=data)
    with rpc_errors():
        emit(provider.call(call_input, block_tag, block_number))


@click.command()
@click.option("--from", "from_address", required=True, help="Unlocked sender account on the node")
@click.option("--to", "to", default=None, help="Recipient (omit to create a contract)")
@click.option("--data", default=None, help="0x-prefixed calldata or init code")
@click.option("--value", default=None, type=click.IntRange(min=0), help="Value in wei")
@click.option("--gas", default=None, type=click.IntRange(min=0), help="Gas limit")
@click.option("--gas-price", default=None, type=click.IntRange(min=0), help="Gas price in wei")
@click.option("--nonce", default=None, type=click.IntRange(min=0), help="Explicit nonce")
@rpc_url_option
def send(
    from_address: str,
    to: Optional[str],
    data: Optional[str],
    value: Optional[int],
    gas: Optional[int],
    gas_price: Optional[int],
    nonce: Optional[int],
    rpc_url: Optional[str],
) -> None:
    """
    Submit a transaction signed by the node (eth_sendTransaction).

    The sender account must be unlocked on the node; nothing is signed locally.
    """
    provider = make_provider(rpc_url)
    tx_input = TransactionInput(
        from_address=from_address,
        to=to,
        gas=gas,
        gas_price=gas_price,
        value=value,
        data=data,
        nonce=nonce,
    )
    with rpc_errors():
        tx_hash = provider.send_transaction(tx_input)
    click.secho("SUCCESS: Transaction submitted", fg="green")
    click.echo(f"  TX: {tx_hash}")
