"""
Account queries - balance, nonce, code and storage of an address.
"""

from __future__ import annotations

from typing import Optional

import click

from ._common import block_options, emit, make_provider, rpc_errors, rpc_url_option


@click.command()
@click.argument("address")
@block_options
@click.option("--ether", is_flag=True, help="Show the balance in ether instead of wei")
@rpc_url_option
def balance(
    address: str,
    block_tag: Optional[str],
    block_number: Optional[int],
    ether: bool,
    rpc_url: Optional[str],
) -> None:
    """Show the balance of ADDRESS."""
    provider = make_provider(rpc_url)
    with rpc_errors():
        wei = provider.get_balance(address, block_tag, block_number)
    if ether:
        whole, frac = divmod(wei, 10**18)
        click.echo(f"{whole}.{frac:018d}")
    else:
        emit(wei)


@click.command()
@click.argument("address")
@block_options
@rpc_url_option
def nonce(
    address: str,
    block_tag: Optional[str],
    block_number: Optional[int],
    rpc_url: Optional[str],
) -> None:
    """Show the transaction count of ADDRESS."""
    provider = make_provider(rpc_url)
    with rpc_errors():
        emit(provider.get_transaction_count(address, block_tag, block_number))


@click.command()
@click.argument("address")
@block_options
@rpc_url_option
def code(
    address: str,
    block_tag: Optional[str],
    block_number: Optional[int],
    rpc_url: Optional[str],
) -> None:
    """Show the bytecode deployed at ADDRESS ("0x" if none)."""
    provider = make_provider(rpc_url)
    with rpc_errors():
        emit(provider.get_code(address, block_tag, block_number))


@click.command()
@click.argument("address")
@click.argument("slot")
@block_options
@rpc_url_option
def storage(
    address: str,
    slot: str,
    block_tag: Optional[str],
    block_number: Optional[int],
    rpc_url: Optional[str],
) -> None:
    """Show the storage word of ADDRESS at SLOT."""
    provider = make_provider(rpc_url)
    with rpc_errors():
        emit(provider.get_storage_at(address, slot, block_tag, block_number))
