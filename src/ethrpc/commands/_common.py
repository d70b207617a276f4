"""Shared options and helpers for the command modules."""

from __future__ import annotations

import json
import sys
from contextlib import contextmanager
from dataclasses import replace
from typing import Any, Iterator, Optional

import click
import httpx

from ..codec.params import BlockTag
from ..config import load_config
from ..errors import EthRpcError
from ..provider import Provider

TAG_CHOICES = [tag.value for tag in BlockTag]

rpc_url_option = click.option(
    "--rpc-url",
    envvar="ETHRPC_URL",
    default=None,
    help="JSON-RPC endpoint URL (default: from ~/.ethrpc/.env)",
)


def block_options(func):
    """Attach --tag / --number; a tag wins over a number, neither means latest."""
    func = click.option(
        "--number", "block_number", type=click.IntRange(min=0), default=None, help="Block height"
    )(func)
    func = click.option(
        "--tag", "block_tag", type=click.Choice(TAG_CHOICES), default=None, help="Named block tag"
    )(func)
    return func


def make_provider(rpc_url: Optional[str]) -> Provider:
    try:
        config = load_config()
    except ValueError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)
    if rpc_url:
        config = replace(config, url=rpc_url)
    return Provider.from_config(config)


def emit(value: Any) -> None:
    if value is None:
        click.echo("null")
    elif hasattr(value, "to_dict"):
        click.echo(json.dumps(value.to_dict(), indent=2))
    else:
        click.echo(str(value))


@contextmanager
def rpc_errors() -> Iterator[None]:
    try:
        yield
    except EthRpcError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(exc.exit_code)
    except httpx.HTTPError as exc:
        click.secho(f"ERROR: Transport failure: {exc}", fg="red")
        sys.exit(1)
