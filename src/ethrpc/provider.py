"""
JSON-RPC Provider for Ethereum-compatible nodes.

Each operation maps to one JSON-RPC method and performs a single blocking
round trip over httpx.  Arguments are validated locally before anything is
sent; responses are decoded into the types in ``ethrpc.models``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Sequence, TypeVar, Union

import httpx

from .codec.params import (
    BlockSelector,
    encode_block_selector,
    require_address,
    require_hash,
    require_slot,
)
from .codec.quantity import encode_quantity
from .codec.request import CallInput, TransactionInput, build_request
from .codec.response import (
    EMPTY_CODE,
    ZERO_WORD,
    RpcEnvelope,
    decode_data,
    decode_entity,
    decode_optional_scalar,
    decode_required_string,
    decode_scalar,
)
from .config import ProviderConfig, load_config
from .models import Block, BlockWithTransactions, Transaction, TransactionReceipt

logger = logging.getLogger(__name__)

T = TypeVar("T")

TagArg = Optional[Union[BlockSelector, str]]

DEFAULT_HEADERS = {"Content-Type": "application/json"}


class Provider:
    """
    Client handle for one JSON-RPC endpoint.

    Holds only immutable settings (URL, headers, timeout); calls share no
    state and may be issued from several threads.

    Args:
        url: JSON-RPC endpoint URL
        headers: Extra headers merged over ``Content-Type: application/json``
        timeout: Transport timeout in seconds (None keeps the httpx default)
        transport: Optional httpx transport (e.g. ``httpx.MockTransport``)
    """

    def __init__(
        self,
        url: str,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.url = url
        self.headers = {**DEFAULT_HEADERS, **(headers or {})}
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_config(
        cls, config: ProviderConfig, transport: Optional[httpx.BaseTransport] = None
    ) -> "Provider":
        return cls(config.url, headers=config.headers, timeout=config.timeout, transport=transport)

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Provider":
        return cls.from_config(load_config(env_path))

    def __repr__(self) -> str:
        return f"Provider({self.url!r})"

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _client(self) -> httpx.Client:
        kwargs: dict[str, Any] = {"headers": self.headers}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.Client(**kwargs)

    def request(self, method: str, params: Sequence[Any] = ()) -> RpcEnvelope:
        """
        Send one JSON-RPC request and return the raw envelope.

        Raises:
            httpx.HTTPError: On network failure or a non-2xx status
            ValueError: If the body is not valid JSON
        """
        body = build_request(method, params)
        logger.debug("rpc request %s with %d param(s)", method, len(params))

        with self._client() as client:
            response = client.post(self.url, content=body)
            response.raise_for_status()
            data = response.json()

        envelope = RpcEnvelope.from_dict(data)
        if envelope.error is not None:
            logger.debug("rpc %s returned error: %s", method, envelope.error.message)
        return envelope

    def _lookup(
        self,
        method: str,
        params: Sequence[Any],
        factory: Callable[[Mapping[str, Any]], T],
    ) -> Optional[T]:
        entity = decode_entity(self.request(method, params), factory, method)
        if entity is None:
            logger.debug("rpc %s: not found", method)
        return entity

    # ------------------------------------------------------------------
    # Scalars
    # ------------------------------------------------------------------

    def block_number(self) -> int:
        """Height of the most recent block."""
        return decode_scalar(self.request("eth_blockNumber"), "eth_blockNumber")

    def gas_price(self) -> int:
        """Current gas price in wei."""
        return decode_scalar(self.request("eth_gasPrice"), "eth_gasPrice")

    def get_balance(
        self,
        address: str,
        block_param: TagArg = None,
        block_number: Optional[int] = None,
    ) -> int:
        """
        Balance of an account in wei.

        Args:
            address: 0x-prefixed 20-byte address
            block_param: Block tag or BlockHeight; wins over block_number
            block_number: Absolute block height

        Raises:
            InvalidArgumentError: If the address is malformed
            RpcError: If the node reports an error
        """
        require_address(address)
        params = [address, encode_block_selector(block_param, block_number)]
        return decode_scalar(self.request("eth_getBalance", params), "eth_getBalance")

    def get_transaction_count(
        self,
        address: str,
        block_param: TagArg = None,
        block_number: Optional[int] = None,
    ) -> int:
        """Number of transactions sent from an address (its nonce)."""
        require_address(address)
        params = [address, encode_block_selector(block_param, block_number)]
        return decode_scalar(
            self.request("eth_getTransactionCount", params), "eth_getTransactionCount"
        )

    def get_block_transaction_count_by_hash(self, block_hash: str) -> Optional[int]:
        """Transaction count of a block, or None if the block is unknown."""
        require_hash(block_hash, "block hash")
        method = "eth_getBlockTransactionCountByHash"
        return decode_optional_scalar(self.request(method, [block_hash]), method)

    # ------------------------------------------------------------------
    # Account state
    # ------------------------------------------------------------------

    def get_storage_at(
        self,
        address: str,
        slot: str,
        block_param: TagArg = None,
        block_number: Optional[int] = None,
    ) -> str:
        """
        Raw 32-byte storage word at ``slot``.

        Args:
            address: 0x-prefixed contract address
            slot: 0x-prefixed storage position (1 to 64 hex digits)
        """
        require_address(address)
        require_slot(slot)
        params = [address, slot, encode_block_selector(block_param, block_number)]
        return decode_data(self.request("eth_getStorageAt", params), ZERO_WORD, "eth_getStorageAt")

    def get_code(
        self,
        address: str,
        block_param: TagArg = None,
        block_number: Optional[int] = None,
    ) -> str:
        """Deployed bytecode; ``"0x"`` for accounts without code."""
        require_address(address)
        params = [address, encode_block_selector(block_param, block_number)]
        return decode_data(self.request("eth_getCode", params), EMPTY_CODE, "eth_getCode")

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def get_block_by_hash(self, block_hash: str) -> Optional[Block]:
        require_hash(block_hash, "block hash")
        return self._lookup("eth_getBlockByHash", [block_hash, False], Block.from_dict)

    def get_block_by_hash_with_tx(self, block_hash: str) -> Optional[BlockWithTransactions]:
        require_hash(block_hash, "block hash")
        return self._lookup(
            "eth_getBlockByHash", [block_hash, True], BlockWithTransactions.from_dict
        )

    def get_block_by_number(
        self,
        block_param: TagArg = None,
        block_number: Optional[int] = None,
    ) -> Optional[Block]:
        selector = encode_block_selector(block_param, block_number)
        return self._lookup("eth_getBlockByNumber", [selector, False], Block.from_dict)

    def get_block_by_number_with_tx(
        self,
        block_param: TagArg = None,
        block_number: Optional[int] = None,
    ) -> Optional[BlockWithTransactions]:
        selector = encode_block_selector(block_param, block_number)
        return self._lookup(
            "eth_getBlockByNumber", [selector, True], BlockWithTransactions.from_dict
        )

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    def get_transaction_by_hash(self, tx_hash: str) -> Optional[Transaction]:
        require_hash(tx_hash, "transaction hash")
        return self._lookup("eth_getTransactionByHash", [tx_hash], Transaction.from_dict)

    def get_transaction_by_block_hash_and_index(
        self, block_hash: str, index: int
    ) -> Optional[Transaction]:
        require_hash(block_hash, "block hash")
        params = [block_hash, encode_quantity(index)]
        return self._lookup(
            "eth_getTransactionByBlockHashAndIndex", params, Transaction.from_dict
        )

    def get_transaction_by_block_number_and_index(
        self,
        index: int,
        block_param: TagArg = None,
        block_number: Optional[int] = None,
    ) -> Optional[Transaction]:
        params = [encode_block_selector(block_param, block_number), encode_quantity(index)]
        return self._lookup(
            "eth_getTransactionByBlockNumberAndIndex", params, Transaction.from_dict
        )

    def get_transaction_receipt(self, tx_hash: str) -> Optional[TransactionReceipt]:
        """Receipt of a mined transaction; None while pending or unknown."""
        require_hash(tx_hash, "transaction hash")
        return self._lookup(
            "eth_getTransactionReceipt", [tx_hash], TransactionReceipt.from_dict
        )

    # ------------------------------------------------------------------
    # Calls
    # ------------------------------------------------------------------

    def send_transaction(self, tx: TransactionInput) -> str:
        """
        Submit a transaction signed by the node's unlocked account.

        Returns:
            Transaction hash (0x-prefixed hex)

        Raises:
            MissingResultError: If the node returned neither hash nor error
        """
        tx.validate()
        method = "eth_sendTransaction"
        return decode_required_string(self.request(method, [tx.to_dict()]), method)

    def call(
        self,
        tx: CallInput,
        block_param: TagArg = None,
        block_number: Optional[int] = None,
    ) -> str:
        """
        Execute a message call without creating a transaction.

        Returns:
            Return data as 0x-prefixed hex
        """
        tx.validate()
        params = [tx.to_dict(), encode_block_selector(block_param, block_number)]
        return decode_required_string(self.request("eth_call", params), "eth_call")
