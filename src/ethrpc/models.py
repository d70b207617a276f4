"""
Typed entities decoded from node responses.

Every quantity-typed member is decoded to ``int`` when the entity is built.
Hash, address and byte-string members are kept as the node sent them.
Members a pending block or transaction has not been assigned yet are
``Optional`` and stay ``None`` exactly where the node reports ``null``.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional

from .codec.quantity import decode_optional_quantity, decode_quantity
from .errors import MalformedNumberError, MalformedResponseError


def _required(payload: Mapping[str, Any], key: str) -> Any:
    if key not in payload or payload[key] is None:
        raise MalformedResponseError(f"Missing required field: {key}")
    return payload[key]


def _quantity(payload: Mapping[str, Any], key: str) -> int:
    try:
        return decode_quantity(_required(payload, key))
    except MalformedNumberError as exc:
        raise MalformedNumberError(f"{key}: {exc}", raw=exc.raw) from exc


def _optional_quantity(payload: Mapping[str, Any], key: str) -> Optional[int]:
    try:
        return decode_optional_quantity(payload.get(key))
    except MalformedNumberError as exc:
        raise MalformedNumberError(f"{key}: {exc}", raw=exc.raw) from exc


def _strings(payload: Mapping[str, Any], key: str) -> tuple[str, ...]:
    values = _required(payload, key)
    if not isinstance(values, list):
        raise MalformedResponseError(f"Field {key} must be a list")
    for entry in values:
        if not isinstance(entry, str):
            raise MalformedResponseError(f"Field {key} must contain only strings")
    return tuple(values)


class _Entity:
    def to_dict(self) -> dict[str, Any]:
        return asdict(self)  # type: ignore[call-overload]


@dataclass(frozen=True)
class Log(_Entity):
    removed: bool
    log_index: int
    transaction_index: int
    transaction_hash: str
    block_hash: str
    block_number: int
    address: str
    data: str
    topics: tuple[str, ...]

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Log":
        return cls(
            removed=bool(payload.get("removed", False)),
            log_index=_quantity(payload, "logIndex"),
            transaction_index=_quantity(payload, "transactionIndex"),
            transaction_hash=_required(payload, "transactionHash"),
            block_hash=_required(payload, "blockHash"),
            block_number=_quantity(payload, "blockNumber"),
            address=_required(payload, "address"),
            data=_required(payload, "data"),
            topics=_strings(payload, "topics"),
        )


@dataclass(frozen=True)
class Transaction(_Entity):
    """Transaction as reported by the node. Signature members v, r and s are kept verbatim."""

    block_hash: Optional[str]
    block_number: Optional[int]
    from_address: str
    gas: int
    gas_price: int
    hash: str
    input: str
    nonce: int
    to: Optional[str]
    transaction_index: Optional[int]
    value: int
    v: str
    r: str
    s: str
    type: Optional[int] = None
    chain_id: Optional[int] = None
    max_fee_per_gas: Optional[int] = None
    max_priority_fee_per_gas: Optional[int] = None

    @property
    def is_pending(self) -> bool:
        return self.block_hash is None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Transaction":
        return cls(
            block_hash=payload.get("blockHash"),
            block_number=_optional_quantity(payload, "blockNumber"),
            from_address=_required(payload, "from"),
            gas=_quantity(payload, "gas"),
            gas_price=_quantity(payload, "gasPrice"),
            hash=_required(payload, "hash"),
            input=_required(payload, "input"),
            nonce=_quantity(payload, "nonce"),
            to=payload.get("to"),
            transaction_index=_optional_quantity(payload, "transactionIndex"),
            value=_quantity(payload, "value"),
            v=_required(payload, "v"),
            r=_required(payload, "r"),
            s=_required(payload, "s"),
            type=_optional_quantity(payload, "type"),
            chain_id=_optional_quantity(payload, "chainId"),
            max_fee_per_gas=_optional_quantity(payload, "maxFeePerGas"),
            max_priority_fee_per_gas=_optional_quantity(payload, "maxPriorityFeePerGas"),
        )


def _header_fields(payload: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "number": _optional_quantity(payload, "number"),
        "hash": payload.get("hash"),
        "parent_hash": _required(payload, "parentHash"),
        "nonce": _optional_quantity(payload, "nonce"),
        "sha3_uncles": _required(payload, "sha3Uncles"),
        "logs_bloom": payload.get("logsBloom"),
        "transactions_root": _required(payload, "transactionsRoot"),
        "state_root": _required(payload, "stateRoot"),
        "receipts_root": _required(payload, "receiptsRoot"),
        "miner": payload.get("miner"),
        "difficulty": _quantity(payload, "difficulty"),
        "total_difficulty": _optional_quantity(payload, "totalDifficulty"),
        "extra_data": _required(payload, "extraData"),
        "size": _quantity(payload, "size"),
        "gas_limit": _quantity(payload, "gasLimit"),
        "gas_used": _quantity(payload, "gasUsed"),
        "timestamp": _quantity(payload, "timestamp"),
        "uncles": _strings(payload, "uncles"),
        "base_fee_per_gas": _optional_quantity(payload, "baseFeePerGas"),
    }


@dataclass(frozen=True)
class Block(_Entity):
    """Block with its transactions listed by hash."""
    number: Optional[int]
    hash: Optional[str]
    parent_hash: str
    nonce: Optional[int]
    sha3_uncles: str
    logs_bloom: Optional[str]
    transactions_root: str
    state_root: str
    receipts_root: str
    miner: Optional[str]
    difficulty: int
    total_difficulty: Optional[int]
    extra_data: str
    size: int
    gas_limit: int
    gas_used: int
    timestamp: int
    uncles: tuple[str, ...]
    transactions: tuple[str, ...]
    base_fee_per_gas: Optional[int] = None

    @property
    def is_pending(self) -> bool:
        return self.hash is None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Block":
        entries = payload.get("transactions")
        if isinstance(entries, list) and any(isinstance(entry, dict) for entry in entries):
            raise MalformedResponseError(
                "Block transactions must be hashes; request the expanded form instead"
            )
        return cls(transactions=_strings(payload, "transactions"), **_header_fields(payload))


@dataclass(frozen=True)
class BlockWithTransactions(_Entity):
    """Block with every transaction inlined."""
    number: Optional[int]
    hash: Optional[str]
    parent_hash: str
    nonce: Optional[int]
    sha3_uncles: str
    logs_bloom: Optional[str]
    transactions_root: str
    state_root: str
    receipts_root: str
    miner: Optional[str]
    difficulty: int
    total_difficulty: Optional[int]
    extra_data: str
    size: int
    gas_limit: int
    gas_used: int
    timestamp: int
    uncles: tuple[str, ...]
    transactions: tuple[Transaction, ...]
    base_fee_per_gas: Optional[int] = None

    @property
    def is_pending(self) -> bool:
        return self.hash is None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "BlockWithTransactions":
        entries = _required(payload, "transactions")
        if not isinstance(entries, list):
            raise MalformedResponseError("Field transactions must be a list")
        transactions = []
        for entry in entries:
            if not isinstance(entry, dict):
                raise MalformedResponseError("Expanded block transactions must be objects")
            transactions.append(Transaction.from_dict(entry))
        return cls(transactions=tuple(transactions), **_header_fields(payload))


@dataclass(frozen=True)
class TransactionReceipt(_Entity):
    """
    Outcome of a mined transaction.

    ``status`` (1 success, 0 failure) is reported from Byzantium on; older
    chains report the post-transaction state ``root`` instead.  Both are kept
    as reported; neither is derived from the other.
    """
    transaction_hash: str
    transaction_index: int
    block_hash: str
    block_number: int
    from_address: str
    to: Optional[str]
    cumulative_gas_used: int
    effective_gas_price: int
    gas_used: int
    contract_address: Optional[str]
    logs: tuple[Log, ...]
    logs_bloom: str
    status: Optional[int]
    root: Optional[str]

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "TransactionReceipt":
        entries = _required(payload, "logs")
        if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
            raise MalformedResponseError("Field logs must be a list of objects")
        return cls(
            transaction_hash=_required(payload, "transactionHash"),
            transaction_index=_quantity(payload, "transactionIndex"),
            block_hash=_required(payload, "blockHash"),
            block_number=_quantity(payload, "blockNumber"),
            from_address=_required(payload, "from"),
            to=payload.get("to"),
            cumulative_gas_used=_quantity(payload, "cumulativeGasUsed"),
            effective_gas_price=_quantity(payload, "effectiveGasPrice"),
            gas_used=_quantity(payload, "gasUsed"),
            contract_address=payload.get("contractAddress"),
            logs=tuple(Log.from_dict(entry) for entry in entries),
            logs_bloom=_required(payload, "logsBloom"),
            status=_optional_quantity(payload, "status"),
            root=payload.get("root"),
        )


__all__ = [
    "Block",
    "BlockWithTransactions",
    "Log",
    "Transaction",
    "TransactionReceipt",
]
