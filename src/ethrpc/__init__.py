__all__ = [
    # Provider
    "Provider",
    # Models
    "Block",
    "BlockWithTransactions",
    "Log",
    "Transaction",
    "TransactionReceipt",
    # Call inputs
    "CallInput",
    "TransactionInput",
    # Block selectors
    "BlockHeight",
    "BlockSelector",
    "BlockTag",
    "encode_block_selector",
    "resolve_block_selector",
    # Validation
    "validate_address",
    "validate_hash",
    # Quantities
    "MAX_QUANTITY",
    "decode_quantity",
    "encode_quantity",
    # Errors
    "DecodeError",
    "EthRpcError",
    "InvalidArgumentError",
    "MalformedNumberError",
    "MalformedResponseError",
    "MissingResultError",
    "RpcError",
    # Config
    "ProviderConfig",
    "load_config",
]

__version__ = "0.3.0"

from .codec.params import (
    BlockHeight,
    BlockSelector,
    BlockTag,
    encode_block_selector,
    resolve_block_selector,
    validate_address,
    validate_hash,
)
from .codec.quantity import MAX_QUANTITY, decode_quantity, encode_quantity
from .codec.request import CallInput, TransactionInput
from .config import ProviderConfig, load_config
from .errors import (
    DecodeError,
    EthRpcError,
    InvalidArgumentError,
    MalformedNumberError,
    MalformedResponseError,
    MissingResultError,
    RpcError,
)
from .models import Block, BlockWithTransactions, Log, Transaction, TransactionReceipt
from .provider import Provider
