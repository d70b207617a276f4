"""
Commands - CLI command implementations.

- chain:        block-number, gas-price, block, block-tx-count
- account:      balance, nonce, code, storage
- transactions: tx, tx-by-index, receipt, call, send
"""
