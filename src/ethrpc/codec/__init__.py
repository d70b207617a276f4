"""
Codec - wire-level encoding and decoding for the JSON-RPC client.

- quantity: hex quantities <-> integers
- params:   block selectors and address / hash shape checks
- request:  request envelopes and object-shaped call parameters
- response: response envelopes -> typed results
"""
