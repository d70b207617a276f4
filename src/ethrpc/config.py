"""
Endpoint configuration for the ethrpc client.

Settings are read from the process environment, optionally loaded from
~/.ethrpc/.env:

- ETHRPC_URL          JSON-RPC endpoint (default: public Sepolia endpoint)
- ETHRPC_TIMEOUT      transport timeout in seconds (default: httpx default)
- ETHRPC_AUTH_HEADER  value sent as the Authorization header
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


# Default config directory
ETHRPC_DIR = Path.home() / ".ethrpc"
ETHRPC_ENV = ETHRPC_DIR / ".env"

DEFAULT_RPC_URL = "https://rpc.sepolia.org"


@dataclass(frozen=True)
class ProviderConfig:
    url: str = DEFAULT_RPC_URL
    timeout: Optional[float] = None
    headers: dict[str, str] = field(default_factory=dict)


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"ETHRPC_TIMEOUT must be a number of seconds, got {raw!r}") from None
    if timeout <= 0:
        raise ValueError(f"ETHRPC_TIMEOUT must be positive, got {raw!r}")
    return timeout


def load_config(env_path: Optional[Path] = None) -> ProviderConfig:
    """
    Load provider settings from .env file and environment.

    Args:
        env_path: Path to .env file (default: ~/.ethrpc/.env)

    Returns:
        ProviderConfig with url, timeout and extra headers

    Raises:
        ValueError: If ETHRPC_TIMEOUT is not a positive number
    """
    env_path = env_path or ETHRPC_ENV

    if env_path.exists():
        load_dotenv(env_path, override=True)

    headers: dict[str, str] = {}
    auth = os.environ.get("ETHRPC_AUTH_HEADER")
    if auth:
        headers["Authorization"] = auth

    return ProviderConfig(
        url=os.environ.get("ETHRPC_URL") or DEFAULT_RPC_URL,
        timeout=_parse_timeout(os.environ.get("ETHRPC_TIMEOUT")),
        headers=headers,
    )


def save_rpc_url(url: str, env_path: Optional[Path] = None) -> Path:
    """
    Save the endpoint URL to the .env file, keeping any other keys.

    Args:
        url: JSON-RPC endpoint URL
        env_path: Path to .env file (default: ~/.ethrpc/.env)

    Returns:
        Path to the saved .env file
    """
    env_path = env_path or ETHRPC_ENV
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing = {}
    if env_path.exists():
        for line in env_path.read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                k, v = line.split("=", 1)
                existing[k.strip()] = v.strip()

    existing["ETHRPC_URL"] = url

    lines = [f"{k}={v}" for k, v in existing.items()]
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    # Auth headers may live in the same file
    if os.name != "nt":
        env_path.chmod(0o600)

    return env_path
