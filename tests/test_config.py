"""Unit tests for endpoint configuration."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from ethrpc.config import DEFAULT_RPC_URL, load_config, save_rpc_url


@pytest.fixture()
def clean_env():
    env = {k: v for k, v in os.environ.items() if not k.startswith("ETHRPC_")}
    with patch.dict(os.environ, env, clear=True):
        yield


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self, tmp_path: Path, clean_env: None) -> None:
        config = load_config(tmp_path / "missing.env")
        assert config.url == DEFAULT_RPC_URL
        assert config.timeout is None
        assert config.headers == {}

    def test_environment(self, tmp_path: Path, clean_env: None) -> None:
        with patch.dict(
            os.environ,
            {
                "ETHRPC_URL": "https://node.example",
                "ETHRPC_TIMEOUT": "7.5",
                "ETHRPC_AUTH_HEADER": "Bearer abc",
            },
        ):
            config = load_config(tmp_path / "missing.env")
        assert config.url == "https://node.example"
        assert config.timeout == 7.5
        assert config.headers == {"Authorization": "Bearer abc"}

    def test_env_file(self, tmp_path: Path, clean_env: None) -> None:
        env_path = tmp_path / ".env"
        env_path.write_text("ETHRPC_URL=https://from-file.example\nETHRPC_TIMEOUT=3\n", encoding="utf-8")
        config = load_config(env_path)
        assert config.url == "https://from-file.example"
        assert config.timeout == 3.0

    @pytest.mark.parametrize("raw", ["soon", "0", "-1"])
    def test_bad_timeout(self, tmp_path: Path, clean_env: None, raw: str) -> None:
        with patch.dict(os.environ, {"ETHRPC_TIMEOUT": raw}):
            with pytest.raises(ValueError, match="ETHRPC_TIMEOUT"):
                load_config(tmp_path / "missing.env")


class TestSaveRpcUrl:
    """Tests for save_rpc_url."""

    def test_creates_file(self, tmp_path: Path) -> None:
        env_path = tmp_path / "nested" / ".env"
        saved = save_rpc_url("https://node.example", env_path)
        assert saved == env_path
        assert env_path.read_text(encoding="utf-8") == "ETHRPC_URL=https://node.example\n"

    def test_keeps_other_keys(self, tmp_path: Path) -> None:
        env_path = tmp_path / ".env"
        env_path.write_text(
            "# endpoint settings\nETHRPC_AUTH_HEADER=Bearer abc\nETHRPC_URL=https://old.example\n",
            encoding="utf-8",
        )
        save_rpc_url("https://new.example", env_path)
        content = env_path.read_text(encoding="utf-8")
        assert "ETHRPC_AUTH_HEADER=Bearer abc" in content
        assert "ETHRPC_URL=https://new.example" in content
        assert "old.example" not in content

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permissions only")
    def test_private_permissions(self, tmp_path: Path) -> None:
        env_path = save_rpc_url("https://node.example", tmp_path / ".env")
        assert env_path.stat().st_mode & 0o777 == 0o600
