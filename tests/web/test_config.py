"""Tests for server configuration."""

import pytest

from shogi_engine.web.config import ServerConfig


def test_defaults() -> None:
    config = ServerConfig.from_env({})
    assert config == ServerConfig()
    assert config.port == 8000


def test_from_env() -> None:
    config = ServerConfig.from_env(
        {"SHOGI_HOST": "0.0.0.0", "SHOGI_PORT": "9000", "SHOGI_LOG_LEVEL": "debug"}
    )
    assert config.host == "0.0.0.0"
    assert config.port == 9000
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("port", ["http", "0", "70000"])
def test_bad_port(port: str) -> None:
    with pytest.raises(ValueError):
        ServerConfig.from_env({"SHOGI_PORT": port})
