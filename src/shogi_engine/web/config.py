"""Server configuration for the web API.

Web サーバの設定。環境変数で上書きできる:
  SHOGI_HOST       待ち受けアドレス（既定: 127.0.0.1）
  SHOGI_PORT       ポート番号（既定: 8000）
  SHOGI_LOG_LEVEL  ログレベル（既定: INFO）
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class ServerConfig:
    """Configuration for the uvicorn server."""

    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> ServerConfig:
        """環境変数から設定を読み込む。未設定の項目は既定値のまま。"""
        env = os.environ if env is None else env
        default = cls()
        port = env.get("SHOGI_PORT")
        try:
            port_number = int(port) if port else default.port
        except ValueError:
            msg = f"SHOGI_PORT must be an integer, got {port!r}"
            raise ValueError(msg) from None
        if not 0 < port_number < 65536:
            msg = f"SHOGI_PORT out of range: {port_number}"
            raise ValueError(msg)
        return cls(
            host=env.get("SHOGI_HOST", default.host),
            port=port_number,
            log_level=env.get("SHOGI_LOG_LEVEL", default.log_level).upper(),
        )
