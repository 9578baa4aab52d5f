"""
Single place for server configuration.
Every setting can be overridden with an environment variable of the same name.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"
    ws_path: str = "/ws"
    # Directory with the client's static assets. Not served when left empty.
    static_dir: Optional[str] = None


def get_settings() -> Settings:
    return Settings(
        host=os.getenv("HEROES_HOST", Settings.host),
        port=int(os.getenv("HEROES_PORT", str(Settings.port))),
        log_level=os.getenv("HEROES_LOG_LEVEL", Settings.log_level).upper(),
        ws_path=os.getenv("HEROES_WS_PATH", Settings.ws_path),
        static_dir=os.getenv("HEROES_STATIC_DIR") or None,
    )
