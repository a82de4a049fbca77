from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


def _default_env_file() -> str:
    # A .env next to where the service is launched, same as a local dev checkout.
    return str(Path.cwd() / ".env")


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    log_level: str

    # Base directory for relative source paths. Empty means the working directory.
    data_dir: str

    def resolve_source(self, source: str) -> Path:
        path = Path(source).expanduser()
        if path.is_absolute() or not self.data_dir:
            return path
        return Path(self.data_dir).expanduser() / path


def get_settings() -> Settings:
    # Load env file (if present) but still allow overriding via real environment variables.
    env_file = os.getenv("CHARTS_ENV_FILE", _default_env_file())
    if env_file and Path(env_file).exists():
        load_dotenv(env_file, override=False)

    host = os.getenv("CHARTS_HOST", "127.0.0.1")
    port = int(os.getenv("CHARTS_PORT", "8080"))
    log_level = os.getenv("CHARTS_LOG_LEVEL", "INFO").strip().upper() or "INFO"
    data_dir = os.getenv("CHARTS_DATA_DIR", "").strip()

    return Settings(
        host=host,
        port=port,
        log_level=log_level,
        data_dir=data_dir,
    )
