from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from platformdirs import user_data_dir

load_dotenv()

APP_NAME = "calgrid"
APP_AUTHOR = "calgrid"


@dataclass(frozen=True)
class ApiSettings:
    base_url: Optional[str]
    host: str
    port: int

    @property
    def is_configured(self) -> bool:
        return bool(self.base_url)


@dataclass(frozen=True)
class AuthSettings:
    token_secret: Optional[str]
    algorithm: str

    @property
    def is_configured(self) -> bool:
        return bool(self.token_secret)

    @property
    def missing_env_vars(self) -> list[str]:
        missing = []
        if not self.token_secret:
            missing.append("CALGRID_TOKEN_SECRET")
        return missing


@dataclass(frozen=True)
class StorageSettings:
    data_dir: Path

    @property
    def documents_file(self) -> Path:
        return self.data_dir / "calgrid.json"

    def ensure_data_dir(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class UiSettings:
    app_name: str
    organization: str
    month_cell_limit: int


@dataclass(frozen=True)
class AppSettings:
    api: ApiSettings
    auth: AuthSettings
    storage: StorageSettings
    ui: UiSettings


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    api = ApiSettings(
        base_url=os.getenv("CALGRID_API_URL") or None,
        host=os.getenv("CALGRID_API_HOST", "127.0.0.1"),
        port=_int_from_env("CALGRID_API_PORT", 8000),
    )

    auth = AuthSettings(
        token_secret=os.getenv("CALGRID_TOKEN_SECRET") or None,
        algorithm=os.getenv("CALGRID_TOKEN_ALGORITHM", "HS256"),
    )

    storage = StorageSettings(
        data_dir=Path(os.getenv("CALGRID_DATA_DIR") or user_data_dir(APP_NAME, APP_AUTHOR)),
    )

    ui = UiSettings(
        app_name=os.getenv("CALGRID_APP_NAME", "Calgrid"),
        organization=os.getenv("CALGRID_APP_ORG", "calgrid"),
        month_cell_limit=_int_from_env("CALGRID_MONTH_CELL_LIMIT", 3),
    )

    return AppSettings(api=api, auth=auth, storage=storage, ui=ui)
