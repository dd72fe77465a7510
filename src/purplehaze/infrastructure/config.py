"""Runtime settings, read from the environment and an optional ``.env``."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[3]
load_dotenv(dotenv_path=ROOT_DIR / ".env")


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


@dataclass(frozen=True)
class Settings:
    supabase_url: str
    supabase_key: str
    session_file: Path
    currency: str
    exit_url: str
    log_level: str

    def require_supabase(self) -> None:
        if not self.supabase_url or not self.supabase_key:
            raise RuntimeError(
                "SUPABASE_URL and SUPABASE_ANON_KEY must be set (in the environment or .env)"
            )


def load_settings() -> Settings:
    return Settings(
        supabase_url=_get_env("SUPABASE_URL", default="") or "",
        supabase_key=_get_env("SUPABASE_ANON_KEY", "SUPABASE_KEY", default="") or "",
        session_file=Path(
            _get_env("PURPLEHAZE_SESSION_FILE", default=str(ROOT_DIR / "data" / "session.json"))
        ),
        currency=_get_env("PURPLEHAZE_CURRENCY", default="ZAR") or "ZAR",
        exit_url=_get_env("PURPLEHAZE_EXIT_URL", default="https://www.google.com")
        or "https://www.google.com",
        log_level=(_get_env("LOG_LEVEL", default="INFO") or "INFO").upper(),
    )


settings = load_settings()
