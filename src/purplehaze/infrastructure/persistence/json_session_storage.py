"""JSON-file-backed implementation of SessionStorage.

One file holds one browsing session.  It survives between CLI
invocations and is deleted when the session ends.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from purplehaze.domain.ports.session_storage import SessionStorage
from purplehaze.infrastructure.logging import get_logger

logger = get_logger(__name__)


class JsonSessionStorage(SessionStorage):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- SessionStorage interface ---------------------------------------------

    def get(self, key: str) -> Any | None:
        return self._load_raw().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._load_raw()
        data[key] = value
        self._persist_raw(data)

    def remove(self, key: str) -> None:
        data = self._load_raw()
        if key in data:
            del data[key]
            self._persist_raw(data)

    def clear(self) -> None:
        self._file_path.unlink(missing_ok=True)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict[str, Any]:
        if not self._file_path.exists():
            return {}
        try:
            data = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning("Session file %s is corrupt; starting a fresh session", self._file_path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Session file %s has unexpected shape; ignoring it", self._file_path)
            return {}
        return data

    def _persist_raw(self, data: dict[str, Any]) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps(data, indent=2) + "\n", encoding="utf-8"
        )
