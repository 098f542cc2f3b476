"""Saved UI data (last connection URL and similar) kept in a local JSON file."""
import json
import os
import tempfile
from typing import Any, Dict, Optional

from core.config import get_settings
from core.logging import log_info, log_warning


class ConnectionStore:
    """Small JSON document on disk, shallow-merged on every save.

    The file can hold passwords inside connection URLs, so it is written
    with owner-only permissions.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path or get_settings().data_file

    def load(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            log_warning(f"Ignoring unreadable data file {self.path}: {e}", "connection_store")
            return {}
        return data if isinstance(data, dict) else {}

    def save(self, updates: Dict[str, Any]) -> Dict[str, Any]:
        data = self.load()
        data.update(updates)
        directory = os.path.dirname(self.path) or "."
        os.makedirs(directory, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".pgdesk-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.chmod(tmp_path, 0o600)
            os.replace(tmp_path, self.path)
        except Exception:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
        log_info(f"Saved keys {sorted(updates)} to {self.path}", "connection_store")
        return data

    def clear(self) -> bool:
        if not os.path.exists(self.path):
            return False
        os.unlink(self.path)
        log_info(f"Removed {self.path}", "connection_store")
        return True


def get_connection_store() -> ConnectionStore:
    return ConnectionStore()
