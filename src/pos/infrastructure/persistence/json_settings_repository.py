"""JSON-file-backed implementation of SettingsRepository.

Stored as a list of ``{setting_key, setting_value, updated_at}`` rows,
the shape of the settings table.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from pos.domain.repository.settings_repository import SettingsRepository
from pos.infrastructure.persistence.json_file import ensure_file, load_json, persist_json


class JsonSettingsRepository(SettingsRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        ensure_file(self._file_path)

    def get_all(self) -> dict[str, str]:
        return {
            row["setting_key"]: row["setting_value"]
            for row in load_json(self._file_path)
        }

    def save(self, key: str, value: str) -> None:
        rows = [r for r in load_json(self._file_path) if r["setting_key"] != key]
        rows.append(
            {
                "setting_key": key,
                "setting_value": value,
                "updated_at": datetime.now(timezone.utc).isoformat(),
            }
        )
        persist_json(self._file_path, rows)
