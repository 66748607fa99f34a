import os
import re
import tempfile
from pathlib import Path

import structlog

from tailor_configurator.core.application.ports import KeyValueStorePort

logger = structlog.get_logger()

_UNSAFE_KEY_CHARS = re.compile(r"[^a-zA-Z0-9_.-]")


class JsonFileKeyValueStore(KeyValueStorePort):
    """One file per key under ``data_dir``. Writes are atomic (temp file + rename)."""

    def __init__(self, data_dir: Path | str) -> None:
        self.store_dir = Path(data_dir)
        self.store_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.store_dir / f"{_UNSAFE_KEY_CHARS.sub('_', key)}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            content = path.read_text(encoding="utf-8").strip()
        except OSError as e:
            logger.warning(
                "Failed to read local store, treating as empty", key=key, error_details=str(e)
            )
            return None
        return content or None

    def put(self, key: str, value: str) -> None:
        tmp_path = None
        try:
            # Temp file in the same directory so the rename stays on one filesystem
            with tempfile.NamedTemporaryFile(
                "w", dir=self.store_dir, delete=False, encoding="utf-8", suffix=".tmp"
            ) as tmp:
                tmp_path = tmp.name
                tmp.write(value)
            os.replace(tmp_path, self._path(key))
        except OSError as e:
            logger.error("Failed to write local store", key=key, error_details=str(e))
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)
