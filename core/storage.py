# core/storage.py

"""
Key-value persistence backends for the exam history.

The history only needs to get and set a single string blob by key; any object providing
`get()` and `set()` with the `KeyValueStore` signatures can be injected into `ExamHistory`.

- `FileStore` keeps one `<key>.json` file per key inside a directory and replaces files
  atomically, so a failed write never leaves a half-written blob behind.
- `MemoryStore` keeps blobs in a dictionary and is used for tests and throwaway sessions.
"""

from __future__ import annotations

import logging
import os
import tempfile
from typing import Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class FileStore:

    def __init__(self, dir_path: str):
        self._dir_path = dir_path

    @property
    def dir_path(self) -> str:
        return self._dir_path

    def path_for(self, key: str) -> str:
        return os.path.join(self._dir_path, f"{key}.json")

    def get(self, key: str) -> str | None:
        """
        Reads the blob stored under `key`.

        Returns:
            The stored text, or None if nothing has been saved under this key yet.

        Raises:
            OSError: If the file exists but cannot be read.
        """
        path = self.path_for(key)

        if not os.path.exists(path):
            logger.debug("No stored blob at %s", path)
            return None

        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    def set(self, key: str, value: str) -> None:
        """
        Writes `value` under `key`, overwriting any previous blob.

        Raises:
            OSError: If the directory cannot be created or the file cannot be written.

        Notes:
            - The blob is written to a temporary file in the same directory and then moved into place.
        """
        path = self.path_for(key)
        os.makedirs(self._dir_path, exist_ok=True)

        with tempfile.NamedTemporaryFile(
            mode="w",
            suffix=".tmp",
            dir=self._dir_path,
            delete=False,
            encoding="utf-8",
        ) as f:
            f.write(value)
            temp_path = f.name

        try:
            os.replace(temp_path, path)
        except OSError:
            os.unlink(temp_path)
            raise

        logger.debug("Wrote %d characters to %s", len(value), path)

    def __repr__(self) -> str:
        return f"FileStore({self._dir_path!r})"


class MemoryStore:

    def __init__(self, initial: dict[str, str] | None = None):
        self._blobs: dict[str, str] = dict(initial) if initial else {}

    def get(self, key: str) -> str | None:
        return self._blobs.get(key)

    def set(self, key: str, value: str) -> None:
        self._blobs[key] = value

    def __repr__(self) -> str:
        return f"MemoryStore(keys={sorted(self._blobs)})"
