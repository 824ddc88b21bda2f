from __future__ import annotations

import hashlib
import json
import logging
import time
from pathlib import Path
from typing import Any, Callable

logger = logging.getLogger(__name__)


class JsonDiskCache:
    """
    Small JSON disk cache with TTL.

    Each key lives in its own file under root_dir:
      { "stored_at": float, "expires_at": float | null, "value": any }

    `clock` is injectable so expiry can be tested without sleeping.
    """

    def __init__(self, root_dir: Path, clock: Callable[[], float] = time.time):
        self.root_dir = root_dir
        self.root_dir.mkdir(parents=True, exist_ok=True)
        self._clock = clock

    def _key_to_path(self, key: str) -> Path:
        digest = hashlib.sha256(key.encode("utf-8")).hexdigest()
        return self.root_dir / f"{digest}.json"

    def get(self, key: str) -> Any | None:
        path = self._key_to_path(key)
        if not path.exists():
            return None

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ValueError("cache entry is not an object")
            expires_at = data.get("expires_at")
            if expires_at is not None and self._clock() >= float(expires_at):
                self.delete(key)
                return None
            return data.get("value")
        except (OSError, ValueError, TypeError):
            logger.warning("Dropping corrupted cache entry %s", path.name)
            self.delete(key)
            return None

    def set(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        path = self._key_to_path(key)
        now = self._clock()
        expires_at = None if ttl_seconds is None else (now + ttl_seconds)
        payload = {"stored_at": now, "expires_at": expires_at, "value": value}
        tmp = path.with_suffix(".json.tmp")
        tmp.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
        tmp.replace(path)

    def delete(self, key: str) -> None:
        self._key_to_path(key).unlink(missing_ok=True)
