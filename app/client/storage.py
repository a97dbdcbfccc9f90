import json
import logging
import os
import threading
import uuid

from app.config import settings

logger = logging.getLogger(__name__)


class SessionStorage:
    """String key/value store that lives as long as one client session."""

    def get_item(self, key: str) -> str | None:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class MemorySessionStorage(SessionStorage):
    """Session storage for a single process; gone when the process exits."""

    def __init__(self):
        self._items: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self) -> None:
        self._items.clear()


class FileSessionStorage(SessionStorage):
    """
    Session storage backed by one JSON file per session id.

    Reopening the same session id (a "reload") sees earlier writes; a new
    session id starts empty. end_session() drops the file. Writers sharing a
    session id are last-write-wins.
    """

    def __init__(self, session_id: str | None = None, directory: str | None = None):
        self.session_id = session_id or uuid.uuid4().hex
        self.directory = directory or settings.session_dir
        os.makedirs(self.directory, exist_ok=True)
        self.path = os.path.join(self.directory, f"{self.session_id}.json")
        self._lock = threading.Lock()

    def _read(self) -> dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Unreadable session file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, str]) -> None:
        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f)
        os.replace(tmp_path, self.path)

    def get_item(self, key: str) -> str | None:
        with self._lock:
            return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)

    def remove_item(self, key: str) -> None:
        with self._lock:
            data = self._read()
            if data.pop(key, None) is not None:
                self._write(data)

    def clear(self) -> None:
        with self._lock:
            self._write({})

    def end_session(self) -> None:
        with self._lock:
            if os.path.exists(self.path):
                os.remove(self.path)
        logger.debug(f"Session {self.session_id} ended")
