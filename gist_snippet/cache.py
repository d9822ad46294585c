"""
In-memory memo of formatted snippets, keyed by gist id then file name.

Entries live for the lifetime of the store; there is no expiry and no
eviction. reset() is the only way to drop them.
"""
import logging
import threading
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)


class MemoStore:
    def __init__(self):
        self.cache: Dict[str, Dict[str, str]] = {}
        self._lock = threading.Lock()

    def put(self, gist_id: str, file_name: str, content: str) -> str:
        """Store content under (gist_id, file_name) and hand it back."""
        with self._lock:
            files = self.cache.setdefault(gist_id, {})
            files[file_name] = content
            return files[file_name]

    def get(self, gist_id: str, file_name: str) -> Optional[str]:
        """Return the stored value, or None when nothing was stored for the pair."""
        files = self.cache.get(gist_id)
        if files is None:
            return None
        return files.get(file_name)

    def reset(self):
        with self._lock:
            self.cache = {}
        logger.debug("Memo store reset")

    def __contains__(self, key: Tuple[str, str]) -> bool:
        gist_id, file_name = key
        return self.get(gist_id, file_name) is not None

    def __len__(self) -> int:
        return sum(len(files) for files in self.cache.values())
