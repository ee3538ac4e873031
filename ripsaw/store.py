"""
In-memory cut list registry for the API.

FastAPI runs sync endpoints on a thread pool, so every read and write
goes through one lock. Nothing is persisted; lists vanish on restart.
"""

import logging
import threading
import uuid
from typing import Optional

from .config import CutSettings
from .sizing import CutList, Lumber

logger = logging.getLogger(__name__)


class CutListNotFound(KeyError):
    pass


class CutListStore:
    def __init__(self):
        self._lock = threading.Lock()
        self._lists: dict[str, CutList] = {}

    def create(self, settings: Optional[CutSettings] = None) -> str:
        cut_list_id = uuid.uuid4().hex[:12]
        with self._lock:
            self._lists[cut_list_id] = CutList(settings)
        logger.info("Created cut list %s", cut_list_id)
        return cut_list_id

    def add(self, cut_list_id: str, lumber: Lumber) -> int:
        with self._lock:
            return self._get(cut_list_id).add(lumber)

    def snapshot(self, cut_list_id: str) -> dict:
        with self._lock:
            return self._get(cut_list_id).to_dict()

    def report(self, cut_list_id: str) -> str:
        with self._lock:
            return self._get(cut_list_id).format_report()

    def entries(self, cut_list_id: str) -> tuple[CutSettings, list[tuple[Lumber, int]]]:
        with self._lock:
            cut_list = self._get(cut_list_id)
            return cut_list.settings, list(cut_list.entries())

    def delete(self, cut_list_id: str) -> None:
        with self._lock:
            self._get(cut_list_id)
            del self._lists[cut_list_id]
        logger.info("Deleted cut list %s", cut_list_id)

    def clear(self) -> None:
        with self._lock:
            self._lists.clear()

    def _get(self, cut_list_id: str) -> CutList:
        try:
            return self._lists[cut_list_id]
        except KeyError:
            raise CutListNotFound(cut_list_id) from None


store = CutListStore()


def get_store() -> CutListStore:
    return store
