from __future__ import annotations

import copy
from typing import Callable, List, Optional

from .json_store import JsonDocumentStore


class JsonCollection:
    """Record-level helpers over one named list of the shared document.

    Records handed out are deep copies; callers never touch the live document.
    """

    def __init__(self, store: JsonDocumentStore, name: str):
        self._store = store
        self._name = name

    @property
    def store(self) -> JsonDocumentStore:
        return self._store

    def all(self) -> List[dict]:
        with self._store.read() as doc:
            return copy.deepcopy(doc[self._name])

    def filter(self, predicate: Callable[[dict], bool]) -> List[dict]:
        with self._store.read() as doc:
            return [copy.deepcopy(r) for r in doc[self._name] if predicate(r)]

    def find(self, item_id: int) -> Optional[dict]:
        with self._store.read() as doc:
            for record in doc[self._name]:
                if record.get("id") == item_id:
                    return copy.deepcopy(record)
        return None

    def insert(self, build: Callable[[int], dict]) -> dict:
        with self._store.transaction() as doc:
            record = build(self._store.next_id(self._name))
            doc[self._name].append(record)
            return copy.deepcopy(record)

    def replace(self, item_id: int, record: dict) -> bool:
        with self._store.transaction() as doc:
            items = doc[self._name]
            for idx, existing in enumerate(items):
                if existing.get("id") == item_id:
                    items[idx] = copy.deepcopy(record)
                    return True
        return False

    def remove(self, item_id: int) -> bool:
        return self.remove_where(lambda r: r.get("id") == item_id) > 0

    def remove_where(self, predicate: Callable[[dict], bool]) -> int:
        with self._store.transaction() as doc:
            items = doc[self._name]
            kept = [r for r in items if not predicate(r)]
            removed = len(items) - len(kept)
            if removed:
                doc[self._name] = kept
            return removed
