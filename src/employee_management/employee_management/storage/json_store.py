from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterator, Optional

from ..common.datetime_utils import now_utc
from .document import COLLECTIONS, SEQUENCES, default_document, normalize_document

logger = logging.getLogger(__name__)


class JsonDocumentStore:
    """Owns the single shared document and its JSON file.

    All access goes through `read()` / `transaction()`, which hold one
    re-entrant lock. A transaction snapshots the document, and on success
    writes the file atomically (temp file + rename). On failure the snapshot
    is restored and the error re-raised.
    """

    def __init__(
        self,
        path: Path | str,
        *,
        seed_demo_data: bool = True,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._path = Path(path)
        self._seed_demo_data = bool(seed_demo_data)
        self._clock = clock
        self._lock = threading.RLock()
        self._depth = 0
        self._document: Optional[dict] = None

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict:
        with self._lock:
            if not self._path.exists():
                self._document = self._defaults()
                self.save()
                logger.info("Initialized data file %s", self._path)
                return self._document

            try:
                raw = json.loads(self._path.read_text(encoding="utf-8"))
                self._document = normalize_document(raw)
            except (OSError, ValueError) as e:
                logger.error("Error loading data from %s: %s", self._path, e)
                self._quarantine()
                self._document = self._defaults()
            return self._document

    def save(self) -> None:
        with self._lock:
            document = self._require_loaded()
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.", suffix=".tmp", dir=str(self._path.parent)
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(document, f, indent=2, ensure_ascii=False)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_name, self._path)
            except OSError:
                logger.exception("Error saving data to %s", self._path)
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise

    @contextmanager
    def read(self) -> Iterator[dict]:
        with self._lock:
            yield self._require_loaded()

    @contextmanager
    def transaction(self) -> Iterator[dict]:
        """Yield the live document; nested transactions join the outer one."""
        with self._lock:
            document = self._require_loaded()
            outermost = self._depth == 0
            snapshot = copy.deepcopy(document) if outermost else None
            self._depth += 1
            try:
                yield document
                if outermost:
                    self.save()
            except Exception:
                if outermost:
                    self._document = snapshot
                raise
            finally:
                self._depth -= 1

    def next_id(self, collection: str) -> int:
        if collection not in COLLECTIONS:
            raise KeyError(collection)
        with self._lock:
            if self._depth == 0:
                raise RuntimeError("next_id() must be called inside a transaction")
            sequences = self._require_loaded()[SEQUENCES]
            value = sequences[collection]
            sequences[collection] = value + 1
            return value

    def _require_loaded(self) -> dict:
        if self._document is None:
            raise RuntimeError("JsonDocumentStore.load() has not been called")
        return self._document

    def _defaults(self) -> dict:
        return default_document(now=self._clock(), seed_demo_data=self._seed_demo_data)

    def _quarantine(self) -> None:
        """Keep an unreadable data file aside so the next save can't destroy it."""
        ts = self._clock().strftime("%Y%m%d_%H%M%S")
        target = self._path.with_name(f"{self._path.name}.corrupt-{ts}")
        try:
            os.replace(self._path, target)
            logger.warning("Moved unreadable data file to %s", target)
        except OSError as e:
            logger.error("Could not move unreadable data file %s: %s", self._path, e)
