from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Optional

from ..common.datetime_utils import today_local
from ..core.constants import STORAGE_KEY
from ..core.exceptions import StorageError
from ..tracker.model import AppData
from .backend import KeyValueBackend
from .codec import dumps, loads
from .seed import build_seed_document

logger = logging.getLogger(__name__)


class DataStore:
    """Owns the persisted document: whole-document reads and writes under one key.

    Failures never reach the caller. A broken or unreadable blob loads as the
    seed document; a failed write is logged and reported through the return
    value of `save`, which callers may ignore.
    """

    def __init__(
        self,
        backend: KeyValueBackend,
        *,
        key: str = STORAGE_KEY,
        today: Optional[Callable[[], date]] = None,
    ):
        self._backend = backend
        self._key = key
        self._today = today or today_local

    @property
    def key(self) -> str:
        return self._key

    def _seed(self) -> AppData:
        return build_seed_document(self._today())

    def load(self) -> AppData:
        try:
            blob = self._backend.get(self._key)
        except StorageError:
            logger.exception("Error loading data from %r, using seed document", self._key)
            return self._seed()

        if not blob:
            seed = self._seed()
            logger.info("No stored document under %r, writing seed document", self._key)
            self.save(seed)
            return seed

        try:
            return loads(blob)
        except StorageError:
            logger.exception("Stored document under %r is malformed, using seed document", self._key)
            return self._seed()

    def save(self, document: AppData) -> bool:
        try:
            self._backend.set(self._key, dumps(document))
        except (StorageError, TypeError, ValueError):
            logger.exception("Error saving data under %r", self._key)
            return False
        return True
