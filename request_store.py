import json
import logging

from config import STORAGE_KEY
from models import db, StorageEntry

logger = logging.getLogger(__name__)


class MemoryStorage:
    """Key-value storage held in a dict."""

    def __init__(self, initial=None):
        self.data = dict(initial or {})

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value


class DatabaseStorage:
    """Key-value storage backed by the storage_entries table.

    Needs an application context.
    """

    def get(self, key):
        entry = db.session.get(StorageEntry, key)
        return entry.value if entry else None

    def set(self, key, value):
        entry = db.session.get(StorageEntry, key)
        if entry is None:
            db.session.add(StorageEntry(key=key, value=value))
        else:
            entry.value = value
        db.session.commit()


class RequestStore:
    """The ordered list of licence requests, persisted under one storage key.

    ``save`` overwrites the whole list: the last writer wins and nothing is
    merged, so two writers working from the same ``load`` clobber each other.
    """

    def __init__(self, storage, key=STORAGE_KEY):
        self.storage = storage
        self.key = key

    def load(self):
        raw = self.storage.get(self.key)
        if not raw:
            return []
        try:
            requests = json.loads(raw)
        except ValueError:
            logger.warning("Stored licence requests could not be parsed, starting from an empty list")
            return []
        if not isinstance(requests, list):
            logger.warning("Stored licence requests are not a list, starting from an empty list")
            return []
        return requests

    def save(self, requests):
        self.storage.set(self.key, json.dumps(requests, ensure_ascii=False, separators=(",", ":")))
