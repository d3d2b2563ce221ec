import copy
import json
import logging
import os
import tempfile
import time
from contextlib import contextmanager
from threading import RLock


logger = logging.getLogger(__name__)

COLLECTIONS = ("users", "posts", "mediaTypes")


def same_id(left, right) -> bool:
    if left is None or right is None:
        return False
    return left == right or str(left) == str(right)


class Collection:
    """Repository over one collection of the JSON document.

    Reads hand out deep copies; every write goes through a store
    transaction, so callers never mutate the document directly.
    """

    def __init__(self, store, name: str):
        self._store = store
        self.name = name

    def _records(self) -> list:
        return self._store.data[self.name]

    def _index_of(self, record_id):
        for index, record in enumerate(self._records()):
            if same_id(record.get("id"), record_id):
                return index
        return None

    def all(self) -> list:
        with self._store.lock:
            return copy.deepcopy(self._records())

    def get(self, record_id):
        with self._store.lock:
            index = self._index_of(record_id)
            if index is None:
                return None
            return copy.deepcopy(self._records()[index])

    def find(self, predicate=None, **match):
        with self._store.lock:
            for record in self._records():
                if predicate is not None and not predicate(record):
                    continue
                if all(record.get(key) == value for key, value in match.items()):
                    return copy.deepcopy(record)
        return None

    def exists(self, record_id) -> bool:
        with self._store.lock:
            return self._index_of(record_id) is not None

    def append(self, record: dict) -> dict:
        with self._store.transaction():
            self._records().append(copy.deepcopy(record))
            self._store.mark_dirty()
        return copy.deepcopy(record)

    def update(self, record_id, changes: dict):
        with self._store.transaction():
            index = self._index_of(record_id)
            if index is None:
                return None
            record = self._records()[index]
            record.update(copy.deepcopy(changes))
            self._store.mark_dirty()
            return copy.deepcopy(record)

    def replace(self, record_id, record: dict):
        with self._store.transaction():
            index = self._index_of(record_id)
            if index is None:
                return None
            self._records()[index] = copy.deepcopy(record)
            self._store.mark_dirty()
            return copy.deepcopy(record)

    def remove(self, record_id) -> bool:
        with self._store.transaction():
            index = self._index_of(record_id)
            if index is None:
                return False
            del self._records()[index]
            self._store.mark_dirty()
            return True


class JsonStore:
    def __init__(self):
        self.lock = RLock()
        self.data = None
        self.path = None
        self.pretty = True
        self._depth = 0
        self._dirty = False
        self._last_id = 0

    def init_app(self, app):
        self.pretty = app.config.get("DATABASE_PRETTY", True)
        self.load(app.config["DATABASE_PATH"])
        app.extensions["json_store"] = self

    def load(self, path: str):
        with self.lock:
            self.path = path
            created = False
            if os.path.exists(path) and os.path.getsize(path) > 0:
                with open(path, "r", encoding="utf-8") as fh:
                    data = json.load(fh)
            else:
                data = {}
                created = True

            if not isinstance(data, dict):
                raise ValueError(
                    f"DATABASE_PATH {path} must contain a JSON object, "
                    f"got {type(data).__name__}"
                )
            for name in COLLECTIONS:
                data.setdefault(name, [])
            self.data = data
            self._last_id = self._highest_id()
            if created:
                self._write()
            logger.info("Loaded %s (%s)", path, ", ".join(
                f"{name}={len(data[name])}" for name in COLLECTIONS
            ))

    def _highest_id(self) -> int:
        highest = 0
        for name in COLLECTIONS:
            for record in self.data[name]:
                record_id = record.get("id")
                if isinstance(record_id, int) and record_id > highest:
                    highest = record_id
                for comment in record.get("comments") or []:
                    comment_id = comment.get("id") if isinstance(comment, dict) else None
                    if isinstance(comment_id, int) and comment_id > highest:
                        highest = comment_id
        return highest

    def collection(self, name: str) -> Collection:
        if name not in COLLECTIONS:
            raise KeyError(name)
        return Collection(self, name)

    def snapshot(self) -> dict:
        with self.lock:
            return copy.deepcopy(self.data)

    def next_id(self) -> int:
        """Millisecond timestamp, bumped past the last id handed out."""
        with self.lock:
            candidate = int(time.time() * 1000)
            if candidate <= self._last_id:
                candidate = self._last_id + 1
            self._last_id = candidate
            return candidate

    def mark_dirty(self):
        self._dirty = True

    @contextmanager
    def transaction(self):
        """Hold the store lock; persist once on success, roll back on error.

        Nested transactions join the outermost one.
        """
        with self.lock:
            outermost = self._depth == 0
            snapshot = copy.deepcopy(self.data) if outermost else None
            self._depth += 1
            try:
                yield self
                if outermost and self._dirty:
                    self._write()
            except Exception:
                if outermost:
                    self.data = snapshot
                    logger.warning("Rolled back transaction on %s", self.path)
                raise
            finally:
                self._depth -= 1
                if outermost:
                    self._dirty = False

    def _write(self):
        directory = os.path.dirname(os.path.abspath(self.path))
        fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(self.data, fh, indent=2 if self.pretty else None)
            os.replace(tmp_path, self.path)
        except Exception:
            try:
                os.remove(tmp_path)
            except OSError:
                pass
            raise


store = JsonStore()
