"""A single JSON document holding customers, products and orders.

Keeping everything in one file is what lets an order insert and the
matching stock decrements be written as one unit: the document is
replaced wholesale, via a temp file and ``os.replace``.

A transaction holds an exclusive ``flock`` on a sibling ``.lock`` file
from the load until the replace, so units of work are serialized across
processes as well as threads.  Reads made inside a transaction see its
pending writes; nothing reaches the disk unless the block exits cleanly.
"""

from __future__ import annotations

import fcntl
import json
import os
import tempfile
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

SECTIONS = ("customers", "products", "orders")


class _Transaction:

    def __init__(self, doc: dict) -> None:
        self.doc = doc
        self.dirty = False


class JsonStore:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock_path = file_path.with_name(f".{file_path.name}.lock")
        self._lock = threading.RLock()
        self._local = threading.local()
        self._ensure_file()

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- Document access ------------------------------------------------------

    def read(self) -> dict:
        """Return the current document.

        Inside a transaction this is the transaction's working copy;
        outside it is a fresh load that callers may mutate freely.
        """
        tx = self._current()
        if tx is not None:
            return tx.doc
        with self._lock:
            return self._load()

    def write(self, doc: dict) -> None:
        """Replace the whole document (deferred until commit inside a transaction)."""
        tx = self._current()
        if tx is not None:
            tx.doc = doc
            tx.dirty = True
            return
        with self._exclusive():
            self._persist(doc)

    @contextmanager
    def transaction(self) -> Iterator[None]:
        if self._current() is not None:
            # nested: join the outer transaction
            yield
            return

        with self._exclusive():
            tx = _Transaction(self._load())
            self._local.tx = tx
            try:
                yield
                if tx.dirty:
                    self._persist(tx.doc)
            finally:
                self._local.tx = None

    # --- File helpers ---------------------------------------------------------

    @contextmanager
    def _exclusive(self) -> Iterator[None]:
        """Hold the thread lock and the cross-process file lock."""
        with self._lock, open(self._lock_path, "w") as lock_file:
            fcntl.flock(lock_file.fileno(), fcntl.LOCK_EX)
            try:
                yield
            finally:
                fcntl.flock(lock_file.fileno(), fcntl.LOCK_UN)

    def _current(self) -> _Transaction | None:
        return getattr(self._local, "tx", None)

    def _load(self) -> dict:
        doc = json.loads(self._file_path.read_text(encoding="utf-8"))
        for section in SECTIONS:
            doc.setdefault(section, [])
        return doc

    def _persist(self, doc: dict) -> None:
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=f".{self._file_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(json.dumps(doc, indent=2) + "\n")
            os.replace(tmp_name, self._file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _ensure_file(self) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        with self._exclusive():
            if not self._file_path.exists():
                self._persist({section: [] for section in SECTIONS})
