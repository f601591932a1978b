"""Directory listing: one flat, non-recursive pass over a directory."""

from __future__ import annotations

import logging
import os
import stat
from datetime import datetime
from pathlib import Path

from filegate.exceptions import DirectoryNotFoundError, DirectoryReadError, EntryError
from filegate.schemas.files import FileRecord
from filegate.utils.mime import DIRECTORY_MIME, classify
from filegate.utils.paths import resolve_within

logger = logging.getLogger(__name__)


class DirectoryLister:
    """Lists immediate children of directories below a fixed root.

    Nothing is cached: every call reads the filesystem again. Entries are
    emitted in the order the OS enumerates them, which is not sorted.
    """

    def __init__(self, root_dir: str | Path, probe_bytes: int = 512):
        self._root = Path(root_dir).resolve()
        self._probe_bytes = probe_bytes

    @property
    def root(self) -> Path:
        return self._root

    def resolve(self, relative: str | None = None) -> Path:
        """Absolute path for ``relative`` below the root (may not exist)."""
        return resolve_within(self._root, relative)

    def list(self, relative_dir: str | None = None) -> list[FileRecord]:
        """List ``relative_dir`` (the root itself when None or empty).

        Raises DirectoryNotFoundError if the target is missing or outside
        the root, DirectoryReadError if it cannot be enumerated. Entries
        that fail to stat or probe are logged and left out.
        """
        target = self.resolve(relative_dir)
        if not os.path.exists(target):
            raise DirectoryNotFoundError(relative_dir or target)

        try:
            with os.scandir(target) as it:
                entries = list(it)
        except OSError as e:
            logger.error("Error reading directory %s: %s", target, e)
            raise DirectoryReadError(target, e) from e

        records: list[FileRecord] = []
        for entry in entries:
            try:
                records.append(self._describe(entry, len(records) + 1))
            except EntryError as e:
                logger.warning("Skipping entry %s", e)

        logger.debug("Listed %s: %d of %d entries", target, len(records), len(entries))
        return records

    def _describe(self, entry: os.DirEntry, record_id: int) -> FileRecord:
        try:
            st = entry.stat()
        except OSError as e:
            raise EntryError(entry.path, e) from e

        is_dir = stat.S_ISDIR(st.st_mode)
        if is_dir:
            mime_type = DIRECTORY_MIME
        else:
            # FIFOs and devices can block on open
            if stat.S_ISREG(st.st_mode):
                self._probe(entry.path)
            mime_type = classify(entry.name)

        modified = datetime.fromtimestamp(st.st_mtime).astimezone().replace(microsecond=0)
        return FileRecord(
            id=record_id,
            name=entry.name,
            size=st.st_size,
            is_dir=is_dir,
            mime_type=mime_type,
            created_at=modified,
            updated_at=modified,
        )

    def _probe(self, path: str) -> None:
        """Open the file and read its head; the bytes are discarded.

        Keeps unreadable files out of listings. Classification itself is
        extension based only.
        """
        if not self._probe_bytes:
            return
        try:
            with open(path, "rb") as fh:
                fh.read(self._probe_bytes)
        except OSError as e:
            raise EntryError(path, e) from e
