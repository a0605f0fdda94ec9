from __future__ import annotations

import contextlib
import os
import uuid
from pathlib import Path


def atomic_write_text(
    path: Path,
    text: str,
    *,
    encoding: str = "utf-8",
    create_parents: bool = False,
) -> None:
    """
    Atomic file write:
    - write to temp file in same directory
    - fsync
    - replace()

    Readers see either the old file or the new one, never a partial write.
    On failure the temp file is removed and the target is left untouched.
    """
    path = Path(path)
    parent = path.parent
    if create_parents:
        parent.mkdir(parents=True, exist_ok=True)

    tmp_path = parent / f".{path.name}.tmp-{uuid.uuid4().hex}"

    f = None
    try:
        # newline="": the file holds exactly the text, no newline translation
        f = open(tmp_path, "w", encoding=encoding, newline="")
        f.write(text)
        f.flush()
        os.fsync(f.fileno())
        f.close()
        f = None

        tmp_path.replace(path)

    finally:
        if f is not None:
            with contextlib.suppress(OSError):
                f.close()

        with contextlib.suppress(OSError):
            tmp_path.unlink(missing_ok=True)


class LocalFileSystem:
    """Filesystem access handed to NotePersistence."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def read_bytes(self, path: Path) -> bytes:
        return Path(path).read_bytes()

    def write_text_atomic(
        self, path: Path, text: str, *, create_parents: bool = False
    ) -> None:
        atomic_write_text(path, text, encoding="utf-8", create_parents=create_parents)
