from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO

import anyio

from fw_drop.backend.app.domain.files.entities import StoredFileInfo
from fw_drop.backend.app.domain.files.errors import FileTooLarge

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class FilesystemFileStorage:
    """
    Flat directory of uploaded files, keyed by their original names.

    Nothing is cached: every call looks at the directory as it is right now.
    """

    def __init__(self, base_dir: Path, *, max_bytes: int | None = None) -> None:
        self._base_dir = base_dir
        self._max_bytes = max_bytes

    async def save(
        self,
        *,
        filename: str,
        stream: BinaryIO,
        content_type: str,
    ) -> StoredFileInfo:
        return await anyio.to_thread.run_sync(
            lambda: self._write(filename=filename, stream=stream, content_type=content_type)
        )

    def _write(self, *, filename: str, stream: BinaryIO, content_type: str) -> StoredFileInfo:
        # idempotent, so two first uploads racing here is harmless
        self._base_dir.mkdir(parents=True, exist_ok=True)

        # the original name is used verbatim, see DESIGN.md on traversal
        full_path = self._base_dir / filename
        logger.info("Saving file with original name: %s", filename)

        written = 0
        with open(full_path, "wb") as f:
            while True:
                chunk = stream.read(CHUNK_SIZE)
                if not chunk:
                    break
                written += len(chunk)
                if self._max_bytes is not None and written > self._max_bytes:
                    # partial file stays behind, same as any other aborted write
                    raise FileTooLarge()
                f.write(chunk)

        size = full_path.stat().st_size
        rel_path = os.path.relpath(full_path, self._base_dir)

        return StoredFileInfo(
            filename=filename,
            storage_path=rel_path,
            size_bytes=size,
            content_type=content_type,
        )

    async def locate(self, *, filename: str) -> Path | None:
        full_path = self._base_dir / filename
        if not await anyio.to_thread.run_sync(full_path.is_file):
            return None
        return full_path
