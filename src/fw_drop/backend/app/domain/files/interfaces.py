from pathlib import Path
from typing import BinaryIO, Protocol, runtime_checkable

from fw_drop.backend.app.domain.files.entities import StoredFileInfo


@runtime_checkable
class FileStorage(Protocol):
    _base_dir: Path

    async def save(
        self,
        *,
        filename: str,
        stream: BinaryIO,
        content_type: str,
    ) -> StoredFileInfo:
        """
        Writes the stream under `filename`, replacing any file of the same name.
        """
        ...

    async def locate(self, *, filename: str) -> Path | None:
        """
        Returns the on-disk path of a stored file, or None if nothing regular
        is stored under that name right now.
        """
        ...
