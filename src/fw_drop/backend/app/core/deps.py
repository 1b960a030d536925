from functools import lru_cache
from pathlib import Path

from fw_drop.backend.app.core.config import settings
from fw_drop.backend.app.domain.files.interfaces import FileStorage
from fw_drop.backend.app.infrastructure.files.filesystem_storage import FilesystemFileStorage


@lru_cache
def get_file_storage() -> FileStorage:
    """
    Singleton file storage instance.
    The directory itself is created lazily by the first save().
    """
    return FilesystemFileStorage(
        Path(settings.UPLOAD_DIR),
        max_bytes=settings.MAX_UPLOAD_BYTES,
    )
