from .entities import StoredFileInfo
from .errors import NoFileUploaded, UploadFormError, FileTooLarge, FailedToSaveFile, StoredFileNotFound
from .interfaces import FileStorage

__all__ = [
    "StoredFileInfo",
    "FileStorage",
    "NoFileUploaded",
    "UploadFormError",
    "FileTooLarge",
    "FailedToSaveFile",
    "StoredFileNotFound",
]
