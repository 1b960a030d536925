# fw_drop/backend/app/application/files/use_cases/__init__.py
from .upload_file import UploadFileUseCase
from .get_stored_file import GetStoredFileUseCase

__all__ = [
    "UploadFileUseCase",
    "GetStoredFileUseCase",
]
