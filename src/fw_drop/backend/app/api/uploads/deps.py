from typing import Annotated

from fastapi import Depends, Request

from fw_drop.backend.app.application.files.use_cases import UploadFileUseCase
from fw_drop.backend.app.core import settings
from fw_drop.backend.app.core.deps import get_file_storage
from fw_drop.backend.app.domain.files.interfaces import FileStorage


async def get_upload_file_use_case(
        storage: Annotated[FileStorage, Depends(get_file_storage)]
) -> UploadFileUseCase:
    return UploadFileUseCase(storage)


def get_public_base_url(request: Request) -> str:
    """
    Base for links handed to devices. Falls back to the host the request
    came in on, so the link works from the uploader's network.
    """
    if settings.PUBLIC_BASE_URL:
        return settings.PUBLIC_BASE_URL.rstrip("/")
    return str(request.base_url).rstrip("/")
