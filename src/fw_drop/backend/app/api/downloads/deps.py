from typing import Annotated

from fastapi import Depends

from fw_drop.backend.app.application.files.use_cases import GetStoredFileUseCase
from fw_drop.backend.app.core.deps import get_file_storage
from fw_drop.backend.app.domain.files.interfaces import FileStorage


async def get_get_stored_file_use_case(
        storage: Annotated[FileStorage, Depends(get_file_storage)]
) -> GetStoredFileUseCase:
    return GetStoredFileUseCase(storage)
