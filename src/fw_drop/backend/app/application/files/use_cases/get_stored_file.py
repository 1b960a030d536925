from __future__ import annotations

from fw_drop.backend.app.application.files.dto import GetStoredFileInputDTO, LocatedFileDTO
from fw_drop.backend.app.domain.files.errors import StoredFileNotFound
from fw_drop.backend.app.domain.files.interfaces import FileStorage


class GetStoredFileUseCase:
    def __init__(self, file_storage: FileStorage) -> None:
        self._file_storage = file_storage

    async def execute(self, dto: GetStoredFileInputDTO) -> LocatedFileDTO:
        path = await self._file_storage.locate(filename=dto.filename)
        if path is None:
            raise StoredFileNotFound(dto.filename)
        return LocatedFileDTO(filename=dto.filename, path=path)
