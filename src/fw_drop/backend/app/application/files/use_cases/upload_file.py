from __future__ import annotations

from fw_drop.backend.app.application.files.dto import StoredFileDTO, UploadFileInputDTO
from fw_drop.backend.app.application.files.mappers import stored_info_to_output_dto
from fw_drop.backend.app.domain.files.errors import FailedToSaveFile, NoFileUploaded
from fw_drop.backend.app.domain.files.interfaces import FileStorage


class UploadFileUseCase:
    def __init__(self, file_storage: FileStorage) -> None:
        self._file_storage = file_storage

    async def execute(self, dto: UploadFileInputDTO) -> StoredFileDTO:
        if not dto.filename:
            raise NoFileUploaded()

        try:
            stored = await self._file_storage.save(
                filename=dto.filename,
                stream=dto.stream,
                content_type=dto.content_type,
            )
        except OSError as e:
            # no cleanup: whatever reached the disk stays there
            raise FailedToSaveFile(dto.filename) from e

        return stored_info_to_output_dto(stored)
