from fw_drop.backend.app.application.files.dto import StoredFileDTO
from fw_drop.backend.app.domain.files import StoredFileInfo


def stored_info_to_output_dto(stored: StoredFileInfo) -> StoredFileDTO:
    return StoredFileDTO(
        filename=stored.filename,
        storage_path=stored.storage_path,
        size_bytes=stored.size_bytes,
        content_type=stored.content_type,
    )
