import mimetypes
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from fw_drop.backend.app.api.downloads.deps import get_get_stored_file_use_case
from fw_drop.backend.app.api.uploads.mappers import PUBLISH_PREFIX
from fw_drop.backend.app.application.files.dto import GetStoredFileInputDTO
from fw_drop.backend.app.application.files.use_cases import GetStoredFileUseCase

router = APIRouter(prefix=PUBLISH_PREFIX, tags=["downloads"])

get_stored_file_dep = Annotated[GetStoredFileUseCase, Depends(get_get_stored_file_use_case)]


@router.api_route("/{filename}", methods=["GET", "HEAD"], name="download_file")
async def download_file(
        filename: str,
        use_case: get_stored_file_dep,
) -> FileResponse:
    located = await use_case.execute(GetStoredFileInputDTO(filename=filename))
    media_type = mimetypes.guess_type(located.filename)[0] or "application/octet-stream"
    return FileResponse(located.path, media_type=media_type)
