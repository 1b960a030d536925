from urllib.parse import quote

from starlette.datastructures import UploadFile

from fw_drop.backend.app.application.files.dto import UploadFileInputDTO

PUBLISH_PREFIX = "/uploads"


def get_upload_file_input_dto(file: UploadFile) -> UploadFileInputDTO:
    return UploadFileInputDTO(
        filename=file.filename or "",
        stream=file.file,
        content_type=file.content_type or "application/octet-stream",
    )


def publish_base(public_base_url: str) -> str:
    return f"{public_base_url}{PUBLISH_PREFIX}"


def public_link(public_base_url: str, filename: str) -> str:
    return f"{publish_base(public_base_url)}/{quote(filename)}"
