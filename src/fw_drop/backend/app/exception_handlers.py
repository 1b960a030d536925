import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

from fw_drop.backend.app.api.uploads.schemas import UploadErrorResponse
from fw_drop.backend.app.domain.files.errors import FailedToSaveFile, NoFileUploaded, StoredFileNotFound, \
    UploadFormError

logger = logging.getLogger(__name__)

UNEXPECTED_UPLOAD_ERROR = "An unexpected error occurred during file upload."


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(NoFileUploaded)
    async def no_file_uploaded(_: Request, exc: NoFileUploaded):
        return PlainTextResponse(
            str(exc),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    @app.exception_handler(UploadFormError)
    async def upload_form_error(_: Request, exc: UploadFormError):
        logger.warning("Upload rejected by form parser: %s (%s)", exc.message, exc.code)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=UploadErrorResponse(error=exc.message, code=exc.code).model_dump(),
        )

    @app.exception_handler(StoredFileNotFound)
    async def stored_file_not_found(_: Request, __: StoredFileNotFound):
        return PlainTextResponse(
            "File not found",
            status_code=status.HTTP_404_NOT_FOUND,
        )

    @app.exception_handler(FailedToSaveFile)
    async def failed_to_save_file(_: Request, exc: FailedToSaveFile):
        logger.error("%s", exc, exc_info=exc.__cause__)
        return PlainTextResponse(
            UNEXPECTED_UPLOAD_ERROR,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    @app.exception_handler(Exception)
    async def unhandled_exception(_: Request, exc: Exception):
        logger.exception("Unhandled exception", exc_info=exc)

        return PlainTextResponse(
            UNEXPECTED_UPLOAD_ERROR,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
