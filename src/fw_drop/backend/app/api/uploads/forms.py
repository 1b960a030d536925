from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Request
from starlette.datastructures import FormData, UploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from fw_drop.backend.app.domain.files.errors import NoFileUploaded, UploadFormError

UPLOAD_FIELD_NAME = "binFile"

# starlette only gives us messages, map them onto stable codes
_LIMIT_CODES = (
    ("Too many files", "LIMIT_FILE_COUNT"),
    ("Too many fields", "LIMIT_FIELD_COUNT"),
    ("Part exceeded maximum size", "LIMIT_PART_SIZE"),
)


def _code_for(message: str) -> str:
    for prefix, code in _LIMIT_CODES:
        if message.startswith(prefix):
            return code
    return "MALFORMED_FORM"


@asynccontextmanager
async def open_upload_form(request: Request) -> AsyncIterator[FormData]:
    """
    Parses the request body as a form and closes the spooled files afterwards.

    Parser failures surface as UploadFormError. A request that is not
    multipart at all parses to an empty form.
    """
    try:
        form = await request.form()
    except MultiPartException as exc:
        raise UploadFormError(exc.message, _code_for(exc.message)) from exc
    except StarletteHTTPException as exc:
        # starlette wraps parser errors when running inside an app
        message = str(exc.detail)
        raise UploadFormError(message, _code_for(message)) from exc

    try:
        yield form
    finally:
        await form.close()


def pick_single_file(form: FormData, field_name: str = UPLOAD_FIELD_NAME) -> UploadFile:
    # an empty file input still arrives as a part with a blank filename
    files = [
        (key, value)
        for key, value in form.multi_items()
        if isinstance(value, UploadFile) and value.filename
    ]

    if any(key != field_name for key, _ in files) or len(files) > 1:
        raise UploadFormError("Unexpected field", "LIMIT_UNEXPECTED_FILE")
    if not files:
        raise NoFileUploaded()

    return files[0][1]
