from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from fw_drop.backend.app.api.uploads.deps import get_public_base_url, get_upload_file_use_case
from fw_drop.backend.app.api.uploads.forms import open_upload_form, pick_single_file
from fw_drop.backend.app.api.uploads.mappers import get_upload_file_input_dto, public_link, publish_base
from fw_drop.backend.app.api.uploads.pages import render_upload_form, render_upload_success
from fw_drop.backend.app.application.files.use_cases import UploadFileUseCase

router = APIRouter(tags=["uploads"])

upload_file_dep = Annotated[UploadFileUseCase, Depends(get_upload_file_use_case)]
public_base_url_dep = Annotated[str, Depends(get_public_base_url)]


@router.get("/", response_class=HTMLResponse)
async def upload_form(public_base_url: public_base_url_dep) -> HTMLResponse:
    return HTMLResponse(render_upload_form(publish_base(public_base_url)))


@router.post("/upload", response_class=HTMLResponse)
async def upload_file(
        request: Request,
        use_case: upload_file_dep,
        public_base_url: public_base_url_dep,
) -> HTMLResponse:
    # the form is parsed by hand so parser limits can be reported with a code
    async with open_upload_form(request) as form:
        file = pick_single_file(form)
        await file.seek(0)
        dto = get_upload_file_input_dto(file)
        stored = await use_case.execute(dto)

    link = public_link(public_base_url, stored.filename)
    return HTMLResponse(render_upload_success(stored.filename, link, stored.size_bytes, stored.content_type))
