# fw_drop/backend/app/api/router.py
from fastapi import APIRouter

from fw_drop.backend.app.api.uploads import router as upload_router
from fw_drop.backend.app.api.downloads import router as download_router

api_router = APIRouter()
api_router.include_router(upload_router.router)
api_router.include_router(download_router.router)
