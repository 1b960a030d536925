from pydantic import BaseModel


class UploadErrorResponse(BaseModel):
    """Body returned when the multipart form itself is rejected."""
    error: str
    code: str
