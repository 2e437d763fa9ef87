from pydantic import BaseModel, Field


class UploadResponse(BaseModel):
    url: str = Field(..., description="Served path of the stored file, e.g. /uploads/<name>")
