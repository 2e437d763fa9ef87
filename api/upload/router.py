from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from starlette.concurrency import run_in_threadpool

from api.security import require_admin
from api.upload.schemas import UploadResponse
from .service import store_upload

router = APIRouter()


@router.post("/upload", response_model=UploadResponse, dependencies=[Depends(require_admin)])
async def upload_route(image: UploadFile | None = File(default=None)) -> UploadResponse:
    if image is None or not image.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")
    try:
        content = await image.read()
        return await run_in_threadpool(store_upload, image.filename, content)
    except OSError as exc:
        raise HTTPException(status_code=500, detail=f"Failed to store upload: {exc}") from exc
