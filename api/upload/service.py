import logging
from pathlib import Path

import config
from api.upload.schemas import UploadResponse
from utils import unique_upload_name

logger = logging.getLogger(__name__)

UPLOADS_URL_PREFIX = "/uploads"


def ensure_uploads_dir(directory: Path | None = None) -> Path:
    target = directory or config.UPLOADS_DIR
    target.mkdir(parents=True, exist_ok=True)
    return target


def store_upload(original_name: str | None, content: bytes, directory: Path | None = None) -> UploadResponse:
    target_dir = ensure_uploads_dir(directory)
    file_name = unique_upload_name(original_name)
    (target_dir / file_name).write_bytes(content)
    logger.info("Stored upload file_name=%s size=%d", file_name, len(content))
    return UploadResponse(url=f"{UPLOADS_URL_PREFIX}/{file_name}")
