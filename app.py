import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

import config
from api.content.router import router as content_router
from api.upload.router import router as upload_router
from api.upload.service import ensure_uploads_dir
from content_store import ping

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

STATUS_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>Backend API Status</title>
  <style>
    body {{
      margin: 0;
      font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
      display: flex;
      justify-content: center;
      align-items: center;
      height: 100vh;
      background: linear-gradient(135deg, #4facfe 0%, #00f2fe 100%);
      color: #fff;
      text-align: center;
    }}
    .card {{
      background: rgba(255, 255, 255, 0.15);
      padding: 40px;
      border-radius: 20px;
      max-width: 500px;
    }}
    .status {{
      margin-top: 20px;
      padding: 10px 20px;
      display: inline-block;
      background: #00c853;
      border-radius: 30px;
      font-weight: bold;
    }}
  </style>
</head>
<body>
  <div class="card">
    <h1>Backend API is Working!</h1>
    <p>Server is running successfully on port <strong>{port}</strong></p>
    <div class="status">Status: Online</div>
  </div>
</body>
</html>
"""


app = FastAPI(title="Portfolio Content API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_origin_regex=".*",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    return JSONResponse(status_code=400, content={"error": problems or "Invalid request"})


app.include_router(content_router)
app.include_router(upload_router)
app.mount("/uploads", StaticFiles(directory=ensure_uploads_dir(), check_dir=False), name="uploads")


@app.get("/", response_class=HTMLResponse)
def status_page() -> str:
    return STATUS_PAGE.format(port=config.PORT)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "database": "connected" if ping() else "unavailable"}


if __name__ == "__main__":
    import uvicorn

    logger.info("Backend API running on port %d", config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT)
