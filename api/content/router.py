import json

from fastapi import APIRouter, Depends, HTTPException, Request
from starlette.concurrency import run_in_threadpool

from api.content.schemas import RESOURCES, ContentResource, SuccessResponse
from api.security import require_admin
from content_store import StoreUnavailableError
from .service import get_content, replace_content

router = APIRouter()


def _register(resource: ContentResource) -> None:
    def get_route():
        try:
            return get_content(resource)
        except StoreUnavailableError as exc:
            raise HTTPException(status_code=503, detail=str(exc)) from exc

    # Auth runs as a dependency, before the body is read.
    async def put_route(request: Request, _: None = Depends(require_admin)) -> SuccessResponse:
        body = await request.body()
        try:
            payload = json.loads(body) if body else None
        except ValueError as exc:
            raise HTTPException(status_code=400, detail="Request body must be valid JSON.") from exc

        try:
            await run_in_threadpool(replace_content, resource, payload)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except StoreUnavailableError as exc:
            raise HTTPException(status_code=503, detail=str(exc)) from exc
        return SuccessResponse()

    router.add_api_route(
        f"/{resource.path}",
        get_route,
        methods=["GET"],
        name=f"get_{resource.collection}",
    )
    router.add_api_route(
        f"/{resource.path}",
        put_route,
        methods=["PUT"],
        name=f"replace_{resource.collection}",
        response_model=SuccessResponse,
    )


for _resource in RESOURCES.values():
    _register(_resource)
