import logging
from typing import Any

from pydantic import ValidationError

from api.content.schemas import ContentModel, ContentResource
from content_store import get_singleton, list_documents, replace_all, replace_singleton

logger = logging.getLogger(__name__)


class ContentValidationError(ValueError):
    """Raised when a replacement payload is rejected before any write."""


def _has_required_fields(item: Any, required: tuple[str, ...]) -> bool:
    return isinstance(item, dict) and all(item.get(field) for field in required)


def _parse_item(resource: ContentResource, item: dict) -> dict:
    try:
        record: ContentModel = resource.model.model_validate(item)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        raise ContentValidationError(f"Invalid {resource.label}: {problems}") from exc
    return record.model_dump(exclude_unset=True)


def validate_payload(resource: ContentResource, payload: Any) -> list[dict]:
    """Check a full replacement payload and return the records to store.

    Every record is checked before anything is written, so a single bad
    element rejects the whole payload.
    """
    if resource.singleton:
        if not isinstance(payload, dict):
            raise ContentValidationError("Request body must be an object.")
        items = [payload]
    else:
        if not isinstance(payload, list):
            raise ContentValidationError(f"Request body must be an array of {resource.label}.")
        items = payload

    if resource.required:
        for item in items:
            if not _has_required_fields(item, resource.required):
                raise ContentValidationError(resource.missing_message)

    return [_parse_item(resource, item) for item in items]


def get_content(resource: ContentResource) -> list[dict] | dict:
    if resource.singleton:
        return get_singleton(resource.collection) or {}
    return list_documents(resource.collection)


def replace_content(resource: ContentResource, payload: Any) -> None:
    records = validate_payload(resource, payload)
    if resource.singleton:
        replace_singleton(resource.collection, records[0])
    else:
        replace_all(resource.collection, records)
    logger.info("Replaced resource=%s records=%d", resource.path, len(records))
