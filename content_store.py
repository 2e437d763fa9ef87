import logging
import uuid

from pymongo import MongoClient
from pymongo.errors import PyMongoError

import config

logger = logging.getLogger(__name__)

_client: MongoClient | None = None
INTERNAL_FIELDS = ("_id", "__v")


class StoreUnavailableError(RuntimeError):
    """Raised when MongoDB cannot serve a read or a write."""


def _get_client() -> MongoClient:
    global _client
    if _client is None:
        _client = MongoClient(config.MONGODB_URI)
    return _client


def _get_database():
    return _get_client()[config.MONGODB_DB]


def _clean(doc: dict) -> dict:
    for field in INTERNAL_FIELDS:
        doc.pop(field, None)
    return doc


def ping() -> bool:
    try:
        _get_client().admin.command("ping")
        return True
    except PyMongoError:
        logger.exception("MongoDB ping failed")
        return False


def list_documents(collection: str) -> list[dict]:
    try:
        return [_clean(doc) for doc in _get_database()[collection].find()]
    except PyMongoError as exc:
        logger.exception("Failed to read collection=%s", collection)
        raise StoreUnavailableError(f"Content store unavailable: {exc}") from exc


def get_singleton(collection: str) -> dict | None:
    try:
        doc = _get_database()[collection].find_one()
    except PyMongoError as exc:
        logger.exception("Failed to read collection=%s", collection)
        raise StoreUnavailableError(f"Content store unavailable: {exc}") from exc
    if not doc:
        return None
    return _clean(doc)


def replace_all(collection: str, documents: list[dict]) -> int:
    """Make the collection hold exactly ``documents``, in order.

    The new contents are written to a staging collection first and then
    renamed over the target, so readers see either the old or the new set
    and a failure mid-write never leaves the resource half empty.
    """
    payload = [dict(doc) for doc in documents]
    try:
        database = _get_database()
        if not payload:
            database[collection].delete_many({})
            logger.info("Cleared collection=%s", collection)
            return 0

        staging = database[f"{collection}.staging-{uuid.uuid4().hex}"]
        try:
            staging.insert_many(payload, ordered=True)
            staging.rename(collection, dropTarget=True)
        except PyMongoError:
            staging.drop()
            raise
    except PyMongoError as exc:
        logger.exception("Failed to replace collection=%s", collection)
        raise StoreUnavailableError(f"Content store unavailable: {exc}") from exc

    logger.info("Replaced collection=%s count=%d", collection, len(payload))
    return len(payload)


def replace_singleton(collection: str, document: dict) -> None:
    replace_all(collection, [document])
