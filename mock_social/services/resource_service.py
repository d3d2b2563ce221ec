import logging

from mock_social.db import COLLECTIONS, store
from mock_social.errors import BadRequestError, ConflictError, NotFoundError
from mock_social.models.post_model import with_defaults
from mock_social.models.user_model import to_public


logger = logging.getLogger(__name__)

RESERVED_QUERY_PARAMS = {"_sort", "_order", "_page", "_limit"}
DEFAULT_PAGE_LIMIT = 10


def _collection(resource: str):
    if resource not in COLLECTIONS:
        raise NotFoundError(f"Unknown resource: {resource}")
    return store.collection(resource)


def present(resource: str, record: dict) -> dict:
    if resource == "users":
        return to_public(record)
    return record


def _matches(record: dict, filters: dict) -> bool:
    for key, expected in filters.items():
        value = record.get(key)
        if isinstance(value, bool):
            value = str(value).lower()
        if value is None or str(value) != expected:
            return False
    return True


def _sort_key(field):
    def key(record):
        value = record.get(field)
        # None sorts last, numbers before strings
        if value is None:
            return (2, "")
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return (0, value)
        return (1, str(value))

    return key


def _positive_int(value, name):
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise BadRequestError(f"{name} must be an integer")
    if number < 1:
        raise BadRequestError(f"{name} must be positive")
    return number


def list_records(resource: str, args: dict):
    """Filter, sort and paginate a collection.

    Returns ``(records, total)``; ``total`` counts the filtered records
    before pagination.
    """
    records = _collection(resource).all()

    filters = {
        key: value for key, value in args.items()
        if key not in RESERVED_QUERY_PARAMS
    }
    if filters:
        records = [record for record in records if _matches(record, filters)]

    sort_field = args.get("_sort")
    if sort_field:
        reverse = (args.get("_order") or "asc").lower() == "desc"
        records = sorted(records, key=_sort_key(sort_field), reverse=reverse)

    total = len(records)

    if "_page" in args or "_limit" in args:
        page = _positive_int(args.get("_page", 1), "_page")
        limit = _positive_int(args.get("_limit", DEFAULT_PAGE_LIMIT), "_limit")
        start = (page - 1) * limit
        records = records[start:start + limit]

    return [present(resource, record) for record in records], total


def _body(body) -> dict:
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise BadRequestError("Request body must be a JSON object")
    return dict(body)


def get_record(resource: str, record_id):
    record = _collection(resource).get(record_id)
    if record is None:
        raise NotFoundError(f"{resource} {record_id} not found")
    return present(resource, record)


def create_record(resource: str, body: dict):
    collection = _collection(resource)
    record = _body(body)
    if resource == "posts":
        record = with_defaults(record)

    with store.transaction():
        if record.get("id") is None:
            record["id"] = store.next_id()
        elif collection.exists(record["id"]):
            raise ConflictError(f"{resource} {record['id']} already exists")
        collection.append(record)

    logger.info("Created %s %s", resource, record["id"])
    return present(resource, record)


def replace_record(resource: str, record_id, body: dict):
    collection = _collection(resource)
    with store.transaction():
        current = collection.get(record_id)
        if current is None:
            raise NotFoundError(f"{resource} {record_id} not found")
        record = _body(body)
        record["id"] = current["id"]
        collection.replace(record_id, record)

    logger.info("Replaced %s %s", resource, record_id)
    return present(resource, record)


def patch_record(resource: str, record_id, body: dict):
    changes = {key: value for key, value in _body(body).items() if key != "id"}
    record = _collection(resource).update(record_id, changes)
    if record is None:
        raise NotFoundError(f"{resource} {record_id} not found")

    logger.info("Patched %s %s", resource, record_id)
    return present(resource, record)


def delete_record(resource: str, record_id):
    if not _collection(resource).remove(record_id):
        raise NotFoundError(f"{resource} {record_id} not found")

    logger.info("Deleted %s %s", resource, record_id)


def dump_database() -> dict:
    data = store.snapshot()
    return {
        name: [present(name, record) for record in data.get(name, [])]
        for name in COLLECTIONS
    }
