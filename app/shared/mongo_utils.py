import datetime
from bson import ObjectId
from bson.errors import InvalidId


def convert_objectid_to_str(doc):
    if isinstance(doc, list):
        return [convert_objectid_to_str(d) for d in doc]
    if isinstance(doc, dict):
        return {k: (str(v) if isinstance(v, ObjectId) else convert_objectid_to_str(v)) for k, v in doc.items()}
    return doc


def serialize_document(doc: dict) -> dict:
    """Stringify ObjectIds and expose ``_id`` as ``id``."""
    doc = convert_objectid_to_str(doc)
    if "_id" in doc:
        doc["id"] = doc.pop("_id")
    return doc


def to_object_id(value: str, label: str = "Record") -> ObjectId:
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise LookupError(f"{label} {value} not found")


def utcnow() -> datetime.datetime:
    # Naive UTC, matching what the driver hands back on reads
    return datetime.datetime.now(datetime.timezone.utc).replace(tzinfo=None)
