from __future__ import annotations

import logging
import uuid
from datetime import date, datetime
from typing import TYPE_CHECKING, Any, Iterable

from app.filing.errors import NotFoundError, ValidationError
from app.filing.models import COMMON_FIELDS, RESERVED_KEYS, VALID_STATUSES, DocumentRecord
from app.filing.registry import describe
from app.filing.utils import format_timestamp, parse_iso_date, parse_timestamp, utcnow

if TYPE_CHECKING:
    from app.filing.models import DocumentTypeDescriptor
    from app.filing.store import Store

logger = logging.getLogger(__name__)


def split_payload(
    payload: dict[str, Any],
    *,
    default_type: str = "",
) -> tuple[str, dict[str, str], dict[str, str]]:
    """
    Split a flat form/JSON payload into (type_key, common fields, type fields).

    Common fields keep their wire names (date, personName, authorizedBy, status).
    Type fields are the payload keys named by the type's descriptor. When the
    payload carries no type (a partial update), `default_type` (the stored
    record's type) decides which keys are type fields. For a type the registry
    does not know, every non-reserved key is a type field. Reserved keys (id,
    docId, createdAt, ...) are ignored.
    """
    type_key = _clean(payload.get("type"))
    common = {k: _clean(payload[k]) for k in COMMON_FIELDS if k in payload and payload[k] is not None}
    fields_type = type_key or _clean(default_type)
    descriptor = describe(fields_type)
    if descriptor:
        names = descriptor.field_names()
    elif fields_type:
        names = [k for k in payload if k not in RESERVED_KEYS]
    else:
        names = []
    type_fields = {n: _clean(payload[n]) for n in names if n in payload and payload[n] is not None}
    return type_key, common, type_fields


def validate_document_payload(
    type_key: str,
    common: dict[str, str],
    type_fields: dict[str, str],
    *,
    allow_unknown_type: bool = False,
) -> list[str]:
    """Validate a complete (create-time or merged update) payload. Returns list of errors."""
    errors: list[str] = []
    descriptor = describe(type_key)
    if not type_key:
        errors.append("Document type is required.")
    elif descriptor is None and not allow_unknown_type:
        errors.append(f"Unknown document type: {type_key!r}.")

    for key in COMMON_FIELDS:
        if not (common.get(key) or "").strip():
            errors.append(f"{key} is required.")

    d = common.get("date")
    if d and parse_iso_date(d) is None:
        errors.append("date must be in YYYY-MM-DD format.")

    status = common.get("status")
    if status and status not in VALID_STATUSES:
        errors.append(f"Invalid status. Must be one of: {', '.join(VALID_STATUSES)}")

    if descriptor is not None:
        errors.extend(_validate_type_fields(descriptor, type_fields))
    return errors


def _validate_type_fields(descriptor: "DocumentTypeDescriptor", type_fields: dict[str, str]) -> list[str]:
    errors: list[str] = []
    for f in descriptor.fields:
        value = (type_fields.get(f.name) or "").strip()
        if not value:
            if f.required:
                errors.append(f"{f.label} is required.")
            continue
        if f.kind == "select" and value not in f.options:
            errors.append(f"{f.label} must be one of: {', '.join(f.options)}")
        elif f.kind == "number":
            try:
                float(value)
            except ValueError:
                errors.append(f"{f.label} must be a number.")
        elif f.kind == "date" and parse_iso_date(value) is None:
            errors.append(f"{f.label} must be in YYYY-MM-DD format.")
    return errors


def generate_doc_id(type_key: str, existing: Iterable[DocumentRecord], today: date | None = None) -> str:
    """
    Build the human-facing document code: <PREFIX><YY><MM><SEQ>.

    SEQ counts the records of the same type that exist right now, plus one.
    It is not a stored counter: after deletions a code can repeat.
    """
    today = today or utcnow().date()
    prefix = type_key.upper().replace("-", "").replace("_", "").replace(" ", "")
    count = sum(1 for d in existing if d.type == type_key) + 1
    return f"{prefix}{today.year % 100:02d}{today.month:02d}{count:03d}"


def new_document_id() -> str:
    return uuid.uuid4().hex


# ---------- CRUD ----------
def list_documents(store: "Store") -> list[DocumentRecord]:
    return store.snapshot()


def get_document(store: "Store", doc_id: str) -> DocumentRecord | None:
    return store.find(doc_id)


def create_document(
    store: "Store",
    type_key: str,
    common: dict[str, str],
    type_fields: dict[str, str] | None = None,
    *,
    now: datetime | None = None,
) -> DocumentRecord:
    type_key = _clean(type_key)
    type_fields = dict(type_fields or {})
    errors = validate_document_payload(type_key, common, type_fields)
    if errors:
        raise ValidationError(errors)

    now = now or utcnow()
    stamp = format_timestamp(now)
    with store.lock:
        record = DocumentRecord(
            id=new_document_id(),
            doc_id=generate_doc_id(type_key, store.snapshot(), now.date()),
            type=type_key,
            date=common["date"].strip(),
            person_name=common["personName"].strip(),
            authorized_by=common["authorizedBy"].strip(),
            status=common["status"].strip(),
            created_at=stamp,
            updated_at=stamp,
            fields={k: v for k, v in type_fields.items() if v != ""},
        )
        store.add(record)
        logger.info("doc.create id=%s doc_id=%s type=%s", record.id, record.doc_id, record.type)
        store.persist(document=record)
    return record


def update_document(
    store: "Store",
    doc_id: str,
    type_key: str,
    common: dict[str, str],
    type_fields: dict[str, str] | None = None,
    *,
    now: datetime | None = None,
) -> DocumentRecord:
    """
    Overwrite the supplied fields of an existing record.

    id, docId and createdAt are kept; updatedAt is refreshed and never moves
    backwards. Omitted common fields keep their current values; type fields
    are merged over the existing ones. When the type changes, only the
    existing fields the new type defines are carried over.
    """
    with store.lock:
        current = store.find(doc_id)
        if current is None:
            raise NotFoundError(doc_id)

        new_type = _clean(type_key) or current.type
        merged_common = {
            "date": current.date,
            "personName": current.person_name,
            "authorizedBy": current.authorized_by,
            "status": current.status,
        }
        merged_common.update({k: v for k, v in common.items() if k in COMMON_FIELDS})
        merged_fields = dict(current.fields)
        if new_type != current.type:
            descriptor = describe(new_type)
            keep = set(descriptor.field_names()) if descriptor else set()
            merged_fields = {k: v for k, v in merged_fields.items() if k in keep}
        merged_fields.update(type_fields or {})

        errors = validate_document_payload(
            new_type,
            merged_common,
            merged_fields,
            allow_unknown_type=(new_type == current.type),
        )
        if errors:
            raise ValidationError(errors)

        stamp = format_timestamp(now or utcnow())
        previous = parse_timestamp(current.updated_at)
        if previous is not None and parse_timestamp(stamp) < previous:
            stamp = current.updated_at

        updated = DocumentRecord(
            id=current.id,
            doc_id=current.doc_id,
            type=new_type,
            date=merged_common["date"].strip(),
            person_name=merged_common["personName"].strip(),
            authorized_by=merged_common["authorizedBy"].strip(),
            status=merged_common["status"].strip(),
            created_at=current.created_at,
            updated_at=stamp,
            fields={k: v for k, v in merged_fields.items() if v != ""},
        )
        store.replace(updated)
        logger.info("doc.edit id=%s doc_id=%s", updated.id, updated.doc_id)
        store.persist(document=updated)
    return updated


def delete_document(store: "Store", doc_id: str) -> DocumentRecord:
    with store.lock:
        removed = store.remove(doc_id)
        if removed is None:
            raise NotFoundError(doc_id)
        logger.info("doc.delete id=%s doc_id=%s", removed.id, removed.doc_id)
        store.persist(document=removed)
    return removed


def _clean(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()
