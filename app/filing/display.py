"""
Display helpers for record detail views.

Presentation only: no business rules live here. Labels and the "N/A"
placeholder follow the document detail view of the filing UI.
"""

from __future__ import annotations

from app.filing.models import DocumentRecord
from app.filing.registry import describe, display_name

MISSING = "N/A"


def document_title(doc: DocumentRecord) -> str:
    return f"{doc.doc_id} - {display_name(doc.type)}"


def display_fields(doc: DocumentRecord) -> list[tuple[str, str]]:
    rows = [
        ("Document ID", doc.doc_id),
        ("Date", doc.date),
        ("Person/Department", doc.person_name),
        ("Authorized By", doc.authorized_by),
        ("Status", doc.status),
    ]
    descriptor = describe(doc.type)
    if descriptor:
        for f in descriptor.fields:
            rows.append((f.label, doc.fields.get(f.name) or MISSING))
    rows.append(("Created", doc.created_at))
    if doc.updated_at != doc.created_at:
        rows.append(("Last Updated", doc.updated_at))
    return rows


def results_summary(count: int) -> str:
    return f"{count} document{'' if count == 1 else 's'} found"


def document_view(doc: DocumentRecord) -> dict:
    return {
        "title": document_title(doc),
        "typeName": display_name(doc.type),
        "fields": [{"label": label, "value": value} for label, value in display_fields(doc)],
    }
