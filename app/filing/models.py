from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


FIELD_KINDS = ("text", "textarea", "number", "date", "select")

VALID_STATUSES = ("pending", "approved", "rejected")

# Wire/disk key -> attribute for the fields every record carries.
COMMON_FIELDS = {
    "date": "date",
    "personName": "person_name",
    "authorizedBy": "authorized_by",
    "status": "status",
}

RESERVED_KEYS = frozenset({"id", "docId", "type", "createdAt", "updatedAt", *COMMON_FIELDS})


@dataclass(frozen=True)
class FieldDescriptor:
    name: str
    label: str
    kind: str
    required: bool = True
    options: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "name": self.name,
            "label": self.label,
            "type": self.kind,
            "required": self.required,
        }
        if self.kind == "select":
            out["options"] = list(self.options)
        return out


@dataclass(frozen=True)
class DocumentTypeDescriptor:
    name: str
    fields: tuple[FieldDescriptor, ...]

    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "fields": [f.to_dict() for f in self.fields]}


@dataclass
class DocumentRecord:
    id: str
    doc_id: str
    type: str
    date: str
    person_name: str
    authorized_by: str
    status: str
    created_at: str
    updated_at: str
    # Type-specific values, keyed by FieldDescriptor.name
    fields: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "id": self.id,
            "docId": self.doc_id,
            "type": self.type,
            "date": self.date,
            "personName": self.person_name,
            "authorizedBy": self.authorized_by,
            "status": self.status,
        }
        for k, v in self.fields.items():
            out[k] = v
        out["createdAt"] = self.created_at
        out["updatedAt"] = self.updated_at
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DocumentRecord":
        """
        Build a record from its stored/wire form.

        Keys outside the common set are kept as type-specific fields, so a record
        whose type is unknown (or carries extra keys) survives a load/persist cycle.
        """
        extra = {k: _as_text(v) for k, v in data.items() if k not in RESERVED_KEYS and v is not None}
        return cls(
            id=_as_text(data.get("id")),
            doc_id=_as_text(data.get("docId")),
            type=_as_text(data.get("type")),
            date=_as_text(data.get("date")),
            person_name=_as_text(data.get("personName")),
            authorized_by=_as_text(data.get("authorizedBy")),
            status=_as_text(data.get("status")),
            created_at=_as_text(data.get("createdAt")),
            updated_at=_as_text(data.get("updatedAt")),
            fields=extra,
        )


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)
