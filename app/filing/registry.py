"""
Document type registry (static, no IO).

Each type key maps to a display name and the ordered list of extra fields a
record of that type carries on top of the common fields.
"""

from __future__ import annotations

from types import MappingProxyType

from app.filing.models import DocumentTypeDescriptor, FieldDescriptor


def _f(name: str, label: str, kind: str = "text", options: tuple[str, ...] = ()) -> FieldDescriptor:
    return FieldDescriptor(name=name, label=label, kind=kind, required=True, options=options)


DOCUMENT_TYPES = MappingProxyType(
    {
        "gate-pass": DocumentTypeDescriptor(
            name="Gate Pass",
            fields=(
                _f("assetType", "Asset Type", "select", ("Laptop", "Desktop", "Printer", "Monitor", "Other")),
                _f("assetTag", "Asset Tag/Serial Number"),
                _f("exitDate", "Exit Date", "date"),
                _f("returnDate", "Expected Return Date", "date"),
                _f("purpose", "Purpose/Reason", "textarea"),
            ),
        ),
        "job-card": DocumentTypeDescriptor(
            name="Job Card",
            fields=(
                _f("jobTitle", "Job Title"),
                _f("priority", "Priority", "select", ("Low", "Medium", "High", "Critical")),
                _f("assignedTo", "Assigned To"),
                _f("dueDate", "Due Date", "date"),
                _f("description", "Job Description", "textarea"),
            ),
        ),
        "invoice": DocumentTypeDescriptor(
            name="Invoice",
            fields=(
                _f("invoiceNumber", "Invoice Number"),
                _f("clientName", "Client Name"),
                _f("amount", "Amount", "number"),
                _f("dueDate", "Due Date", "date"),
                _f("description", "Service Description", "textarea"),
            ),
        ),
        "asset-movement": DocumentTypeDescriptor(
            name="Asset Movement",
            fields=(
                _f("assetName", "Asset Name"),
                _f("fromLocation", "From Location"),
                _f("toLocation", "To Location"),
                _f("movementDate", "Movement Date", "date"),
                _f("reason", "Reason for Movement", "textarea"),
            ),
        ),
        "score-card": DocumentTypeDescriptor(
            name="Score Card",
            fields=(
                _f("employeeName", "Employee Name"),
                _f("period", "Review Period"),
                _f("score", "Overall Score", "number"),
                _f("reviewer", "Reviewer"),
                _f("comments", "Comments", "textarea"),
            ),
        ),
    }
)


def describe(type_key: str) -> DocumentTypeDescriptor | None:
    return DOCUMENT_TYPES.get((type_key or "").strip())


def is_known_type(type_key: str) -> bool:
    return describe(type_key) is not None


def type_keys() -> list[str]:
    return list(DOCUMENT_TYPES.keys())


def display_name(type_key: str) -> str:
    """Human-readable type name; unknown keys are shown as-is."""
    d = describe(type_key)
    return d.name if d else (type_key or "")
