from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.filing.models import DocumentRecord

if TYPE_CHECKING:
    from app.filing.store import Store

logger = logging.getLogger(__name__)

# First-visit demo records.
SAMPLE_DOCUMENTS: tuple[dict, ...] = (
    {
        "id": "1",
        "docId": "GATEPASS23010001",
        "type": "gate-pass",
        "date": "2024-01-15",
        "personName": "John Doe",
        "authorizedBy": "Manager Smith",
        "status": "approved",
        "assetType": "Laptop",
        "assetTag": "LT001234",
        "exitDate": "2024-01-15",
        "returnDate": "2024-01-20",
        "purpose": "Work from home setup",
        "createdAt": "2024-01-15T10:00:00Z",
        "updatedAt": "2024-01-15T10:00:00Z",
    },
    {
        "id": "2",
        "docId": "JOBCARD23010001",
        "type": "job-card",
        "date": "2024-01-16",
        "personName": "IT Department",
        "authorizedBy": "CTO Johnson",
        "status": "pending",
        "jobTitle": "Server Maintenance",
        "priority": "High",
        "assignedTo": "Tech Team",
        "dueDate": "2024-01-25",
        "description": "Monthly server maintenance and updates",
        "createdAt": "2024-01-16T09:00:00Z",
        "updatedAt": "2024-01-16T09:00:00Z",
    },
)


def seed_sample_documents(store: "Store") -> int:
    """Add the sample records when the store is empty. Returns number of records added."""
    with store.lock:
        if len(store):
            logger.info("Store already has %d document(s); skipping sample data", len(store))
            return 0
        for raw in SAMPLE_DOCUMENTS:
            store.add(DocumentRecord.from_dict(dict(raw)))
        store.persist()
    logger.info("Seeded %d sample document(s)", len(SAMPLE_DOCUMENTS))
    return len(SAMPLE_DOCUMENTS)
