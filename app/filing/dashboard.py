from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING

from app.filing.models import DocumentRecord
from app.filing.utils import parse_iso_date, timestamp_sort_key, utcnow

if TYPE_CHECKING:
    from app.filing.store import Store

RECENT_LIMIT = 5


@dataclass
class DashboardStats:
    total: int
    pending: int
    monthly: int
    recent: list[DocumentRecord] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "totalDocuments": self.total,
            "pendingDocuments": self.pending,
            "monthlyDocuments": self.monthly,
            "recentDocuments": [d.to_dict() for d in self.recent],
        }


def _in_month(doc: DocumentRecord, month: int) -> bool:
    # Month index only; the year is not compared.
    d = parse_iso_date(doc.date)
    return d is not None and d.month == month


def recent_documents(docs: list[DocumentRecord], limit: int = RECENT_LIMIT) -> list[DocumentRecord]:
    # sorted() is stable, so equal createdAt values keep store order.
    return sorted(docs, key=lambda d: timestamp_sort_key(d.created_at), reverse=True)[:limit]


def dashboard_stats(store: "Store", today: date | None = None) -> DashboardStats:
    today = today or utcnow().date()
    docs = store.snapshot()
    return DashboardStats(
        total=len(docs),
        pending=sum(1 for d in docs if d.status == "pending"),
        monthly=sum(1 for d in docs if _in_month(d, today.month)),
        recent=recent_documents(docs),
    )
