from datetime import date, datetime, timedelta, timezone

import pytest

from app.filing.dashboard import dashboard_stats
from app.filing.models import DocumentRecord
from app.filing.service import create_document, delete_document, update_document
from app.filing.storage import MemoryStorage
from app.filing.store import Store

BASE = datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc)
INVOICE_FIELDS = {
    "invoiceNumber": "INV-9",
    "clientName": "ACME",
    "amount": "250",
    "dueDate": "2024-04-01",
    "description": "Support",
}


@pytest.fixture()
def store():
    s = Store(MemoryStorage())
    s.load()
    return s


def _create(store, when, d="2024-03-05", status="pending"):
    return create_document(
        store,
        "invoice",
        {"date": d, "personName": "P", "authorizedBy": "A", "status": status},
        INVOICE_FIELDS,
        now=when,
    )


def test_empty_store(store):
    stats = dashboard_stats(store, today=date(2024, 3, 10))
    assert (stats.total, stats.pending, stats.monthly, stats.recent) == (0, 0, 0, [])


def test_total_and_pending_counts(store):
    _create(store, BASE, status="pending")
    _create(store, BASE, status="approved")
    d = _create(store, BASE, status="pending")
    stats = dashboard_stats(store, today=date(2024, 3, 10))
    assert stats.total == 3
    assert stats.pending == 2

    update_document(store, d.id, "", {"status": "rejected"}, now=BASE)
    assert dashboard_stats(store, today=date(2024, 3, 10)).pending == 1


def test_monthly_compares_month_only(store):
    _create(store, BASE, d="2024-03-05")
    _create(store, BASE, d="2019-03-28")  # another year, same month: still counted
    _create(store, BASE, d="2024-04-01")
    assert dashboard_stats(store, today=date(2024, 3, 10)).monthly == 2


@pytest.mark.parametrize("bad", ["not-a-date", "20240305", "2024-03-05junk", "2024-03-05T10:00:00Z"])
def test_monthly_ignores_unparsable_dates(store, bad):
    store.add(
        DocumentRecord(
            id="odd",
            doc_id="X",
            type="unknown",
            date=bad,
            person_name="",
            authorized_by="",
            status="pending",
            created_at="",
            updated_at="",
        )
    )
    stats = dashboard_stats(store, today=date(2024, 3, 10))
    assert stats.total == 1
    assert stats.monthly == 0


def test_recent_is_latest_five_by_created_at_desc(store):
    created = [_create(store, BASE + timedelta(minutes=i)) for i in range(7)]
    stats = dashboard_stats(store, today=date(2024, 3, 10))
    assert [d.id for d in stats.recent] == [d.id for d in reversed(created)][:5]


def test_recent_ties_keep_store_order(store):
    a = _create(store, BASE)
    b = _create(store, BASE)
    assert [d.id for d in dashboard_stats(store).recent] == [a.id, b.id]


def test_recent_does_not_reorder_store(store):
    created = [_create(store, BASE + timedelta(minutes=i)) for i in range(3)]
    dashboard_stats(store)
    assert [d.id for d in store.snapshot()] == [d.id for d in created]


def test_deleted_records_drop_out_of_stats(store):
    a = _create(store, BASE)
    _create(store, BASE + timedelta(minutes=1))
    delete_document(store, a.id)
    stats = dashboard_stats(store, today=date(2024, 3, 10))
    assert stats.total == 1
    assert a.id not in [d.id for d in stats.recent]


def test_to_dict_uses_wire_names(store):
    _create(store, BASE)
    body = dashboard_stats(store, today=date(2024, 3, 10)).to_dict()
    assert set(body) == {"totalDocuments", "pendingDocuments", "monthlyDocuments", "recentDocuments"}
    assert body["recentDocuments"][0]["docId"] == "INVOICE2403001"
