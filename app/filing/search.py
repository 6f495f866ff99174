from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Mapping

from app.filing.models import DocumentRecord

if TYPE_CHECKING:
    from app.filing.store import Store


@dataclass(frozen=True)
class SearchCriteria:
    """Optional filters; None (or blank) means no constraint. All present filters are ANDed."""

    name_pattern: str | None = None
    type: str | None = None
    date_from: str | None = None
    date_to: str | None = None
    status: str | None = None

    def is_empty(self) -> bool:
        return not any((self.name_pattern, self.type, self.date_from, self.date_to, self.status))

    def matches(self, doc: DocumentRecord) -> bool:
        if self.name_pattern:
            needle = self.name_pattern.lower()
            if needle not in doc.person_name.lower() and needle not in doc.doc_id.lower():
                return False
        if self.type and doc.type != self.type:
            return False
        # ISO dates compare correctly as strings.
        if self.date_from and doc.date < self.date_from:
            return False
        if self.date_to and doc.date > self.date_to:
            return False
        if self.status and doc.status != self.status:
            return False
        return True


@dataclass
class SearchResult:
    documents: list[DocumentRecord] = field(default_factory=list)
    criteria_given: bool = False

    @property
    def count(self) -> int:
        return len(self.documents)


def parse_criteria(args: Mapping[str, str]) -> SearchCriteria:
    """Build criteria from query-string style args (name, type, dateFrom, dateTo, status)."""

    def _get(key: str) -> str | None:
        v = (args.get(key) or "").strip()
        return v or None

    return SearchCriteria(
        name_pattern=_get("name"),
        type=_get("type"),
        date_from=_get("dateFrom"),
        date_to=_get("dateTo"),
        status=_get("status"),
    )


def search_documents(store: "Store", criteria: SearchCriteria | None = None) -> SearchResult:
    criteria = criteria or SearchCriteria()
    docs = store.snapshot()
    if criteria.is_empty():
        return SearchResult(documents=docs, criteria_given=False)
    return SearchResult(documents=[d for d in docs if criteria.matches(d)], criteria_given=True)
