"""
JSON API for document records.

Thin transport layer: parses requests, calls the service/search/dashboard
functions and serializes results. Errors raised by the service
(ValidationError, NotFoundError, PersistenceError) are mapped to responses by
the handlers registered in create_app().
"""

from __future__ import annotations

from flask import Blueprint, abort, jsonify, request

from app.filing.dashboard import dashboard_stats
from app.filing.db import document_store
from app.filing.display import document_view, results_summary
from app.filing.errors import ValidationError
from app.filing.models import DocumentRecord
from app.filing.registry import DOCUMENT_TYPES, describe
from app.filing.search import parse_criteria, search_documents
from app.filing.service import (
    create_document,
    delete_document,
    get_document,
    list_documents,
    split_payload,
    update_document,
)
from app.filing.store import Store

bp = Blueprint("documents", __name__)


def _get_doc_or_404(store: Store, doc_id: str) -> DocumentRecord:
    d = get_document(store, doc_id)
    if not d:
        abort(404, description="Document not found")
    return d


def _request_payload() -> dict:
    if request.is_json:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError(["Request body must be a JSON object."])
        return data
    return request.form.to_dict()


# ---------- Documents ----------
@bp.get("/documents")
def documents_list():
    store = document_store()
    return jsonify([d.to_dict() for d in list_documents(store)])


@bp.get("/documents/search")
def documents_search():
    store = document_store()
    criteria = parse_criteria(request.args)
    result = search_documents(store, criteria)
    return jsonify(
        {
            "documents": [d.to_dict() for d in result.documents],
            "count": result.count,
            "criteriaGiven": result.criteria_given,
            "summary": results_summary(result.count),
        }
    )


@bp.get("/documents/<doc_id>")
def document_detail(doc_id: str):
    store = document_store()
    d = _get_doc_or_404(store, doc_id)
    return jsonify(d.to_dict())


@bp.get("/documents/<doc_id>/view")
def document_detail_view(doc_id: str):
    store = document_store()
    d = _get_doc_or_404(store, doc_id)
    return jsonify(document_view(d))


@bp.post("/documents")
def document_create():
    store = document_store()
    type_key, common, type_fields = split_payload(_request_payload())
    d = create_document(store, type_key, common, type_fields)
    return jsonify(d.to_dict()), 201


@bp.put("/documents/<doc_id>")
def document_update(doc_id: str):
    store = document_store()
    current = _get_doc_or_404(store, doc_id)
    type_key, common, type_fields = split_payload(_request_payload(), default_type=current.type)
    d = update_document(store, doc_id, type_key, common, type_fields)
    return jsonify(d.to_dict())


@bp.delete("/documents/<doc_id>")
def document_delete(doc_id: str):
    store = document_store()
    delete_document(store, doc_id)
    return "", 204


# ---------- Dashboard ----------
@bp.get("/dashboard/stats")
def dashboard():
    store = document_store()
    return jsonify(dashboard_stats(store).to_dict())


# ---------- Document types ----------
@bp.get("/document-types")
def document_types_list():
    return jsonify({key: descriptor.to_dict() for key, descriptor in DOCUMENT_TYPES.items()})


@bp.get("/document-types/<type_key>")
def document_type_detail(type_key: str):
    descriptor = describe(type_key)
    if descriptor is None:
        abort(404, description="Document type not found")
    return jsonify(descriptor.to_dict())
