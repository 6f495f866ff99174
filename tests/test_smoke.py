import pytest

from app.filing import create_app


@pytest.fixture()
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "test-secret")
    monkeypatch.setenv("ENV", "test")
    monkeypatch.setenv("STORAGE_BACKEND", "file")
    monkeypatch.setenv("DB_FILE", str(tmp_path / "db.json"))
    monkeypatch.delenv("SEED_SAMPLE_DATA", raising=False)

    app = create_app()
    return app.test_client()


def test_health_ok(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json["ok"] is True


def test_healthz_ok(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.data == b"ok"


def test_unknown_route_is_json_404(client):
    r = client.get("/api/nope")
    assert r.status_code == 404
    assert "error" in r.json


def test_production_requires_secret_key(tmp_path, monkeypatch):
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("SECRET_KEY", "change-me")
    monkeypatch.setenv("DB_FILE", str(tmp_path / "db.json"))
    with pytest.raises(RuntimeError):
        create_app()


def test_unknown_storage_backend_fails_fast(tmp_path, monkeypatch):
    monkeypatch.setenv("ENV", "test")
    monkeypatch.setenv("STORAGE_BACKEND", "s3")
    from app.filing.storage import StorageError

    with pytest.raises(StorageError):
        create_app()


def test_seed_sample_data_on_start(tmp_path, monkeypatch):
    monkeypatch.setenv("ENV", "test")
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    monkeypatch.setenv("SEED_SAMPLE_DATA", "1")

    app = create_app()
    r = app.test_client().get("/api/documents")
    assert r.status_code == 200
    assert [d["docId"] for d in r.json] == ["GATEPASS23010001", "JOBCARD23010001"]
