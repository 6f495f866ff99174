import logging

from flask import Flask, jsonify
from dotenv import load_dotenv
from werkzeug.exceptions import HTTPException

from app.filing.config import load_config
from app.filing.db import init_store
from app.filing.errors import NotFoundError, PersistenceError, ValidationError
from app.filing.routes import bp as routes_bp
from app.filing.api import bp as api_bp


def create_app() -> Flask:
    load_dotenv()
    app = Flask(__name__)
    app.config.from_mapping(load_config())
    app.json.sort_keys = False  # type: ignore[attr-defined]

    logging.basicConfig(
        level=getattr(logging, app.config["LOG_LEVEL"], logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Production guardrails (fail fast with clear logs)
    env = (app.config.get("ENV") or "").strip().lower()
    if env in ("prod", "production"):
        if not app.config.get("SECRET_KEY") or str(app.config["SECRET_KEY"]) in ("", "change-me"):
            raise RuntimeError("SECRET_KEY must be set to a strong value in production (not default).")
        if app.config.get("STORAGE_BACKEND") == "memory":
            app.logger.warning("STORAGE_BACKEND=memory in production; documents will not survive a restart.")

    store = init_store(app)

    if app.config.get("SEED_SAMPLE_DATA"):
        from app.filing.sample_data import seed_sample_documents

        try:
            seed_sample_documents(store)
        except PersistenceError as e:
            app.logger.error("Sample data seeded in memory only: %s", e)

    app.register_blueprint(routes_bp)
    app.register_blueprint(api_bp, url_prefix="/api")

    @app.errorhandler(ValidationError)
    def _err_validation(e: ValidationError):  # type: ignore[no-redef]
        return jsonify({"error": "Invalid document", "details": e.errors}), 400

    @app.errorhandler(NotFoundError)
    def _err_not_found(e: NotFoundError):  # type: ignore[no-redef]
        return jsonify({"error": "Document not found"}), 404

    @app.errorhandler(PersistenceError)
    def _err_persistence(e: PersistenceError):  # type: ignore[no-redef]
        app.logger.error("Persistence failure: %s", e)
        body: dict = {"error": "Change was applied but could not be saved; it may be lost on restart."}
        if e.document is not None:
            body["document"] = e.document.to_dict()
        return jsonify(body), 500

    @app.errorhandler(HTTPException)
    def _err_http(e: HTTPException):  # type: ignore[no-redef]
        return jsonify({"error": e.description or e.name}), e.code or 500

    @app.errorhandler(Exception)
    def _err_500(e: Exception):  # type: ignore[no-redef]
        app.logger.exception("Unhandled server error: %s", e)
        return jsonify({"error": "Internal server error"}), 500

    logging.getLogger(__name__).info("create_app() complete; app ready to serve")

    return app
