import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    secret_key: str
    env: str
    log_level: str

    storage_backend: str
    db_file: str
    storage_key: str
    seed_sample_data: bool


def _env(name: str, default: str = "") -> str:
    value = os.environ.get(name)
    return value.strip() if value and value.strip() else default


def _env_flag(name: str) -> bool:
    return _env(name, "0").lower() in ("1", "true", "yes")


def load_settings() -> Settings:
    return Settings(
        secret_key=_env("SECRET_KEY", "change-me"),
        env=_env("ENV", "development"),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
        storage_backend=_env("STORAGE_BACKEND", "file").lower(),
        db_file=_env("DB_FILE", os.path.join(os.getcwd(), "db.json")),
        storage_key=_env("STORAGE_KEY", "documents"),
        seed_sample_data=_env_flag("SEED_SAMPLE_DATA"),
    )


def load_config() -> dict:
    s = load_settings()
    return {
        "SECRET_KEY": s.secret_key,
        "ENV": s.env,
        "LOG_LEVEL": s.log_level,
        "STORAGE_BACKEND": s.storage_backend,
        "DB_FILE": s.db_file,
        "STORAGE_KEY": s.storage_key,
        "SEED_SAMPLE_DATA": s.seed_sample_data,
        # request body limit (1MB); records are small flat objects
        "MAX_CONTENT_LENGTH": 1 * 1024 * 1024,
    }
