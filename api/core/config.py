"""
Settings read from environment variables (and a local `.env` file).

Values are computed once at import time, so the environment must be prepared
before `api.core.config` is imported.
"""
import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _default_mongodb_uri() -> str:
    uri = os.getenv("MONGODB_URI")
    if uri:
        return uri

    user = os.getenv("DB_USER")
    password = os.getenv("DB_PASSWORD")
    if not (user and password):
        return ""
    host = os.getenv("DB_HOST", "cluster0.w3tuc.mongodb.net")
    return f"mongodb+srv://{user}:{password}@{host}/?retryWrites=true&w=majority&appName=Cluster0"


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Visa Navigator API")
    mongodb_uri: str = field(default_factory=_default_mongodb_uri)
    mongodb_timeout_ms: int = int(os.getenv("MONGODB_TIMEOUT_MS", "5000"))

    visa_db: str = os.getenv("MONGODB_VISA_DB", "visaDB")
    visa_collection: str = os.getenv("MONGODB_VISA_COLLECTION", "visas")
    application_db: str = os.getenv("MONGODB_APPLICATION_DB", "visa_applications")
    application_collection: str = os.getenv("MONGODB_APPLICATION_COLLECTION", "visa_application_collection")

    # Threads used to resolve visa references when listing applications.
    # 1 or 0 resolves them one after another.
    enrichment_workers: int = int(os.getenv("ENRICHMENT_WORKERS", "4"))
    visa_limited_count: int = int(os.getenv("VISA_LIMITED_COUNT", "6"))

    cors_origins: List[str] = field(default_factory=lambda: _split_origins(os.getenv("CORS_ORIGINS", "*")))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))


settings = Settings()
