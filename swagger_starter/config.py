"""
Swagger Starter configuration — all environment-driven settings in one place.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

STARTER_VERSION = "0.0.3"
SERVICE_NAME = "starter-microservice-swagger"

# --- Server ---
HOST = os.environ.get("STARTER_HOST", "0.0.0.0")
PORT = int(os.environ.get("STARTER_PORT", "9080"))
API_PREFIX = "/api/v1"

# --- Logging ---
LOG_LEVEL = os.environ.get("STARTER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# --- Provider descriptor ---
DEFAULT_PROVIDER_FILE = Path(__file__).parent / "data" / "provider.yaml"


def get_provider_file() -> Path:
    raw = os.environ.get("STARTER_PROVIDER_FILE")
    return Path(raw) if raw else DEFAULT_PROVIDER_FILE


# --- Staging ---
PACKAGE_SEGMENT = "package"


def get_staging_base() -> Optional[Path]:
    """Directory every staging root must live under, or None for no restriction."""
    raw = os.environ.get("STARTER_STAGING_BASE", "").strip()
    return Path(raw).resolve() if raw else None


# --- CORS ---
def get_cors_origins() -> List[str]:
    raw = os.environ.get("STARTER_CORS_ORIGINS", "")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["http://localhost:9080", "http://localhost:3000"]
