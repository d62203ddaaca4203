"""
Swagger Starter Provider API Server

FastAPI backend consumed by the app accelerator:
- Provider metadata (description + PROVIDED/RUNTIME dependencies)
- server.xml configuration tags
- Sample locations
- Features to install
- Packaging of uploaded Swagger documents into the generated project

Run: uvicorn swagger_starter.api_server:app --reload
"""
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from swagger_starter.config import (
    API_PREFIX, HOST, PORT, SERVICE_NAME, STARTER_VERSION, get_cors_origins,
)
from swagger_starter.models import Provider, Sample, ServerConfig
from swagger_starter.observability import configure_logging, configure_tracing, instrument_app
from swagger_starter.packaging import INVALID_REQUEST, prepare_packages
from swagger_starter.provider import load_descriptor

logger = logging.getLogger(__name__)

# =============================================================================
# SETUP
# =============================================================================

configure_logging()
configure_tracing()

_descriptor = load_descriptor()

# =============================================================================
# PROVIDER ENDPOINTS
# =============================================================================

router = APIRouter(prefix=f"{API_PREFIX}/provider", tags=["provider"])


@router.get("/", response_model=Provider)
async def get_provider():
    return _descriptor.provider


@router.get("/config", response_model=ServerConfig, response_model_exclude_none=True)
async def get_config():
    return _descriptor.config


@router.get("/samples", response_model=Sample)
async def get_samples():
    return _descriptor.sample


@router.get("/features/install", response_class=PlainTextResponse)
async def get_features_to_install():
    return _descriptor.features_to_install()


@router.get("/packages/prepare", response_class=PlainTextResponse)
def prepare_dynamic_packages(path: str = Query(..., description="Staging root holding the option subtrees"),
                             options: str = Query(..., description="Comma separated subtrees to package")):
    """Copy `<path>/<option>/**` into `<path>/package/**`.

    Returns the plain text `success`, or `failure: <reason>` with status 400
    when the request cannot be honoured and 500 when copying fails.
    """
    result = prepare_packages(path, options)
    if result.ok:
        return result.status
    status_code = 400 if result.reason == INVALID_REQUEST else 500
    return PlainTextResponse(f"{result.status}: {result.message}", status_code=status_code)

# =============================================================================
# APP
# =============================================================================

app = FastAPI(
    title="Swagger Starter Provider",
    description="Swagger technology provider for the Liberty app accelerator",
    version=STARTER_VERSION,
    docs_url="/docs",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type", "X-Requested-With"],
)

app.include_router(router)

instrument_app(app)

# =============================================================================
# HEALTH
# =============================================================================

@app.get("/health")
async def health():
    return {"status": "healthy", "service": SERVICE_NAME, "version": STARTER_VERSION,
            "timestamp": datetime.now(timezone.utc).isoformat()}


def main() -> None:
    import uvicorn
    logger.info("starting %s %s on %s:%d", SERVICE_NAME, STARTER_VERSION, HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
