"""
Swagger Starter Test Configuration — shared fixtures and sample content.
"""
import importlib
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

SAMPLE_SWAGGER = (
    '{"swagger": "2.0","info": {"description": "Info APIs for Collective","version": "1.0.0"},"basePath": "/",'
    '"paths": {"/ibm/api/root1/v1/info": {"get": {"summary": "Retrieve collective\'s core information",'
    '"description": "Returns a JSON with core information about collective","operationId": "getInfo","produces": '
    '["application/json"],"responses": {"200": {"description": "successful operation",'
    '"schema": {"$ref": "#/definitions/CollectiveInfo"}},"404": {"description": "Invalid path"}}}}},"definitions": {'
    '"CollectiveInfo": {"properties": {"name": {"type": "string","description": "Name of the collective"}}}}}'
)


def make_app(monkeypatch, **env):
    """Import a fresh API server after applying `env`, return (client, module)."""
    monkeypatch.delenv("STARTER_PROVIDER_FILE", raising=False)
    monkeypatch.delenv("STARTER_STAGING_BASE", raising=False)
    monkeypatch.delenv("STARTER_OTEL_ENABLED", raising=False)
    for key, value in env.items():
        monkeypatch.setenv(key, str(value))

    # Force reimport so module-level setup sees the new environment
    for mod_name in list(sys.modules):
        if mod_name.startswith("swagger_starter.") and not mod_name.startswith("swagger_starter.tests"):
            del sys.modules[mod_name]
    api_server = importlib.import_module("swagger_starter.api_server")
    return TestClient(api_server.app), api_server


@pytest.fixture
def fresh_app(monkeypatch):
    """Fresh API server using the bundled provider descriptor."""
    return make_app(monkeypatch)


@pytest.fixture
def sample_swagger():
    return SAMPLE_SWAGGER


@pytest.fixture
def staging_root(tmp_path):
    """A unique staging root with server/src/sampleSwagger.json written into it."""
    import uuid
    root = tmp_path / "workarea" / "appAccelerator" / str(uuid.uuid4()) / "swagger"
    swagger_file = root / "server" / "src" / "sampleSwagger.json"
    swagger_file.parent.mkdir(parents=True)
    swagger_file.write_text(SAMPLE_SWAGGER, encoding="utf-8")
    return root


pytest.make_app = make_app
