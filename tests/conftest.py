"""Pytest configuration and fixtures."""

import json
from collections.abc import AsyncGenerator
from pathlib import Path
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from public_api.core.config import Configuration
from public_api.main import create_app

SERVICE_URL = "https://gitpod.example.com/api"


@pytest.fixture
def server_payload() -> dict[str, Any]:
    """Nested server block as it appears in a config file."""
    return {
        "services": {
            "grpc": {"address": ":9001"},
            "http": {
                "address": "localhost:9000",
                "tls": {
                    "caPath": "/certs/ca.crt",
                    "certPath": "/certs/tls.crt",
                    "keyPath": "/certs/tls.key",
                },
            },
        }
    }


@pytest.fixture
def config_payload(server_payload: dict[str, Any]) -> dict[str, Any]:
    """Full config file contents."""
    return {"gitpodServiceUrl": SERVICE_URL, "server": server_payload}


@pytest.fixture
def config(config_payload: dict[str, Any]) -> Configuration:
    """Decoded configuration with both fields set."""
    return Configuration.model_validate(config_payload)


@pytest.fixture
def config_file(tmp_path: Path, config_payload: dict[str, Any]) -> Path:
    """Config file written to a temp directory."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config_payload), encoding="utf-8")
    return path


# --- App & client fixtures ---


@pytest.fixture
async def async_client(config: Configuration) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client for async tests."""
    transport = ASGITransport(app=create_app(config))
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
