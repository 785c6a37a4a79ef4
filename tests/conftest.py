# tests/conftest.py

"""
Pytest Fixtures - Shared test configuration and data

The compute service is replaced by httpx.MockTransport; `compute_service`
records every request it receives and answers from a per-operation table.
"""

import json

import httpx
import pytest

from co2impact.config import Settings
from co2impact.models.region import Region
from co2impact.services.compute_client import RemoteComputeClient


# =============================================================================
# SETTINGS
# =============================================================================

@pytest.fixture
def settings():
    """Settings isolated from any local .env file."""
    return Settings(
        _env_file=None,
        COMPUTE_API_URL="http://compute.test",
        COMPUTE_FN_PATH="/api/v1/fn",
        COMPUTE_TIMEOUT_SECONDS=5.0,
    )


# =============================================================================
# REGION FIXTURES
# =============================================================================

@pytest.fixture
def north():
    return Region(id="North", energy_kWh=50000, renewable_share_pct=38, grid_emission_factor_kg_per_kWh=0.45)


@pytest.fixture
def seed_regions(north):
    """North / South / West seed data."""
    return (
        north,
        Region(id="South", energy_kWh=42000, renewable_share_pct=55, grid_emission_factor_kg_per_kWh=0.42),
        Region(id="West", energy_kWh=61000, renewable_share_pct=28, grid_emission_factor_kg_per_kWh=0.50),
    )


# =============================================================================
# FAKE COMPUTE SERVICE
# =============================================================================

class FakeComputeService:
    """Answers POST /api/v1/fn/<operation> from a canned response table."""

    def __init__(self):
        self.responses = {}
        self.requests = []

    def respond(self, operation, body=None, status_code=200):
        self.responses[operation] = (status_code, body)

    def payload(self, index=-1):
        return json.loads(self.requests[index].content)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        operation = request.url.path.rsplit("/", 1)[-1]
        status_code, body = self.responses.get(operation, (404, {"detail": "not found"}))
        if isinstance(body, str):
            return httpx.Response(status_code, text=body)
        return httpx.Response(status_code, json=body)


@pytest.fixture
def compute_service():
    return FakeComputeService()


@pytest.fixture
def compute_client(settings, compute_service):
    """RemoteComputeClient wired to the fake service."""
    return RemoteComputeClient(settings, transport=httpx.MockTransport(compute_service.handler))


@pytest.fixture
def dashboard_response():
    return {
        "by_region": [{"id": "North", "emissions_kg": 12000}],
        "total_emissions_kg": 12000,
    }


@pytest.fixture
def marginal_response():
    return {
        "marginal": [
            {"id": "North", "delta_renew_kWh": 500, "avoided_emissions_kg": 225},
            {"id": "South", "delta_renew_kWh": 420, "avoided_emissions_kg": 176.4},
        ]
    }


@pytest.fixture
def pathway_response():
    return {
        "pathway": [
            {"year": 2025, "renewable_share_pct": 40.0, "emissions_kg": 45000},
            {"year": 2026, "renewable_share_pct": 46.0, "emissions_kg": 41000},
            {"year": 2027, "renewable_share_pct": 52.0, "emissions_kg": 37000},
        ]
    }
