"""
Test suite for architecture API endpoints
"""

import pytest
from fastapi.testclient import TestClient

from archmap.api.deps import get_context_map_service
from archmap.domains.architecture.services.context_map_service import (
    ContextMapService,
)
from archmap.main import app
from factories import FailingRecordSource

client = TestClient(app)


@pytest.fixture
def override_service(banking_service):
    app.dependency_overrides[get_context_map_service] = lambda: banking_service
    yield banking_service
    app.dependency_overrides.clear()


@pytest.fixture
def failing_service():
    service = ContextMapService(record_source=FailingRecordSource())
    app.dependency_overrides[get_context_map_service] = lambda: service
    yield service
    app.dependency_overrides.clear()


def test_health():
    response = client.get("/api/v1/architecture/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_context_map_endpoint(override_service):
    response = client.get("/api/v1/architecture/context-map")

    assert response.status_code == 200
    data = response.json()
    assert set(data) == {"contexts", "relationships", "metadata"}
    assert data["metadata"]["totalContexts"] == 5
    assert data["metadata"]["totalRelationships"] == 8
    assert data["metadata"]["version"] == "1.0"
    assert "generatedAt" in data["metadata"]

    context = data["contexts"][0]
    assert context["id"] == "payment-core"
    assert context["displayName"] == "Payment Core"
    assert context["owningTeam"] == "payments-squad"
    assert context["sourceUrl"] == "https://github.com/mybank/payment-gateway"
    assert {"providedApis", "consumedApis", "components", "domain"} <= set(context)
    assert context["components"][0]["entityRef"] == "component:default/payment-gateway"

    relationship = data["relationships"][0]
    assert relationship == {
        "id": "rel-1",
        "upstreamContextId": "account-management",
        "downstreamContextId": "payment-core",
        "relationshipType": "OPEN_HOST_SERVICE",
        "viaApiReferences": ["account-api"],
        "strength": "MEDIUM",
    }


def test_contexts_endpoint(override_service):
    response = client.get("/api/v1/architecture/contexts")

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 5
    assert [c["id"] for c in data["contexts"]][-1] == "transaction-processing"
    assert "displayName" in data["contexts"][0]


def test_context_detail_endpoint(override_service):
    response = client.get("/api/v1/architecture/contexts/loan-origination")

    assert response.status_code == 200
    data = response.json()
    assert data["context"]["id"] == "loan-origination"
    assert [r["id"] for r in data["upstream"]] == ["rel-6", "rel-7", "rel-8"]
    assert data["downstream"] == []


def test_context_dependencies_endpoint(override_service):
    response = client.get("/api/v1/architecture/contexts/customer-management/dependencies")

    assert response.status_code == 200
    data = response.json()
    assert data["contextId"] == "customer-management"
    assert data["upstreamCount"] == 0
    assert data["downstreamCount"] == 3


@pytest.mark.parametrize(
    "path",
    [
        "/api/v1/architecture/contexts/unknown",
        "/api/v1/architecture/contexts/unknown/dependencies",
    ],
)
def test_unknown_context_returns_404(override_service, path):
    response = client.get(path)

    assert response.status_code == 404
    assert response.json()["detail"] == "Context not found"


def test_service_unavailable_before_startup():
    response = client.get("/api/v1/architecture/context-map")

    assert response.status_code == 503


@pytest.mark.parametrize(
    "path, message",
    [
        (
            "/api/v1/architecture/context-map",
            "An error occurred while generating the context map",
        ),
        ("/api/v1/architecture/contexts", "An error occurred while fetching contexts"),
        (
            "/api/v1/architecture/contexts/payment-core",
            "An error occurred while fetching the context",
        ),
        (
            "/api/v1/architecture/contexts/payment-core/dependencies",
            "An error occurred while fetching dependencies",
        ),
    ],
)
def test_record_source_failure_returns_500(failing_service, path, message):
    response = client.get(path)

    assert response.status_code == 500
    detail = response.json()["detail"]
    assert detail.startswith(message)
    assert "catalog unavailable" in detail
