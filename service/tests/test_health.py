import platform

from fastapi.testclient import TestClient

from healthcheck.main import app
from healthcheck.schemas.health import HealthStatus
from tests.conftest import make_probes

client = TestClient(app)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "UP"}


def test_health_ignores_dependencies(make_client):
    """Shallow check stays UP even when every dependency is DOWN."""
    probes = make_probes(
        database=HealthStatus.DOWN, cache=HealthStatus.DOWN, disk=HealthStatus.DOWN
    )
    response = make_client(probes).get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "UP"}
    assert all(p.calls == 0 for p in probes)


def test_details_all_up(make_client):
    response = make_client(make_probes()).get("/health/details")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    data = response.json()
    assert data["status"] == "UP"
    assert data["environment"] == "test"
    assert data["goVersion"] == platform.python_version()
    assert "runtimeVersion" not in data
    assert "time" in data
    assert set(data["components"]) == {"database", "redis", "disk", "responseTime"}


def test_details_database_down_returns_503(make_client):
    probes = make_probes(database=HealthStatus.DOWN)
    probes[0].message = "Failed to ping database: connection refused"
    response = make_client(probes).get("/health/details")
    assert response.status_code == 503
    data = response.json()
    assert data["status"] == "DOWN"
    assert data["components"]["database"]["status"] == "DOWN"
    assert "connection refused" in data["components"]["database"]["message"]


def test_details_cache_down_returns_503(make_client):
    response = make_client(make_probes(cache=HealthStatus.DOWN)).get("/health/details")
    assert response.status_code == 503
    assert response.json()["components"]["redis"]["status"] == "DOWN"


def test_details_disk_warning_returns_200(make_client):
    response = make_client(make_probes(disk=HealthStatus.WARNING)).get("/health/details")
    assert response.status_code == 200
    assert response.json()["status"] == "WARNING"


def test_details_omits_empty_fields(make_client):
    """Optional component fields are left out rather than sent as null."""
    data = make_client(make_probes()).get("/health/details").json()
    assert "message" not in data["components"]["redis"]
    assert "responseTime" in data["components"]["redis"]
    assert "responseTime" not in data["components"]["responseTime"]


def test_metrics_endpoint():
    """Prometheus /metrics endpoint is exposed."""
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "HELP" in response.text or "http_request" in response.text
