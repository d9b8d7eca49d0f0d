import pytest


@pytest.mark.parametrize(
    ("path", "key", "size"),
    [
        ("/api/services", "services", 6),
        ("/api/users", "data", 3),
        ("/api/appointments", "data", 2),
        ("/api/cities", "data", 10),
        ("/api/testimonials", "data", 3),
    ],
)
def test_catalogue_endpoints(client, path, key, size):
    response = client.get(path)

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert len(data[key]) == size


def test_health_reports_demo_mode(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "OK"
    assert data["services"]["database"] == "Not connected (Demo Mode)"


def test_root_lists_endpoints(client):
    data = client.get("/").json()

    assert data["status"] == "Running"
    assert "POST /api/auth/register - User registration" in data["endpoints"]


def test_connectivity_test(client):
    data = client.get("/api/test").json()

    assert data["client_ip"] == "testclient"
