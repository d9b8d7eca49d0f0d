import json

import httpx
import pytest

from app.services import notification_service as notification_module
from app.services.notification_service import notification_service


@pytest.fixture
def configured_relay(monkeypatch):
    monkeypatch.setattr(notification_service, "api_url", "https://mail.example.com/send")
    monkeypatch.setattr(notification_service, "api_key", "test-key")
    sent = []
    real_async_client = httpx.AsyncClient

    def install(handler):
        def capture(request: httpx.Request):
            sent.append(request)
            return handler(request)

        monkeypatch.setattr(
            notification_module.httpx,
            "AsyncClient",
            lambda: real_async_client(transport=httpx.MockTransport(capture)),
        )

    return install, sent


def test_notification_requires_email(client):
    response = client.post("/api/auth/send-login-notification", json={})

    assert response.status_code == 400
    assert response.json()["message"] == "Email is required"


def test_notification_is_simulated_without_relay(client, monkeypatch):
    monkeypatch.setattr(notification_service, "api_url", None)

    response = client.post("/api/auth/send-login-notification", json={"email": "a@x.com", "browser": "Firefox"})

    assert response.status_code == 200
    data = response.json()
    assert data["simulated"] is True
    assert data["message"] == "Login notification simulated (email not configured)"
    assert data["data"]["browser"] == "Firefox"
    assert data["data"]["deviceType"] == "Unknown"
    assert data["data"]["loginType"] == "user"
    assert data["data"]["ipAddress"] == "testclient"


def test_notification_posts_to_relay(client, configured_relay):
    install, sent = configured_relay
    install(lambda request: httpx.Response(202, json={"id": "msg-1"}))

    response = client.post(
        "/api/auth/send-login-notification",
        json={"email": "admin@x.com", "loginType": "admin", "location": "<b>Pune</b>"},
    )

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Login notification sent successfully", "simulated": False}
    assert len(sent) == 1
    assert sent[0].headers["Authorization"] == "Bearer test-key"
    payload = json.loads(sent[0].content)
    assert payload["to"] == [{"email": "admin@x.com"}]
    assert payload["subject"] == "Admin Login Detected - Medicover"
    assert "&lt;b&gt;Pune&lt;/b&gt;" in payload["html"]


def test_relay_failure_does_not_fail_login(client, configured_relay):
    install, _ = configured_relay
    install(lambda request: httpx.Response(500, text="relay down"))

    response = client.post("/api/auth/send-login-notification", json={"email": "a@x.com"})

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["simulated"] is True
    assert data["message"] == "Login continued (email notification failed)"
