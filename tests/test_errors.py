from fastapi.testclient import TestClient
from app.main import app

client = TestClient(app)

def test_404_not_found():
    response = client.get("/non-existent-route")
    assert response.status_code == 404
    data = response.json()
    assert data["success"] is False
    assert data["message"] == "Route not found"
    assert data["code"] == "HTTP_ERROR"
    assert data["details"] == {"path": "/non-existent-route", "method": "GET"}

def test_405_keeps_envelope():
    response = client.get("/api/auth/logout")
    assert response.status_code == 405
    data = response.json()
    assert data["success"] is False
    assert data["code"] == "HTTP_ERROR"

def test_validation_error_structure():
    # Temporary route with a strictly typed body
    from pydantic import BaseModel

    class Item(BaseModel):
        name: str
        price: int

    @app.post("/test-validation")
    def create_item(item: Item):
        return item

    response = client.post("/test-validation", json={"name": "foo", "price": "invalid"})
    assert response.status_code == 400
    data = response.json()
    assert data["success"] is False
    assert data["code"] == "VALIDATION_ERROR"
    assert len(data["details"]) > 0
    assert data["details"][0]["loc"] == ["body", "price"]

def test_custom_exceptions_map_to_status_codes():
    from app.core.exceptions import AuthError, ConflictError, NotFoundError, ValidationError

    cases = {
        "/test-error/validation": (ValidationError("Email is required"), 400, "VALIDATION_ERROR"),
        "/test-error/conflict": (ConflictError("Email already in use"), 400, "CONFLICT"),
        "/test-error/auth": (AuthError("Invalid credentials"), 401, "AUTHENTICATION_FAILED"),
        "/test-error/not-found": (NotFoundError("User not found"), 404, "NOT_FOUND"),
    }

    def raiser(error):
        def trigger():
            raise error
        return trigger

    for path, (error, _, _) in cases.items():
        app.add_api_route(path, raiser(error), methods=["GET"])

    for path, (error, status_code, code) in cases.items():
        response = client.get(path)
        assert response.status_code == status_code
        data = response.json()
        assert data == {"success": False, "message": error.message, "code": code, "details": None}

def test_unexpected_exception_returns_500_envelope():
    @app.get("/test-crash")
    def crash():
        raise RuntimeError("boom")

    crash_client = TestClient(app, raise_server_exceptions=False)
    response = crash_client.get("/test-crash")
    assert response.status_code == 500
    data = response.json()
    assert data["success"] is False
    assert data["code"] == "INTERNAL_ERROR"
    # development posture echoes the message
    assert data["message"] == "boom"
