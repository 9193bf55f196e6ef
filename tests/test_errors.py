from fastapi.testclient import TestClient
from app.main import app

client = TestClient(app, raise_server_exceptions=False)

def test_404_not_found():
    response = client.get("/non-existent-route")
    assert response.status_code == 404
    data = response.json()
    assert "error" in data
    assert "code" in data
    assert data["code"] == "HTTP_ERROR"

def test_users_route_without_startup():
    # Lifespan has not run, so no dispatcher was built
    response = client.get("/users/u1")
    assert response.status_code == 500
    data = response.json()
    assert data["code"] == "INTERNAL_ERROR"
    assert "Dispatcher not initialized" in data["error"]

def test_live():
    response = client.get("/live")
    assert response.status_code == 200
    assert response.json() == {"status": "alive"}

def test_health_without_database():
    # Lifespan has not run, so there is no Mongo client
    response = client.get("/health")
    assert response.status_code == 503
    data = response.json()
    assert data["status"] == "unhealthy"
    assert data["checks"]["database"] == "unhealthy"

def test_exception_status_codes():
    from app.core.exceptions import ResourceNotFoundError, MethodNotAllowedError, MissingMethodError

    assert ResourceNotFoundError().status_code == 404
    assert ResourceNotFoundError().message == "User not found"
    assert MethodNotAllowedError().status_code == 405
    assert MethodNotAllowedError().message == "Method Not Allowed"
    assert MissingMethodError().status_code == 500
    assert MissingMethodError().message == "no method"
