import json


def test_greeting(client):
    response = client.get("/users")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.json() == {"message": "HELLO WORLD!", "method": "GET", "id": "null"}


def test_create_get_delete_flow(client, mailer):
    response = client.post("/users", content=json.dumps({"name": "Anna", "email": "anna@example.com"}))
    assert response.status_code == 201
    created = response.json()
    assert created["name"] == "Anna"
    assert [m["to"] for m in mailer.sent] == ["anna@example.com"]

    response = client.get(f"/users/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created

    response = client.delete(f"/users/{created['id']}")
    assert response.status_code == 204
    assert response.content == b""

    response = client.get(f"/users/{created['id']}")
    assert response.status_code == 404
    assert response.text == "User not found"


def test_put_changes_email(client, store, mailer):
    store.seed("u1", "Old", "a@x.com")

    response = client.put("/users/u1", content=json.dumps({"name": "Old", "email": "b@x.com"}))

    assert response.status_code == 200
    assert response.json()["email"] == "b@x.com"
    assert [m["to"] for m in mailer.sent] == ["a@x.com", "b@x.com"]


def test_put_unknown_user(client):
    response = client.put("/users/missing", content=json.dumps({"name": "A", "email": "a@x.com"}))
    assert response.status_code == 404


def test_delete_unknown_user(client):
    assert client.delete("/users/never-existed").status_code == 204


def test_patch_is_not_allowed(client):
    response = client.request("PATCH", "/users/u1", content="{}")
    assert response.status_code == 405
    assert response.text == "Method Not Allowed"


def test_invalid_body_is_500(client):
    response = client.post("/users", content="not json")
    assert response.status_code == 500
    assert response.text


def test_invalid_utf8_body_answers_through_dispatcher(client, store):
    response = client.post("/users", content=b"\xff\xfe{")

    assert response.status_code == 500
    assert response.headers["content-type"] == "application/json"
    assert "INTERNAL_ERROR" not in response.text
    assert not response.text.startswith("{")
    assert store.items == {}
