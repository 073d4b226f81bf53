def _payload(email="jane@example.com", first_name="Jane", last_name="Doe"):
    return {"email": email, "first_name": first_name, "last_name": last_name}


def test_create_user_normalizes_email(client):
    response = client.post("/api/users", json=_payload(email="Foo@Example.com"))

    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "foo@example.com"
    assert response.headers["location"].endswith(f"/api/users/{body['id']}")
    assert client.get(f"/api/users/{body['id']}").json()["email"] == "foo@example.com"


def test_create_user_with_empty_email_is_400(client):
    response = client.post("/api/users", json=_payload(email=""))

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["message"] == "One or more validation errors occurred."
    assert {"field": "email", "message": "Email is required."} in detail["errors"]
    assert client.get("/api/users").json() == []


def test_create_user_with_bad_domain_is_400(client):
    response = client.post("/api/users", json=_payload(email="foo@example"))

    assert response.status_code == 400
    messages = [e["message"] for e in response.json()["detail"]["errors"]]
    assert "Email must have a valid domain (e.g., .com, .ro, etc.)." in messages


def test_duplicate_email_is_409(client):
    client.post("/api/users", json=_payload(email="foo@example.com"))

    response = client.post("/api/users", json=_payload(email="FOO@example.com"))

    assert response.status_code == 409


def test_update_user(client):
    created = client.post("/api/users", json=_payload()).json()

    response = client.put(f"/api/users/{created['id']}", json=_payload(first_name="Janet"))

    assert response.status_code == 200
    assert response.json()["first_name"] == "Janet"


def test_update_unknown_user_is_404(client):
    assert client.put("/api/users/missing", json=_payload()).status_code == 404


def test_delete_user(client):
    created = client.post("/api/users", json=_payload()).json()

    assert client.delete(f"/api/users/{created['id']}").status_code == 204
    assert client.delete(f"/api/users/{created['id']}").status_code == 404
    assert client.get(f"/api/users/{created['id']}").status_code == 404


def test_update_unknown_user_with_taken_email_is_404(client):
    client.post("/api/users", json=_payload(email="taken@example.com"))

    response = client.put("/api/users/missing", json=_payload(email="taken@example.com"))

    assert response.status_code == 404
