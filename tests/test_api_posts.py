from pghub.dependencies import get_post_service
from pghub.exceptions import DatabaseError
from pghub.main import app


def _payload(*file_names, title="Room to let", content="Bright room, close to campus."):
    return {
        "title": title,
        "content": content,
        "attachments": [{"file_name": name} for name in file_names],
    }


def test_create_post_returns_201_with_location(client):
    response = client.post("/api/posts", json=_payload("a.jpg", "b.jpg"))

    assert response.status_code == 201
    body = response.json()
    assert response.headers["location"].endswith(f"/api/posts/{body['id']}")
    assert [a["file_name"] for a in body["attachments"]] == ["a.jpg", "b.jpg"]
    assert all(a["id"] for a in body["attachments"])


def test_get_post_round_trip(client):
    created = client.post("/api/posts", json=_payload("a.jpg")).json()

    response = client.get(f"/api/posts/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


def test_get_unknown_post_is_404(client):
    assert client.get("/api/posts/missing").status_code == 404


def test_list_posts(client):
    for i in range(3):
        client.post("/api/posts", json=_payload(title=f"Post {i}"))

    assert len(client.get("/api/posts").json()) == 3
    assert len(client.get("/api/posts", params={"page_number": 2, "page_size": 2}).json()) == 1


def test_list_posts_rejects_bad_paging(client):
    assert client.get("/api/posts", params={"page_number": 0}).status_code == 422
    assert client.get("/api/posts", params={"page_size": 1000}).status_code == 422


def test_update_replaces_attachments(client):
    created = client.post("/api/posts", json=_payload("a.jpg", "b.jpg", "c.jpg")).json()

    response = client.put(f"/api/posts/{created['id']}", json=_payload("d.jpg", title="Updated"))

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Updated"
    assert [a["file_name"] for a in body["attachments"]] == ["d.jpg"]
    assert client.get(f"/api/posts/{created['id']}").json()["attachments"] == body["attachments"]


def test_update_unknown_post_is_404(client):
    assert client.put("/api/posts/missing", json=_payload()).status_code == 404


def test_create_invalid_post_lists_every_violation(client):
    response = client.post("/api/posts", json=_payload("", title="", content=""))

    assert response.status_code == 400
    errors = response.json()["detail"]["errors"]
    assert {e["field"] for e in errors} == {"title", "content", "attachments[0].file_name"}
    assert client.get("/api/posts").json() == []


def test_delete_post(client):
    created = client.post("/api/posts", json=_payload("a.jpg")).json()

    assert client.delete(f"/api/posts/{created['id']}").status_code == 204
    assert client.get(f"/api/posts/{created['id']}").status_code == 404
    assert client.delete(f"/api/posts/{created['id']}").status_code == 404


class _FailingPostService:
    def delete(self, post_id):
        raise DatabaseError("deleting the post", "disk I/O error")


def test_delete_failure_is_500_with_generic_message(client):
    app.dependency_overrides[get_post_service] = lambda: _FailingPostService()

    response = client.delete("/api/posts/some-id")

    assert response.status_code == 500
    assert response.json() == {"detail": "An error occurred while deleting the post."}


def test_health(client):
    assert client.get("/api/health").json()["status"] == "healthy"
