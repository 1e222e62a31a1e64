"""
Integration tests for API endpoints.
"""

import json

import pytest

from postboard.errors import Unauthorized


class TestHealthEndpoint:
    """Test health check endpoint."""

    def test_health_endpoint_returns_ok(self, client):
        """Test that health endpoint returns 200 OK."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.get_json()
        assert data["status"] == "healthy"
        assert "timestamp" in data
        assert data["posts"] == 3

    def test_health_endpoint_includes_version(self, client):
        """Test that health endpoint includes version info."""
        data = client.get("/health").get_json()

        assert data["version"] == "1.0.0"
        assert data["service"] == "Postboard"

    def test_liveness(self, client):
        assert client.get("/health/live").get_json() == {"status": "alive"}


class TestMetricsEndpoint:
    """Test metrics endpoints."""

    def test_metrics_endpoint_returns_json(self, client):
        response = client.get("/metrics")

        assert response.status_code == 200
        assert response.content_type == "application/json"
        assert response.get_json()["posts"]["total"] == 3

    def test_prometheus_metrics(self, client):
        client.get("/api/posts")
        response = client.get("/metrics/prometheus")

        assert response.status_code == 200
        body = response.get_data(as_text=True)
        assert "http_requests_total" in body
        assert "posts_total 3.0" in body


class TestListAndGetPosts:
    """Public read routes."""

    def test_list_posts(self, client):
        response = client.get("/api/posts")

        assert response.status_code == 200
        posts = response.get_json()
        assert [p["id"] for p in posts] == ["1", "2", "3"]

    def test_post_fields(self, client):
        post = client.get("/api/posts").get_json()[0]

        assert set(post) == {
            "id", "title", "content", "excerpt", "author",
            "createdAt", "readTime", "tags", "imageUrl",
        }
        assert post["createdAt"] == "2023-09-15T10:30:00.000Z"
        assert post["readTime"] == 5
        assert post["tags"] == ["React", "Next.js", "Web Development"]

    def test_get_post(self, client):
        response = client.get("/api/posts/3")

        assert response.status_code == 200
        assert response.get_json()["title"] == "The Future of AI in Web Development"

    def test_get_missing_post(self, client):
        response = client.get("/api/posts/nope")

        assert response.status_code == 404
        data = response.get_json()
        assert data["error"] == "not_found"
        assert data["message"] == "Post not found"


class TestCreatePost:
    """POST /api/posts."""

    def test_create_requires_session(self, client, store):
        response = client.post("/api/posts", json={"topic": "Rust"})

        assert response.status_code == 401
        assert response.get_json() == Unauthorized().to_dict()
        assert response.get_json() == {"error": "unauthorized", "message": "Authentication required"}
        assert len(store) == 3

    def test_create_with_invalid_token(self, client, store):
        response = client.post(
            "/api/posts", json={"topic": "Rust"}, headers={"Authorization": "Bearer forged.token.value"}
        )

        assert response.status_code == 401
        assert len(store) == 3

    def test_create_with_expired_token(self, client, store, expired_token):
        response = client.post(
            "/api/posts", json={"topic": "Rust"}, headers={"Authorization": f"Bearer {expired_token}"}
        )

        assert response.status_code == 401
        assert len(store) == 3

    def test_create_post(self, client, auth_headers):
        response = client.post("/api/posts", data=json.dumps({"topic": "Rust"}), headers=auth_headers)

        assert response.status_code == 200
        post = response.get_json()
        assert post["title"].startswith("Rust ")
        assert post["tags"][0] == "Rust"
        assert post["author"] == "DemoUser"
        assert 3 <= post["readTime"] <= 12
        assert post["createdAt"].endswith("Z")

        listed = client.get("/api/posts").get_json()
        assert len(listed) == 4
        assert listed[0]["id"] == post["id"]

    @pytest.mark.parametrize("body", [{}, {"topic": ""}, {"topic": "   "}, {"topic": None}, {"topic": 5}])
    def test_create_rejects_missing_topic(self, client, auth_headers, store, body):
        response = client.post("/api/posts", json=body, headers=auth_headers)

        assert response.status_code == 400
        assert response.get_json()["message"] == "Topic is required"
        assert len(store) == 3

    def test_create_rejects_non_json_body(self, client, session_token, store):
        response = client.post(
            "/api/posts",
            data="topic=Rust",
            headers={"Authorization": f"Bearer {session_token}", "Content-Type": "application/x-www-form-urlencoded"},
        )

        assert response.status_code == 400
        assert len(store) == 3


class TestDeletePost:
    """DELETE /api/posts?id=..."""

    def test_delete_requires_session(self, client, store):
        response = client.delete("/api/posts?id=1")

        assert response.status_code == 401
        assert len(store) == 3

    def test_delete_post(self, client, auth_headers):
        response = client.delete("/api/posts?id=2", headers=auth_headers)

        assert response.status_code == 200
        assert response.get_json() == {"success": True}
        assert client.get("/api/posts/2").status_code == 404

    def test_delete_missing_id(self, client, auth_headers):
        response = client.delete("/api/posts", headers=auth_headers)

        assert response.status_code == 400
        assert response.get_json()["message"] == "Post ID is required"

    def test_delete_id_must_match_exactly(self, client, auth_headers, store):
        response = client.delete("/api/posts?id=%201%20", headers=auth_headers)

        assert response.status_code == 404
        assert len(store) == 3
        assert client.get("/api/posts/1").status_code == 200

    def test_delete_unknown_id(self, client, auth_headers, store):
        response = client.delete("/api/posts?id=missing", headers=auth_headers)

        assert response.status_code == 404
        assert len(store) == 3


class TestLifecycle:
    """Seed of 3, insert, fetch, delete, back to 3."""

    def test_full_lifecycle(self, client, auth_headers):
        created = client.post("/api/posts", json={"topic": "Rust"}, headers=auth_headers).get_json()

        listed = client.get("/api/posts").get_json()
        assert len(listed) == 4
        assert listed[0] == created

        assert client.get(f"/api/posts/{created['id']}").get_json() == created

        deleted = client.delete(f"/api/posts?id={created['id']}", headers=auth_headers)
        assert deleted.get_json() == {"success": True}
        assert len(client.get("/api/posts").get_json()) == 3


class TestGateCoverage:
    """Session Gate applies to the whole API namespace."""

    def test_unknown_api_write_rejected_before_routing(self, client):
        response = client.put("/api/anything")

        assert response.status_code == 401
        assert response.get_json() == Unauthorized().to_dict()

    def test_unknown_api_write_with_session_is_not_found(self, client, auth_headers):
        assert client.put("/api/anything", headers=auth_headers).status_code == 404

    def test_method_not_allowed(self, client, auth_headers):
        response = client.put("/api/posts", headers=auth_headers)

        assert response.status_code == 405
        assert response.get_json()["error"] == "method_not_allowed"

    def test_request_id_echoed(self, client):
        response = client.get("/api/posts", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"

    def test_request_id_generated(self, client):
        assert client.get("/api/posts").headers.get("X-Request-ID")


class TestUnexpectedErrors:
    def test_internal_error_is_json(self, app, client, store, monkeypatch):
        app.config["PROPAGATE_EXCEPTIONS"] = False

        def _boom():
            raise RuntimeError("store exploded")

        monkeypatch.setattr(store, "list", _boom)
        response = client.get("/api/posts")

        assert response.status_code == 500
        assert response.get_json() == {"error": "internal_error", "message": "An unexpected error occurred"}
