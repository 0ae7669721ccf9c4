"""
Tests for the key-value API endpoints.

Tests FastAPI routes end to end against a fresh in-memory store.
Validates status codes, plain-text bodies and error mapping.
"""

from fastapi.testclient import TestClient

from kvstore.infrastructure.kv.in_memory_store import InMemoryKeyValueStore


class TestSetAndGet:
    """Tests for POST /{key} and GET /{key}."""

    def test_set_then_get_returns_value(self, client: TestClient) -> None:
        response = client.post("/greeting", content="hello")
        assert response.status_code == 200
        assert response.text == ""

        response = client.get("/greeting")
        assert response.status_code == 200
        assert response.text == "hello"
        assert response.headers["content-type"].startswith("text/plain")

    def test_unknown_key_returns_404(self, client: TestClient) -> None:
        """A key that was never set yields 404 with an empty body."""
        response = client.get("/never-set")
        assert response.status_code == 404
        assert response.text == ""

    def test_last_write_wins(self, client: TestClient) -> None:
        client.post("/k", content="v1")
        client.post("/k", content="v2")
        assert client.get("/k").text == "v2"

    def test_empty_body_stores_empty_value(self, client: TestClient) -> None:
        assert client.post("/empty", content="").status_code == 200

        response = client.get("/empty")
        assert response.status_code == 200
        assert response.text == ""

    def test_body_is_stored_verbatim(self, client: TestClient) -> None:
        """The body is raw text, never parsed as JSON or form data."""
        raw = '{"not": "parsed"}\n  '
        client.post("/raw", content=raw, headers={"content-type": "application/json"})
        assert client.get("/raw").text == raw

    def test_unicode_value(self, client: TestClient) -> None:
        client.post("/word", content="naïve café".encode("utf-8"))
        assert client.get("/word").text == "naïve café"

    def test_invalid_utf8_body_returns_400(self, client: TestClient) -> None:
        response = client.post("/bad", content=b"\xff\xfe\xfd")
        assert response.status_code == 400
        assert response.text == "request body is not valid UTF-8"
        assert client.get("/bad").status_code == 404


class TestListKeys:
    """Tests for GET /keys."""

    def test_empty_store_returns_empty_body(self, client: TestClient) -> None:
        response = client.get("/keys")
        assert response.status_code == 200
        assert response.text == ""

    def test_body_contains_every_pair(self, client: TestClient) -> None:
        """Pairs are concatenated without a delimiter, in any order."""
        client.post("/a", content="1")
        client.post("/b", content="2")

        response = client.get("/keys")

        assert response.status_code == 200
        assert "a1" in response.text
        assert "b2" in response.text
        assert response.text in ("a1b2", "b2a1")


class TestStoreIsolation:
    """Each application instance owns its own store."""

    def test_fresh_app_starts_empty(self, build_app) -> None:
        first = TestClient(build_app())
        second = TestClient(build_app())

        first.post("/k", content="v")

        assert first.get("/k").status_code == 200
        assert second.get("/k").status_code == 404


class TestUnclassifiedErrors:
    """Unexpected failures are translated to 500 by the classifier."""

    def test_unexpected_error_returns_500_with_details(
        self, build_app, failing_store: InMemoryKeyValueStore
    ) -> None:
        client = TestClient(build_app(failing_store))

        response = client.get("/anything")

        assert response.status_code == 500
        assert response.text == "Unhandled internal error: disk on fire"

    def test_other_routes_keep_working_after_failure(
        self, build_app, failing_store: InMemoryKeyValueStore
    ) -> None:
        """A failed request does not affect the next one."""
        client = TestClient(build_app(failing_store))
        client.get("/anything")

        assert client.post("/k", content="v").status_code == 200
        assert client.get("/keys").text == "kv"
