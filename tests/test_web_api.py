"""Tests for FastAPI web API.

Uses TestClient to test all endpoints.
"""

import sys
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from veg24 import __version__
from veg24.config import Settings
from veg24.store import Store
from web.app import create_app
from web.middleware import SECURITY_HEADERS


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at per-test locale and frontend directories."""
    return Settings(
        port=5000,
        locales_dir=tmp_path / "locales",
        static_dir=tmp_path / "frontend",
    )


@pytest.fixture
def store() -> Store:
    """Freshly seeded store."""
    return Store()


@pytest.fixture
def client(settings: Settings, store: Store) -> Iterator[TestClient]:
    """Create a test client; entering it runs the startup bundle write."""
    app = create_app(settings=settings, store=store)
    with TestClient(app) as test_client:
        yield test_client


class TestHealthEndpoints:
    """Tests for health and landing endpoints."""

    def test_health(self, client: TestClient) -> None:
        """Test health endpoint returns OK status."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": __version__}

    def test_landing_page(self, client: TestClient) -> None:
        """Without a frontend the built-in landing page is served."""
        response = client.get("/")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "VEG24 Backend Running Successfully!" in response.text
        assert "POST /api/auth/verify-otp" in response.text
        assert "http://localhost:5000/api/products" in response.text

    def test_security_headers(self, client: TestClient) -> None:
        """Responses should carry the security headers."""
        response = client.get("/health")
        for name, value in SECURITY_HEADERS.items():
            assert response.headers[name] == value

    def test_cors_preflight(self, client: TestClient) -> None:
        """Any origin should be allowed by default."""
        response = client.options(
            "/api/products",
            headers={
                "Origin": "http://shop.example",
                "Access-Control-Request-Method": "GET",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"


class TestStaticFiles:
    """Tests for frontend static file serving."""

    @pytest.fixture
    def frontend_client(self, settings: Settings) -> Iterator[TestClient]:
        """Client with a frontend directory containing an index and a script."""
        settings.static_dir.mkdir()
        (settings.static_dir / "index.html").write_text(
            "<html>storefront</html>", encoding="utf-8"
        )
        (settings.static_dir / "app.js").write_text("console.log('hi');")
        with TestClient(create_app(settings=settings, store=Store())) as c:
            yield c

    def test_frontend_index_replaces_landing(self, frontend_client: TestClient) -> None:
        """The frontend's index.html should be served at the root."""
        response = frontend_client.get("/")
        assert response.status_code == 200
        assert response.text == "<html>storefront</html>"

    def test_static_asset(self, frontend_client: TestClient) -> None:
        """Assets should be served from the frontend directory."""
        response = frontend_client.get("/app.js")
        assert response.status_code == 200
        assert "console.log" in response.text

    def test_api_takes_precedence(self, frontend_client: TestClient) -> None:
        """API routes should not be shadowed by the static mount."""
        response = frontend_client.get("/api/admin/dashboard")
        assert response.status_code == 200
        assert response.json()["success"] is True

    def test_missing_asset(self, frontend_client: TestClient) -> None:
        """Unknown files should 404."""
        assert frontend_client.get("/missing.css").status_code == 404


class TestConfigEndpoints:
    """Tests for configuration endpoints."""

    def test_get_config(self, client: TestClient, settings: Settings) -> None:
        """Test getting configuration."""
        response = client.get("/config")
        assert response.status_code == 200
        data = response.json()
        assert data["port"] == 5000
        assert data["locales_dir"] == str(settings.locales_dir)
        assert data["supported_locales"] == ["en", "hi", "kn", "mr"]
        assert "demo_otp" not in data


class TestTranslationEndpoints:
    """Tests for translation endpoints."""

    def test_bundles_written_on_startup(
        self, client: TestClient, settings: Settings
    ) -> None:
        """Startup should write a bundle per locale."""
        for lang in ("en", "hi", "kn", "mr"):
            assert (settings.locales_dir / lang / "translation.json").is_file()

    def test_get_translations(self, client: TestClient) -> None:
        """Known locales should return their bundle."""
        response = client.get("/api/translations/hi")
        assert response.status_code == 200
        data = response.json()
        assert data["products"] == "उत्पाद"
        assert set(data) == {
            "welcome",
            "products",
            "add_to_cart",
            "daily_fresh",
            "organic",
        }

    def test_unknown_language(self, client: TestClient) -> None:
        """Unknown locales should return an error payload."""
        response = client.get("/api/translations/fr")
        assert response.status_code == 404
        assert response.json() == {"error": "Language not found"}

    def test_path_traversal_rejected(self, client: TestClient) -> None:
        """Encoded traversal attempts should not escape the locales directory."""
        response = client.get("/api/translations/..%2F..%2Fetc")
        assert response.status_code == 404


class TestProductEndpoints:
    """Tests for product endpoints."""

    def test_list_products_default_locale(self, client: TestClient) -> None:
        """Without locale hints names should be English."""
        response = client.get("/api/products")
        assert response.status_code == 200
        data = response.json()
        assert len(data) == 2
        assert data[0] == {
            "id": 1,
            "name": "Tomato",
            "price": 40,
            "stock": 100,
            "tags": ["daily-fresh", "organic"],
            "image": "https://via.placeholder.com/300x200/FF6B6B/FFFFFF?text=Tomato",
        }

    def test_locale_from_query(self, client: TestClient) -> None:
        """The lng query parameter should select the locale."""
        data = client.get("/api/products", params={"lng": "hi"}).json()
        assert [p["name"] for p in data] == ["टमाटर", "आलू"]

    def test_locale_from_header(self, client: TestClient) -> None:
        """Accept-Language should select the locale."""
        data = client.get(
            "/api/products", headers={"Accept-Language": "kn-IN,kn;q=0.9,en;q=0.8"}
        ).json()
        assert data[1]["name"] == "ಆಲೂಗಡ್ಡೆ"

    def test_locale_from_cookie(self, client: TestClient) -> None:
        """The i18next cookie should select the locale."""
        data = client.get("/api/products", headers={"Cookie": "i18next=mr"}).json()
        assert data[0]["name"] == "टोमॅटो"

    def test_unsupported_locale_falls_back(self, client: TestClient) -> None:
        """Unsupported locales should fall back to English."""
        data = client.get("/api/products", params={"lng": "fr"}).json()
        assert data[0]["name"] == "Tomato"


class TestAuthEndpoints:
    """Tests for the demo OTP endpoints."""

    def test_send_otp(self, client: TestClient) -> None:
        """A valid phone should receive the demo code."""
        response = client.post("/api/auth/send-otp", json={"phone": "9876543210"})
        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "OTP sent successfully",
            "demo_otp": "123456",
            "expiresIn": 120,
        }

    @pytest.mark.parametrize("body", [{}, {"phone": ""}, {"phone": "12345"}])
    def test_send_otp_invalid_phone(self, client: TestClient, body: dict) -> None:
        """Missing or wrong-length phones should be rejected."""
        response = client.post("/api/auth/send-otp", json=body)
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Invalid phone number",
        }

    def test_send_otp_malformed_body(self, client: TestClient) -> None:
        """A non-string phone should be rejected with the error payload."""
        response = client.post("/api/auth/send-otp", json={"phone": 9876543210})
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Invalid request body",
        }

    def test_send_otp_no_body(self, client: TestClient) -> None:
        """A request without a body should be rejected."""
        response = client.post("/api/auth/send-otp")
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Invalid request body",
        }

    @pytest.mark.parametrize(
        "path", ["/api/auth/send-otp", "/api/auth/verify-otp"]
    )
    def test_non_json_body(self, client: TestClient, store: Store, path: str) -> None:
        """A body that is not valid JSON should get the error payload."""
        response = client.post(
            path,
            content=b"not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Invalid request body",
        }
        assert store.users == []

    def test_verify_otp(self, client: TestClient, store: Store) -> None:
        """The demo code should register exactly one user."""
        response = client.post(
            "/api/auth/verify-otp", json={"phone": "9876543210", "otp": "123456"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["token"].startswith("demo-token-")
        assert data["user"] == {"id": 1, "phone": "9876543210", "name": "User3210"}
        assert len(store.users) == 1

    def test_verify_otp_twice(self, client: TestClient, store: Store) -> None:
        """The same phone verified twice should get a new user each time."""
        body = {"phone": "9876543210", "otp": "123456"}
        client.post("/api/auth/verify-otp", json=body)
        second = client.post("/api/auth/verify-otp", json=body).json()
        assert second["user"]["id"] == 2
        assert len(store.users) == 2

    def test_verify_otp_missing_fields(self, client: TestClient, store: Store) -> None:
        """Phone and code are both required."""
        response = client.post("/api/auth/verify-otp", json={"phone": "9876543210"})
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Phone and OTP required",
        }
        assert store.users == []

    def test_verify_otp_wrong_code(self, client: TestClient, store: Store) -> None:
        """A wrong code should be rejected without creating a user."""
        response = client.post(
            "/api/auth/verify-otp", json={"phone": "9876543210", "otp": "111111"}
        )
        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Invalid OTP"}
        assert store.users == []


    def test_concurrent_verify_ids_unique(
        self, client: TestClient, store: Store
    ) -> None:
        """Concurrent verifications should never share a user id."""
        previous = sys.getswitchinterval()
        sys.setswitchinterval(1e-6)
        try:

            def verify(i: int) -> int:
                response = client.post(
                    "/api/auth/verify-otp",
                    json={"phone": f"98765{i:05d}", "otp": "123456"},
                )
                assert response.status_code == 200
                user_id: int = response.json()["user"]["id"]
                return user_id

            with ThreadPoolExecutor(max_workers=16) as pool:
                ids = list(pool.map(verify, range(200)))
        finally:
            sys.setswitchinterval(previous)

        assert sorted(ids) == list(range(1, 201))
        stored = [u.id for u in store.users]
        assert len(set(stored)) == len(stored) == 200

class TestAdminEndpoints:
    """Tests for admin endpoints."""

    def test_dashboard(self, client: TestClient) -> None:
        """The dashboard should return the demo statistics."""
        response = client.get("/api/admin/dashboard")
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["stats"]["revenue"]["today"] == 12500
        assert data["stats"]["orders"]["pending"] == 12
        assert data["stats"]["customers"]["new"] == 15
        assert data["stats"]["products"] == {"total": 2, "lowStock": 2}

    def test_dashboard_tracks_store(self, settings: Settings) -> None:
        """The product total should follow the injected catalog."""
        store = Store()
        store.products = store.products[:1]
        with TestClient(create_app(settings=settings, store=store)) as c:
            data = c.get("/api/admin/dashboard").json()
        assert data["stats"]["products"]["total"] == 1
