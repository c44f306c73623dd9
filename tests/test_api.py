"""Tests for the template HTTP endpoints."""

from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient

from template_duplicator.domain.themes import ShopSession
from template_duplicator.infrastructure.shopify import ShopifyThemeStore
from template_duplicator.interfaces.http.deps import get_template_service
from template_duplicator.main import app
from template_duplicator.modules.templates import TemplateAssetService

from .conftest import MAIN_THEME_ID, FakeThemeStore, SequenceRandom, make_assets


@pytest.fixture
def store() -> FakeThemeStore:
    return FakeThemeStore(
        assets=make_assets(
            "templates/index.liquid",
            "templates/product.liquid",
            "templates/product.ABCDEFGHIJ.liquid",
            "templates/collection.liquid",
            "config/settings_data.json",
        )
    )


@pytest.fixture
def client(store):
    randomness = SequenceRandom("ABCDEFGHIJ" + "QRSTUVWXYZ")
    app.dependency_overrides[get_template_service] = lambda: TemplateAssetService(store, randomness=randomness)
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_list_categories(client) -> None:
    response = client.get("/api/templates/categories")

    assert response.status_code == 200
    assert response.json()["categories"][0] == {
        "id": "home",
        "label": "Home Pages",
        "panel_id": "home-content",
    }


def test_list_main_theme_templates_home(client) -> None:
    response = client.get("/api/templates", params={"category": "home"})

    assert response.status_code == 200
    body = response.json()
    assert body["theme_id"] == MAIN_THEME_ID
    assert body["category"] == "home"
    assert [item["key"] for item in body["data"]] == ["templates/index.liquid"]


def test_list_main_theme_templates_all(client) -> None:
    response = client.get("/api/templates")

    body = response.json()
    assert body["category"] == "all"
    assert body["total"] == 4


def test_list_theme_templates_by_tab_index(client, store) -> None:
    response = client.get("/api/themes/222/templates", params={"category": "2"})

    assert response.status_code == 200
    assert response.json()["category"] == "product"
    assert response.json()["total"] == 2
    assert store.list_asset_calls == ["222"]


def test_duplicate_template(client, store) -> None:
    response = client.post(
        "/api/templates/duplicate",
        json={"source_key": "templates/product.liquid", "theme_id": MAIN_THEME_ID},
    )

    assert response.status_code == 201
    assert response.json() == {
        "status": "success",
        "new_key": "templates/product.QRSTUVWXYZ.liquid",
        "source_key": "templates/product.liquid",
        "theme_id": MAIN_THEME_ID,
        "category": "product",
    }
    assert store.created[0]["key"] == "templates/product.QRSTUVWXYZ.liquid"


def test_duplicate_template_accepts_numeric_theme_id(client, store) -> None:
    response = client.post(
        "/api/templates/duplicate",
        json={"source_key": "templates/index.liquid", "theme_id": 111},
    )

    assert response.status_code == 201
    assert store.created[0]["theme_id"] == "111"


def test_duplicate_template_empty_source_key(client, store) -> None:
    response = client.post(
        "/api/templates/duplicate",
        json={"source_key": "", "theme_id": MAIN_THEME_ID},
    )

    assert response.status_code == 400
    assert "error" in response.json()
    assert store.list_asset_calls == []
    assert store.created == []


def test_listing_failure_returns_generic_error(client, store) -> None:
    store.fail_assets = True

    response = client.get("/api/templates", params={"category": "product"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch"}


def test_duplicate_listing_failure_returns_generic_error(client, store) -> None:
    store.fail_assets = True

    response = client.post(
        "/api/templates/duplicate",
        json={"source_key": "templates/product.liquid", "theme_id": MAIN_THEME_ID},
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch"}
    assert store.created == []


def test_create_failure_hides_upstream_detail(client, store) -> None:
    store.fail_create = True

    response = client.post(
        "/api/templates/duplicate",
        json={"source_key": "templates/product.liquid", "theme_id": MAIN_THEME_ID},
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to duplicate"}


def test_duplicate_template_rejects_non_string_source_key(client, store) -> None:
    response = client.post(
        "/api/templates/duplicate",
        json={"source_key": ["templates/product.liquid"], "theme_id": MAIN_THEME_ID},
    )

    assert response.status_code == 400
    assert list(response.json()) == ["error"]
    assert response.json()["error"].startswith("source_key")
    assert store.created == []


def test_duplicate_template_rejects_non_json_body(client, store) -> None:
    response = client.post(
        "/api/templates/duplicate",
        content=b"not json",
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 400
    assert list(response.json()) == ["error"]
    assert store.list_asset_calls == []


def test_malformed_theme_id_reaches_no_shopify_path() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"assets": []})

    shopify = ShopifyThemeStore(
        ShopSession(shop_domain="example.myshopify.com", access_token="shpat_test"),
        transport=httpx.MockTransport(handler),
    )
    app.dependency_overrides[get_template_service] = lambda: TemplateAssetService(shopify)
    try:
        client = TestClient(app)
        for theme_id in ["1\u0000", "1/../../shop"]:
            response = client.post(
                "/api/templates/duplicate",
                json={"source_key": "templates/product.liquid", "theme_id": theme_id},
            )

            assert response.status_code == 500
            assert response.json() == {"error": "Failed to fetch"}
    finally:
        app.dependency_overrides.clear()
    assert requests == []
