"""Integration tests for catalogue endpoints via TestClient."""

import pytest


@pytest.fixture
def admin_headers(make_admin, bearer):
    return bearer(make_admin(), role="admin")


def _new_product(api, headers, **overrides):
    body = {
        "name": "Kiaat Headboard",
        "price": 4500,
        "category": "headboards",
        "material": "Kiaat",
        "gallery_images": ["https://cdn.example.com/kiaat.jpg"],
    }
    body.update(overrides)
    response = api.post("/api/admin/products", json=body, headers=headers)
    assert response.status_code == 201
    return response.json()["product_id"]


class TestPublicCatalogue:
    def test_list_products(self, api, make_product):
        make_product(name="Kiaat Headboard", category="headboards")
        make_product(name="Oak Table", category="tables")

        response = api.get("/api/products", params={"category": "tables"})
        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["Oak Table"]

    def test_unknown_category_filter_returns_422(self, api):
        assert api.get("/api/products", params={"category": "beds"}).status_code == 422

    def test_get_product(self, api, make_product):
        product_id = make_product(name="Kiaat Headboard", price=4500)
        response = api.get(f"/api/products/{product_id}")
        assert response.status_code == 200
        assert response.json()["price"] == 4500.0

    def test_get_missing_product_returns_404(self, api):
        assert api.get("/api/products/does-not-exist").status_code == 404


class TestAdminCatalogue:
    def test_requires_credential(self, api):
        assert api.get("/api/admin/products").status_code == 401

    def test_requires_admin_role(self, api, bearer, make_customer):
        response = api.post(
            "/api/admin/products",
            json={"name": "X", "price": 1, "category": "custom"},
            headers=bearer(make_customer()),
        )
        assert response.status_code == 403

    def test_create_product(self, api, admin_headers):
        product_id = _new_product(api, admin_headers)
        response = api.get(f"/api/products/{product_id}")
        assert response.json()["gallery_images"] == ["https://cdn.example.com/kiaat.jpg"]

    def test_update_product(self, api, admin_headers):
        product_id = _new_product(api, admin_headers)
        response = api.put(f"/api/admin/products/{product_id}", json={"price": 4999.99}, headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["price"] == 4999.99
        assert response.json()["material"] == "Kiaat"

    def test_deactivate_hides_product(self, api, admin_headers):
        product_id = _new_product(api, admin_headers)
        response = api.put(f"/api/admin/products/{product_id}/deactivate", headers=admin_headers)
        assert response.status_code == 200

        assert api.get(f"/api/products/{product_id}").status_code == 404
        admin_view = api.get("/api/admin/products", headers=admin_headers).json()
        assert admin_view[0]["active"] is False

    def test_activate_product(self, api, admin_headers):
        product_id = _new_product(api, admin_headers)
        api.put(f"/api/admin/products/{product_id}/deactivate", headers=admin_headers)
        response = api.put(f"/api/admin/products/{product_id}/activate", headers=admin_headers)
        assert response.status_code == 200
        assert api.get(f"/api/products/{product_id}").status_code == 200

    def test_deactivate_twice_returns_400(self, api, admin_headers):
        product_id = _new_product(api, admin_headers)
        api.put(f"/api/admin/products/{product_id}/deactivate", headers=admin_headers)
        response = api.put(f"/api/admin/products/{product_id}/deactivate", headers=admin_headers)
        assert response.status_code == 400
