"""Integration tests for the admin dashboard endpoint via TestClient."""


class TestDashboardEndpoint:
    def test_requires_credential(self, api):
        assert api.get("/api/admin/dashboard").status_code == 401

    def test_requires_admin(self, api, bearer, make_customer):
        assert api.get("/api/admin/dashboard", headers=bearer(make_customer())).status_code == 403

    def test_returns_stats(self, api, bearer, make_admin, make_customer, make_product):
        make_customer()
        make_product()
        headers = bearer(make_admin(), role="admin")

        response = api.get("/api/admin/dashboard", headers=headers)
        assert response.status_code == 200
        assert response.json() == {
            "total_orders": 0,
            "total_revenue": 0.0,
            "total_products": 1,
            "total_customers": 1,
            "orders_by_status": {},
        }
