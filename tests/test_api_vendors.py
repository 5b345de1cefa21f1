"""Public vendor directory and owner-only profile updates."""

from tests.helpers import OTHER_VENDOR_PAYLOAD, VENDOR_PAYLOAD, rating_payload, register


class TestVendorDirectory:

    def test_list_newest_first_without_credentials(self, client, other_client):
        first = register(client)
        second = register(other_client, OTHER_VENDOR_PAYLOAD)

        resp = client.get("/api/vendors")
        assert resp.status_code == 200
        data = resp.json()
        assert [v["id"] for v in data] == [second["id"], first["id"]]
        assert all("passwordHash" not in v for v in data)

    def test_filter_by_category_and_search(self, client, other_client):
        register(client)
        electrician = register(other_client, OTHER_VENDOR_PAYLOAD)

        by_category = client.get("/api/vendors", params={"category": "Electrician"}).json()
        assert [v["id"] for v in by_category] == [electrician["id"]]

        by_search = client.get("/api/vendors", params={"search": "kulkarni"}).json()
        assert [v["id"] for v in by_search] == [electrician["id"]]

    def test_unknown_category_filter_is_400(self, client):
        assert client.get("/api/vendors", params={"category": "Astrologer"}).status_code == 400

    def test_get_vendor(self, client):
        vendor = register(client)
        resp = client.get(f"/api/vendors/{vendor['id']}")
        assert resp.status_code == 200
        assert resp.json()["email"] == vendor["email"]
        assert "passwordHash" not in resp.json()

    def test_get_missing_vendor_is_404(self, client):
        resp = client.get("/api/vendors/does-not-exist")
        assert resp.status_code == 404
        assert resp.json()["message"] == "Vendor not found"

    def test_vendor_products_and_ratings_lists(self, client, other_client):
        vendor = register(client)
        client.post("/api/products", json={"vendorId": vendor["id"], "name": "Tiles"})
        other_client.post("/api/ratings", json=rating_payload(vendor["id"], 4))

        products = client.get(f"/api/vendors/{vendor['id']}/products").json()
        ratings = client.get(f"/api/vendors/{vendor['id']}/ratings").json()
        assert [p["name"] for p in products] == ["Tiles"]
        assert [r["rating"] for r in ratings] == [4]

    def test_lists_for_unknown_vendor_are_empty(self, client):
        assert client.get("/api/vendors/nope/products").json() == []
        assert client.get("/api/vendors/nope/ratings").json() == []

    def test_categories(self, client):
        categories = client.get("/api/categories").json()
        assert "Contractor" in categories
        assert "Interior Designer" in categories
        assert len(categories) == 9


class TestVendorUpdate:

    def test_owner_can_update_profile(self, client):
        vendor = register(client)
        resp = client.patch(f"/api/vendors/{vendor['id']}", json={"city": "Nagpur", "logoUrl": "/logos/s.png"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["city"] == "Nagpur"
        assert data["logoUrl"] == "/logos/s.png"
        assert data["vendorName"] == vendor["vendorName"]

    def test_derived_fields_are_ignored(self, client, other_client):
        vendor = register(client)
        other_client.post("/api/ratings", json=rating_payload(vendor["id"], 2))

        resp = client.patch(
            f"/api/vendors/{vendor['id']}",
            json={"avgRating": 5, "totalReviews": 99, "passwordHash": "x", "description": "Updated"},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["description"] == "Updated"
        assert data["avgRating"] == 2.0
        assert data["totalReviews"] == 1

        stored = client.get(f"/api/vendors/{vendor['id']}").json()
        assert stored["avgRating"] == 2.0
        assert stored["totalReviews"] == 1

    def test_update_requires_session(self, client, other_client):
        vendor = register(client)
        resp = other_client.patch(f"/api/vendors/{vendor['id']}", json={"city": "Goa"})
        assert resp.status_code == 401

    def test_update_other_vendor_is_forbidden(self, client, other_client):
        vendor = register(client)
        register(other_client, OTHER_VENDOR_PAYLOAD)
        resp = other_client.patch(f"/api/vendors/{vendor['id']}", json={"city": "Goa"})
        assert resp.status_code == 403
        assert client.get(f"/api/vendors/{vendor['id']}").json()["city"] == "Pune"

    def test_invalid_update_is_400(self, client):
        vendor = register(client)
        assert client.patch(f"/api/vendors/{vendor['id']}", json={"email": "nope"}).status_code == 400
        assert client.patch(f"/api/vendors/{vendor['id']}", json={"vendorName": None}).status_code == 400
        assert client.patch(f"/api/vendors/{vendor['id']}", json={"businessCategory": "Wizard"}).status_code == 400

    def test_update_to_taken_email_is_400(self, client, other_client):
        register(client)
        other = register(other_client, OTHER_VENDOR_PAYLOAD)
        resp = other_client.patch(f"/api/vendors/{other['id']}", json={"email": VENDOR_PAYLOAD["email"]})
        assert resp.status_code == 400
        assert resp.json()["message"] == "Email already registered"
