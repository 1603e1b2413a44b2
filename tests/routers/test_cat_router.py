"""Tests for cat endpoints."""

from fastapi.testclient import TestClient

NEW_CAT = {
    "name": "Findus",
    "age": 5,
    "age_group": "adult",
    "gender": "male",
    "entry_date": "2024-04-02T10:00:00",
    "entry_type": "rescue",
}


def create_cat(client: TestClient, headers) -> dict:
    response = client.post("/api/cats", json=NEW_CAT, headers=headers)
    assert response.status_code == 201
    return response.json()["data"]


class TestCatCrud:
    def test_staff_creates_cat(self, client: TestClient, staff_headers):
        cat = create_cat(client, staff_headers)
        assert cat["name"] == "Findus"
        assert cat["status"] == "available"
        assert cat["is_neutered_or_spayed"] is False

    def test_public_cannot_create(self, client: TestClient, public_headers):
        response = client.post("/api/cats", json=NEW_CAT, headers=public_headers)
        assert response.status_code == 403

    def test_list_requires_login(self, client: TestClient, public_headers, staff_headers):
        create_cat(client, staff_headers)
        assert client.get("/api/cats").status_code == 401
        response = client.get("/api/cats", headers=public_headers)
        assert response.status_code == 200
        assert len(response.json()["data"]) == 1

    def test_partial_update(self, client: TestClient, staff_headers):
        cat = create_cat(client, staff_headers)
        response = client.put(
            f"/api/cats/{cat['id']}",
            json={"status": "booked", "is_neutered_or_spayed": True},
            headers=staff_headers,
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "booked"
        assert data["is_neutered_or_spayed"] is True
        assert data["name"] == "Findus"

    def test_non_integer_id(self, client: TestClient, public_headers):
        response = client.get("/api/cats/abc", headers=public_headers)
        assert response.status_code == 400

    def test_missing_cat(self, client: TestClient, public_headers):
        response = client.get("/api/cats/9999", headers=public_headers)
        assert response.status_code == 404

    def test_only_admin_deletes(self, client: TestClient, staff_headers, admin_headers):
        cat = create_cat(client, staff_headers)
        assert client.delete(f"/api/cats/{cat['id']}", headers=staff_headers).status_code == 403

        response = client.delete(f"/api/cats/{cat['id']}", headers=admin_headers)
        assert response.status_code == 200
        assert response.json() == {"success": True, "data": None}
        assert client.get(f"/api/cats/{cat['id']}", headers=admin_headers).status_code == 404
