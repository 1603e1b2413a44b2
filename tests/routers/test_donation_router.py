"""Tests for donation endpoints."""

from decimal import Decimal

from fastapi.testclient import TestClient
from sqlmodel import Session

from app.models.campaign import FundraisingCampaign
from app.models.donation import Donation


class TestCreateDonation:
    def test_requires_authentication(self, client: TestClient):
        response = client.post("/api/donations", json={"amount": "50"})
        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json()["error"]["message"] == "Access denied. No token provided."

    def test_public_user_can_donate(
        self,
        client: TestClient,
        session: Session,
        public_headers,
        sek_campaign: FundraisingCampaign,
    ):
        response = client.post(
            "/api/donations",
            json={"amount": "5000", "currency": "SEK", "donor_name": "Anna"},
            headers=public_headers,
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["donor_name"] == "Anna"
        assert data["currency"] == "SEK"
        session.refresh(sek_campaign)
        assert sek_campaign.current_amount == Decimal("35000.00")

    def test_non_positive_amount_rejected(self, client: TestClient, public_headers):
        response = client.post(
            "/api/donations", json={"amount": "0"}, headers=public_headers
        )
        assert response.status_code == 400
        assert response.json()["error"]["message"].startswith("body.amount:")

    def test_bad_currency_length_rejected(self, client: TestClient, public_headers):
        response = client.post(
            "/api/donations",
            json={"amount": "10", "currency": "KRONA"},
            headers=public_headers,
        )
        assert response.status_code == 400


class TestListDonations:
    def test_staff_can_list(self, client: TestClient, session: Session, staff_headers):
        session.add(Donation(amount=Decimal("12.50")))
        session.commit()
        response = client.get("/api/donations", headers=staff_headers)
        assert response.status_code == 200
        assert len(response.json()["data"]) == 1

    def test_public_cannot_list(self, client: TestClient, public_headers):
        response = client.get("/api/donations", headers=public_headers)
        assert response.status_code == 403

    def test_get_one(self, client: TestClient, session: Session, admin_headers):
        donation = Donation(amount=Decimal("99.00"), donor_name="Olle")
        session.add(donation)
        session.commit()
        session.refresh(donation)

        response = client.get(f"/api/donations/{donation.id}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["data"]["donor_name"] == "Olle"

    def test_get_missing(self, client: TestClient, staff_headers):
        response = client.get("/api/donations/404", headers=staff_headers)
        assert response.status_code == 404
        assert response.json()["error"]["message"] == (
            "Donation with identifier '404' not found"
        )


class TestListCampaigns:
    def test_authenticated_user_sees_campaigns(
        self, client: TestClient, public_headers, sek_campaign: FundraisingCampaign
    ):
        response = client.get("/api/donations/campaigns", headers=public_headers)
        assert response.status_code == 200
        campaigns = response.json()["data"]
        assert [c["id"] for c in campaigns] == [sek_campaign.id]

    def test_anonymous_rejected(self, client: TestClient):
        assert client.get("/api/donations/campaigns").status_code == 401
