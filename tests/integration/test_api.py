"""
HTTP-level tests: routing, auth gating, request validation and the error
envelope. Storage is swapped for the in-memory repositories through
FastAPI dependency overrides.
"""
from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from lawmarket.main import create_application
from lawmarket.modules.accounts.presentation.dependencies import get_account_repository, get_session_provider
from lawmarket.modules.clients.presentation.dependencies import get_client_repository
from lawmarket.modules.lawyers.presentation.dependencies import get_lawyer_repository
from lawmarket.modules.specializations.presentation.dependencies import get_specialization_repository
from lawmarket.shared.events.publisher import get_event_publisher
from lawmarket.shared.utils.helpers import utc_now
from tests.fixtures import (
    CRIMINAL_LAW_ID,
    FAMILY_LAW_ID,
    UNKNOWN_SPECIALIZATION_ID,
    FakeSessionProvider,
    identity_for,
    make_account,
)

ADMIN_TOKEN = "admin-token"
CLIENT_TOKEN = "client-token"
LAWYER_TOKEN = "lawyer-token"


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sessions(account_repository, admin, client_account, lawyer_account):
    provider = FakeSessionProvider()
    for token, account in (
        (ADMIN_TOKEN, admin),
        (CLIENT_TOKEN, client_account),
        (LAWYER_TOKEN, lawyer_account),
    ):
        account_repository.add(account)
        provider.register(token, identity_for(account))
    return provider


@pytest.fixture
def client(
    sessions,
    account_repository,
    client_repository,
    lawyer_repository,
    specialization_repository,
    publisher,
):
    app = create_application()
    app.dependency_overrides[get_session_provider] = lambda: sessions
    app.dependency_overrides[get_account_repository] = lambda: account_repository
    app.dependency_overrides[get_client_repository] = lambda: client_repository
    app.dependency_overrides[get_lawyer_repository] = lambda: lawyer_repository
    app.dependency_overrides[get_specialization_repository] = lambda: specialization_repository
    app.dependency_overrides[get_event_publisher] = lambda: publisher
    return TestClient(app)


def onboarding_payload(**overrides) -> dict:
    payload = {
        "phoneNumber": "+2348012345678",
        "country": "Nigeria",
        "state": "Lagos",
        "company": "Acme Ltd",
        "specializationIds": [FAMILY_LAW_ID, CRIMINAL_LAW_ID],
    }
    payload.update(overrides)
    return payload


class TestPublicEndpoints:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_specializations_are_listed_without_auth(self, client):
        response = client.get("/api/v1/specializations")

        assert response.status_code == 200
        names = [item["name"] for item in response.json()["data"]]
        assert names == sorted(names)
        assert "Family Law" in names


class TestAuthentication:
    def test_missing_token_is_rejected(self, client):
        response = client.get("/api/v1/user/profile")

        assert response.status_code == 401
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "UNAUTHORIZED"

    def test_unknown_token_is_rejected(self, client):
        response = client.get("/api/v1/user/profile", headers=auth("nope"))

        assert response.status_code == 401

    def test_profile_is_returned_in_camel_case(self, client, client_account):
        response = client.get("/api/v1/user/profile", headers=auth(CLIENT_TOKEN))

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"] == client_account.id
        assert data["displayName"] == "Cleo Client"
        assert data["onboardingCompleted"] is False

    def test_banned_account_is_forbidden(self, client, sessions, account_repository):
        banned = account_repository.add(make_account(banned=True, ban_reason="Spamming other members"))
        sessions.register("banned-token", identity_for(banned))

        response = client.get("/api/v1/user/profile", headers=auth("banned-token"))

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "FORBIDDEN"

    def test_expired_ban_lets_the_account_through(self, client, sessions, account_repository):
        lapsed = account_repository.add(make_account(
            banned=True,
            ban_reason="Temporary suspension",
            ban_expires_at=utc_now() - timedelta(days=1),
        ))
        sessions.register("lapsed-token", identity_for(lapsed))

        response = client.get("/api/v1/user/profile", headers=auth("lapsed-token"))

        assert response.status_code == 200
        assert response.json()["data"]["banned"] is True


class TestClientOnboarding:
    def test_complete_onboarding(self, client, client_account, client_repository, account_repository):
        response = client.post("/api/v1/onboarding/complete", json=onboarding_payload(), headers=auth(CLIENT_TOKEN))

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Onboarding completed successfully"
        assert body["data"]["specializationCount"] == 2
        assert body["data"]["onboardingCompleted"] is True
        assert len(client_repository) == 1

    def test_unverified_email_is_rejected(self, client, sessions, account_repository):
        account = account_repository.add(make_account())
        sessions.register("unverified", identity_for(account, email_verified=False))

        response = client.post("/api/v1/onboarding/complete", json=onboarding_payload(), headers=auth("unverified"))

        assert response.status_code == 401

    def test_second_onboarding_conflicts(self, client):
        first = client.post("/api/v1/onboarding/complete", json=onboarding_payload(), headers=auth(CLIENT_TOKEN))
        second = client.post("/api/v1/onboarding/complete", json=onboarding_payload(), headers=auth(CLIENT_TOKEN))

        assert first.status_code == 201
        assert second.status_code == 409
        assert second.json()["error"]["code"] == "CLIENT_PROFILE_EXISTS"

    def test_unknown_specialization_is_named(self, client, client_repository):
        payload = onboarding_payload(specializationIds=[FAMILY_LAW_ID, UNKNOWN_SPECIALIZATION_ID])

        response = client.post("/api/v1/onboarding/complete", json=payload, headers=auth(CLIENT_TOKEN))

        assert response.status_code == 400
        assert UNKNOWN_SPECIALIZATION_ID in str(response.json()["error"]["details"])
        assert len(client_repository) == 0

    @pytest.mark.parametrize("overrides", [
        {"specializationIds": []},
        {"state": "L"},
        {"country": ""},
    ])
    def test_malformed_body_uses_validation_envelope(self, client, overrides):
        response = client.post(
            "/api/v1/onboarding/complete",
            json=onboarding_payload(**overrides),
            headers=auth(CLIENT_TOKEN),
        )

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["details"]["errors"]

    def test_my_profile_after_onboarding(self, client):
        client.post("/api/v1/onboarding/complete", json=onboarding_payload(), headers=auth(CLIENT_TOKEN))

        response = client.get("/api/v1/clients/me", headers=auth(CLIENT_TOKEN))

        assert response.status_code == 200
        assert sorted(response.json()["data"]["specializationIds"]) == sorted([FAMILY_LAW_ID, CRIMINAL_LAW_ID])

    def test_my_profile_before_onboarding(self, client):
        response = client.get("/api/v1/clients/me", headers=auth(CLIENT_TOKEN))

        assert response.status_code == 404


class TestAdministration:
    def test_non_admin_cannot_list_users(self, client):
        response = client.get("/api/v1/admin/users", headers=auth(CLIENT_TOKEN))

        assert response.status_code == 403

    def test_admin_lists_users(self, client):
        response = client.get("/api/v1/admin/users", params={"role": "lawyer"}, headers=auth(ADMIN_TOKEN))

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["total"] == 1
        assert data["items"][0]["role"] == "lawyer"

    def test_ban_and_unban(self, client, client_account, account_repository):
        ban = client.post(
            f"/api/v1/admin/users/{client_account.id}/ban",
            json={"reason": "Harassing lawyers in messages"},
            headers=auth(ADMIN_TOKEN),
        )

        assert ban.status_code == 200
        assert ban.json()["data"]["banned"] is True
        assert client.get("/api/v1/user/profile", headers=auth(CLIENT_TOKEN)).status_code == 403

        unban = client.post(f"/api/v1/admin/users/{client_account.id}/unban", headers=auth(ADMIN_TOKEN))

        assert unban.status_code == 200
        assert unban.json()["data"]["banned"] is False
        assert client.get("/api/v1/user/profile", headers=auth(CLIENT_TOKEN)).status_code == 200

    def test_non_admin_cannot_ban(self, client, lawyer_account):
        response = client.post(
            f"/api/v1/admin/users/{lawyer_account.id}/ban",
            json={"reason": "Harassing lawyers in messages"},
            headers=auth(CLIENT_TOKEN),
        )

        assert response.status_code == 403

    def test_short_ban_reason_is_rejected(self, client, client_account):
        response = client.post(
            f"/api/v1/admin/users/{client_account.id}/ban",
            json={"reason": "rude"},
            headers=auth(ADMIN_TOKEN),
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_change_role(self, client, client_account):
        response = client.patch(
            f"/api/v1/admin/users/{client_account.id}/role",
            json={"role": "lawyer"},
            headers=auth(ADMIN_TOKEN),
        )

        assert response.status_code == 200
        assert response.json()["data"]["role"] == "lawyer"

    def test_unknown_user(self, client):
        response = client.get("/api/v1/admin/users/does-not-exist", headers=auth(ADMIN_TOKEN))

        assert response.status_code == 404


class TestLawyerOnboarding:
    def test_full_flow(self, client, publisher):
        start = client.post(
            "/api/v1/lawyers/onboarding",
            json={
                "firstName": "Lou",
                "lastName": "Lawyer",
                "phoneNumber": "+2348012345678",
                "country": "Nigeria",
            },
            headers=auth(LAWYER_TOKEN),
        )
        assert start.status_code == 201
        assert start.json()["data"]["onboardingStep"] == "basic_info"

        credentials = client.put(
            "/api/v1/lawyers/onboarding/credentials",
            json={
                "barNumber": "NBA-12345",
                "issueDate": "2015-06-01",
                "lawSchool": "University of Lagos",
                "graduationYear": 2014,
                "documents": [
                    {"type": "bar_certificate", "url": "https://f.test/cert.pdf", "publicId": "docs/cert"},
                ],
            },
            headers=auth(LAWYER_TOKEN),
        )
        assert credentials.status_code == 200
        assert credentials.json()["data"]["onboardingStep"] == "credentials"

        documents = client.post(
            "/api/v1/lawyers/onboarding/documents",
            json={"documents": [{"type": "law_degree", "url": "https://f.test/degree.pdf", "publicId": "docs/degree"}]},
            headers=auth(LAWYER_TOKEN),
        )
        assert documents.status_code == 200
        assert len(documents.json()["data"]["documents"]) == 2

        specializations = client.put(
            "/api/v1/lawyers/onboarding/specializations",
            json={
                "primary": [{"specializationId": FAMILY_LAW_ID, "yearsOfExperience": 6}],
                "secondary": [{"specializationId": CRIMINAL_LAW_ID}],
                "languageIds": ["en"],
            },
            headers=auth(LAWYER_TOKEN),
        )
        assert specializations.status_code == 200
        assert specializations.json()["data"]["onboardingStep"] == "specializations"

        submit = client.post("/api/v1/lawyers/onboarding/submit", headers=auth(LAWYER_TOKEN))
        assert submit.status_code == 200
        data = submit.json()["data"]
        assert data["onboardingStep"] == "submitted"
        assert data["profileCompleted"] is True
        assert "lawyer.application_submitted" in publisher.event_types

        me = client.get("/api/v1/lawyers/me", headers=auth(LAWYER_TOKEN))
        assert me.json()["data"]["barCredentials"]["barNumber"] == "NBA-12345"

    def test_skipping_a_step_conflicts(self, client):
        client.post(
            "/api/v1/lawyers/onboarding",
            json={"firstName": "Lou", "lastName": "Lawyer", "phoneNumber": "+2348012345678", "country": "Nigeria"},
            headers=auth(LAWYER_TOKEN),
        )

        response = client.put(
            "/api/v1/lawyers/onboarding/specializations",
            json={"primary": [{"specializationId": FAMILY_LAW_ID}], "languageIds": ["en"]},
            headers=auth(LAWYER_TOKEN),
        )

        assert response.status_code == 409

    def test_profile_before_start(self, client):
        response = client.get("/api/v1/lawyers/me", headers=auth(LAWYER_TOKEN))

        assert response.status_code == 404
