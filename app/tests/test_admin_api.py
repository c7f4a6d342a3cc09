"""Tests for admin authentication and aggregate views."""

from app.core.config import settings


class TestAdminEndpoints:

    async def test_wrong_password(self, client) -> None:
        response = await client.post("/api/admin/auth", json={"password": "wrong"})

        assert response.status_code == 401
        assert response.json()["success"] is False

    async def test_login_returns_token(self, client) -> None:
        response = await client.post("/api/admin/auth", json={"password": settings.ADMIN_PASSWORD})

        body = response.json()
        assert response.status_code == 200
        assert body["success"] is True
        assert body["data"]["token_type"] == "bearer"
        assert body["data"]["access_token"]

    async def test_responses_require_token(self, client) -> None:
        assert (await client.get("/api/admin/responses")).status_code == 401
        assert (await client.get("/api/admin/overview")).status_code == 401

    async def test_responses_reject_bad_token(self, client) -> None:
        response = await client.get(
            "/api/admin/responses", headers={"Authorization": "Bearer not-a-token"}
        )

        assert response.status_code == 401

    async def test_grouped_responses_drop_idle_users(
        self, client, seeded, user_payload, admin_headers
    ) -> None:
        answering = (await client.post("/api/users", json=user_payload)).json()["data"]
        idle = (
            await client.post("/api/users", json={**user_payload, "email": "idle@example.com"})
        ).json()["data"]
        assessing = (
            await client.post("/api/users", json={**user_payload, "email": "year@example.com"})
        ).json()["data"]

        await client.post(
            "/api/responses", json={"userId": answering["id"], "questionId": 7, "answer": "yes"}
        )
        await client.post("/api/assessments", json={"userId": assessing["id"], "year": 2025})

        response = await client.get("/api/admin/responses", headers=admin_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        user_ids = [entry["user"]["id"] for entry in data]
        assert user_ids == [answering["id"], assessing["id"]]
        assert idle["id"] not in user_ids

        answering_entry = data[0]
        assert answering_entry["responses"][0]["question"]["section"] == "sensitive-data"
        assert answering_entry["assessments"] == []
        assert data[1]["assessments"][0]["year"] == 2025
        assert data[1]["responses"] == []

    async def test_overview_groups_by_section(self, client, seeded, user, admin_headers) -> None:
        await client.post(
            "/api/responses", json={"userId": user["id"], "questionId": 5, "answer": "gdpr,ccpa"}
        )
        await client.post(
            "/api/responses", json={"userId": user["id"], "questionId": 2, "answer": "yes"}
        )

        response = await client.get("/api/admin/overview", headers=admin_headers)

        overview = response.json()["data"]
        assert len(overview) == 1
        section = overview[0]["sections"][0]
        assert section["section"] == "privacy-compliance"
        assert section["title"] == "Privacy Compliance"
        assert [e["questionId"] for e in section["entries"]] == [2, 5]
        assert section["entries"][1]["tags"] == ["gdpr", "ccpa"]
        assert section["entries"][0]["tags"] == ["yes"]
