"""Tests for assessment endpoints."""

from datetime import datetime


class TestAssessmentEndpoints:

    async def create_assessment(self, client, user_id: int, year: int = 2025) -> dict:
        response = await client.post("/api/assessments", json={"userId": user_id, "year": year})
        assert response.status_code == 201
        return response.json()["data"]

    async def test_create_assessment(self, client, user) -> None:
        assessment = await self.create_assessment(client, user["id"])

        assert assessment["userId"] == user["id"]
        assert assessment["year"] == 2025
        assert assessment["isCompleted"] is False
        assert assessment["completedAt"] is None
        assert assessment["gdprCompliance"] is None

    async def test_create_assessment_for_unknown_user(self, client) -> None:
        response = await client.post("/api/assessments", json={"userId": 42, "year": 2025})

        assert response.status_code == 404

    async def test_create_duplicate_year(self, client, user) -> None:
        await self.create_assessment(client, user["id"])
        response = await client.post("/api/assessments", json={"userId": user["id"], "year": 2025})

        assert response.status_code == 400

    async def test_create_assessment_requires_year(self, client, user) -> None:
        response = await client.post("/api/assessments", json={"userId": user["id"]})

        assert response.status_code == 400

    async def test_update_then_read(self, client, user) -> None:
        assessment = await self.create_assessment(client, user["id"])

        update = await client.put(
            f"/api/assessments/{assessment['id']}", json={"gdprCompliance": "yes"}
        )
        assert update.status_code == 200

        response = await client.get(f"/api/assessments/{assessment['id']}")
        data = response.json()["data"]
        assert data["gdprCompliance"] == "yes"
        assert datetime.fromisoformat(data["updatedAt"]) > datetime.fromisoformat(data["createdAt"])

    async def test_partial_update_keeps_other_fields(self, client, user) -> None:
        assessment = await self.create_assessment(client, user["id"])
        url = f"/api/assessments/{assessment['id']}"

        await client.put(url, json={"gdprCompliance": "yes", "passwordRequirements": ["mixed-case"]})
        await client.put(url, json={"mfaEmail": "no"})

        data = (await client.get(url)).json()["data"]
        assert data["gdprCompliance"] == "yes"
        assert data["passwordRequirements"] == ["mixed-case"]
        assert data["mfaEmail"] == "no"

    async def test_update_risk_assessments(self, client, user) -> None:
        assessment = await self.create_assessment(client, user["id"])
        risks = [
            {
                "scenario": "Systems unavailable",
                "financialImpact": "high",
                "reputationalImpact": "medium",
                "complianceImpact": "low",
            }
        ]

        response = await client.put(
            f"/api/assessments/{assessment['id']}", json={"riskAssessments": risks}
        )

        assert response.status_code == 200
        assert response.json()["data"]["riskAssessments"] == risks

    async def test_update_rejects_wrong_types(self, client, user) -> None:
        assessment = await self.create_assessment(client, user["id"])
        response = await client.put(
            f"/api/assessments/{assessment['id']}", json={"complianceActs": "gdpr"}
        )

        assert response.status_code == 400

    async def test_update_unknown_assessment(self, client) -> None:
        response = await client.put("/api/assessments/999", json={"gdprCompliance": "yes"})

        assert response.status_code == 404

    async def test_complete_is_one_way(self, client, user) -> None:
        assessment = await self.create_assessment(client, user["id"])
        url = f"/api/assessments/{assessment['id']}"

        first = await client.post(f"{url}/complete")
        assert first.status_code == 200
        completed = first.json()["data"]
        assert completed["isCompleted"] is True
        assert completed["completedAt"] is not None

        await client.put(url, json={"isCompleted": False, "completedAt": None, "siemSocUsed": "yes"})
        second = await client.post(f"{url}/complete")

        data = (await client.get(url)).json()["data"]
        assert data["isCompleted"] is True
        assert data["completedAt"] == completed["completedAt"]
        assert data["siemSocUsed"] == "yes"
        assert second.json()["data"]["completedAt"] == completed["completedAt"]

    async def test_complete_unknown_assessment(self, client) -> None:
        response = await client.post("/api/assessments/999/complete")

        assert response.status_code == 404

    async def test_list_user_assessments(self, client, user) -> None:
        await self.create_assessment(client, user["id"], year=2025)
        await self.create_assessment(client, user["id"], year=2024)

        response = await client.get(f"/api/users/{user['id']}/assessments")

        assert [a["year"] for a in response.json()["data"]] == [2024, 2025]

    async def test_get_unknown_assessment(self, client) -> None:
        response = await client.get("/api/assessments/999")

        assert response.status_code == 404
