"""Tests for question and section endpoints."""

from app.core.catalog import get_catalog


class TestQuestionEndpoints:

    async def test_list_questions_with_options(self, client, seeded) -> None:
        response = await client.get("/api/questions")

        assert response.status_code == 200
        questions = response.json()["data"]
        assert len(questions) == seeded
        radio = next(q for q in questions if q["type"] == "radio")
        assert radio["options"]
        assert [o["order"] for o in radio["options"]] == sorted(o["order"] for o in radio["options"])
        assert all(o["questionId"] == radio["id"] for o in radio["options"])

    async def test_questions_follow_section_order(self, client, seeded) -> None:
        sections = [s["id"] for s in (await client.get("/api/sections")).json()["data"]]
        questions = (await client.get("/api/questions")).json()["data"]

        seen = []
        for question in questions:
            if not seen or seen[-1] != question["section"]:
                seen.append(question["section"])

        assert seen == [s for s in sections if s != "user-info"]
        assert questions[0]["section"] == "general-org"

    async def test_section_questions_in_order(self, client, seeded) -> None:
        response = await client.get("/api/questions/section/password-policy")

        questions = response.json()["data"]
        assert [q["order"] for q in questions] == [1, 2, 3, 4]
        assert [q["type"] for q in questions] == ["radio", "radio", "checkbox", "file"]
        assert all(q["section"] == "password-policy" for q in questions)
        assert questions[3]["options"] == []

    async def test_unknown_section_is_empty(self, client, seeded) -> None:
        response = await client.get("/api/questions/section/no-such-section")

        assert response.status_code == 200
        assert response.json()["data"] == []

    async def test_sections_follow_catalog_order(self, client, seeded) -> None:
        response = await client.get("/api/sections")

        sections = response.json()["data"]
        assert [s["id"] for s in sections] == [s.id for s in get_catalog()]
        assert sections[0]["id"] == "user-info"
        assert sections[0]["questionCount"] == 0
        assert sum(s["questionCount"] for s in sections) == seeded
