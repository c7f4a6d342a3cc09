"""Tests for the evidence upload endpoint."""

import warnings

import pytest
from sqlalchemy import func, select

from app.core.config import settings
from app.core.errors import PayloadTooLargeException
from app.models.assessment_file import AssessmentFile
from app.models.response import Response

PDF_BYTES = b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n1 0 obj\n<<\n/Type /Catalog\n>>\nendobj\n"


@pytest.fixture
async def file_question_id(client, seeded) -> int:
    questions = (await client.get("/api/questions/section/password-policy")).json()["data"]
    return next(q["id"] for q in questions if q["type"] == "file")


async def count_files(db_session) -> int:
    return (await db_session.execute(select(func.count(AssessmentFile.id)))).scalar_one()


class TestUploadEndpoint:

    async def test_upload_pdf_records_file_and_answer(
        self, client, seeded, user, db_session, upload_dir, file_question_id
    ) -> None:
        response = await client.post(
            "/api/upload",
            data={"userId": str(user["id"]), "questionId": str(file_question_id)},
            files={"file": ("policy.pdf", PDF_BYTES, "application/pdf")},
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["fileName"] == "policy.pdf"
        assert data["fileSize"] == len(PDF_BYTES)
        assert data["questionId"] == file_question_id

        stored = list(upload_dir.iterdir())
        assert len(stored) == 1
        assert stored[0].suffix == ".pdf"
        assert stored[0].read_bytes() == PDF_BYTES

        answer = (
            await db_session.execute(
                select(Response.answer).where(
                    Response.user_id == user["id"], Response.question_id == file_question_id
                )
            )
        ).scalar_one()
        assert answer == "policy.pdf"

    async def test_upload_without_question(self, client, seeded, user, db_session) -> None:
        response = await client.post(
            "/api/upload",
            data={"userId": str(user["id"])},
            files={"file": ("notes.txt", b"backup tested monthly", "text/plain")},
        )

        assert response.status_code == 201
        assert response.json()["data"]["questionId"] is None
        responses = (await db_session.execute(select(func.count(Response.id)))).scalar_one()
        assert responses == 0

    async def test_upload_exe_is_rejected(
        self, client, seeded, user, db_session, upload_dir, file_question_id
    ) -> None:
        response = await client.post(
            "/api/upload",
            data={"userId": str(user["id"]), "questionId": str(file_question_id)},
            files={"file": ("setup.exe", b"MZ\x90\x00", "application/octet-stream")},
        )

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert await count_files(db_session) == 0
        assert not upload_dir.exists() or not any(upload_dir.iterdir())

    async def test_upload_mime_mismatch_is_rejected(self, client, seeded, user, db_session) -> None:
        response = await client.post(
            "/api/upload",
            data={"userId": str(user["id"])},
            files={"file": ("report.pdf", b"MZ\x90\x00", "application/x-msdownload")},
        )

        assert response.status_code == 400
        assert await count_files(db_session) == 0

    async def test_upload_too_large(self, client, seeded, user, db_session, monkeypatch) -> None:
        monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE", 16)
        response = await client.post(
            "/api/upload",
            data={"userId": str(user["id"])},
            files={"file": ("policy.pdf", PDF_BYTES, "application/pdf")},
        )

        assert response.status_code == 413
        assert response.json()["error"] == {"code": "PAYLOAD_TOO_LARGE"}
        assert await count_files(db_session) == 0

    async def test_upload_unknown_user(self, client, seeded, db_session, upload_dir) -> None:
        response = await client.post(
            "/api/upload",
            data={"userId": "999"},
            files={"file": ("policy.pdf", PDF_BYTES, "application/pdf")},
        )

        assert response.status_code == 404
        assert await count_files(db_session) == 0
        assert not upload_dir.exists() or not any(upload_dir.iterdir())

    async def test_upload_requires_user_id(self, client) -> None:
        response = await client.post(
            "/api/upload",
            files={"file": ("policy.pdf", PDF_BYTES, "application/pdf")},
        )

        assert response.status_code == 400

    async def test_uploaded_files_are_listed_for_user(self, client, seeded, user) -> None:
        for name in ("first.txt", "second.txt"):
            response = await client.post(
                "/api/upload",
                data={"userId": str(user["id"])},
                files={"file": (name, b"evidence", "text/plain")},
            )
            assert response.status_code == 201

        listed = await client.get(f"/api/users/{user['id']}/files")

        assert listed.status_code == 200
        assert [f["fileName"] for f in listed.json()["data"]] == ["first.txt", "second.txt"]


def test_payload_too_large_uses_current_status_name() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        exc = PayloadTooLargeException()

    assert exc.status_code == 413
