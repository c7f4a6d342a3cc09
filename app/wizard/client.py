"""HTTP client for the assessment API and the wizard session built on it."""
import logging
from typing import Any, Dict, List, Optional

import httpx

from app.wizard.autosave import AutoSaver
from app.wizard.state import FormSection, WizardState

logger = logging.getLogger(__name__)


class AssessmentClientError(Exception):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class AssessmentClient:
    """Thin async wrapper over the REST endpoints.

    Every method unwraps the ``APIResponse`` envelope and returns ``data``.
    """

    def __init__(self, client: httpx.AsyncClient, prefix: str = "/api"):
        self._client = client
        self._prefix = prefix.rstrip("/")
        self._admin_token: Optional[str] = None

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        response = await self._client.request(method, f"{self._prefix}{path}", **kwargs)
        try:
            body = response.json()
        except ValueError:
            body = {"message": response.text}
        if response.is_error:
            raise AssessmentClientError(response.status_code, body.get("message", "Request failed"))
        return body.get("data")

    def _admin_headers(self) -> Dict[str, str]:
        if not self._admin_token:
            raise AssessmentClientError(401, "Not logged in as admin")
        return {"Authorization": f"Bearer {self._admin_token}"}

    async def create_user(self, **user: str) -> Dict[str, Any]:
        return await self._request("POST", "/users", json=user)

    async def create_assessment(self, user_id: int, year: int, **fields: Any) -> Dict[str, Any]:
        return await self._request(
            "POST", "/assessments", json={"userId": user_id, "year": year, **fields}
        )

    async def update_assessment(self, assessment_id: int, **fields: Any) -> Dict[str, Any]:
        return await self._request("PUT", f"/assessments/{assessment_id}", json=fields)

    async def complete_assessment(self, assessment_id: int) -> Dict[str, Any]:
        return await self._request("POST", f"/assessments/{assessment_id}/complete")

    async def get_sections(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/sections")

    async def get_questions(self, section: Optional[str] = None) -> List[Dict[str, Any]]:
        if section is None:
            return await self._request("GET", "/questions")
        return await self._request("GET", f"/questions/section/{section}")

    async def save_response(self, user_id: int, question_id: int, answer: str) -> Dict[str, Any]:
        return await self._request(
            "POST",
            "/responses",
            json={"userId": user_id, "questionId": question_id, "answer": answer},
        )

    async def get_responses(self, user_id: int) -> List[Dict[str, Any]]:
        return await self._request("GET", f"/users/{user_id}/responses")

    async def upload_file(
        self,
        user_id: int,
        filename: str,
        content: bytes,
        content_type: str,
        question_id: Optional[int] = None,
    ) -> Dict[str, Any]:
        data = {"userId": str(user_id)}
        if question_id is not None:
            data["questionId"] = str(question_id)
        return await self._request(
            "POST", "/upload", data=data, files={"file": (filename, content, content_type)}
        )

    async def admin_login(self, password: str) -> str:
        token = await self._request("POST", "/admin/auth", json={"password": password})
        self._admin_token = token["access_token"]
        return self._admin_token

    async def admin_responses(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/admin/responses", headers=self._admin_headers())

    async def admin_overview(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/admin/overview", headers=self._admin_headers())


class WizardSession:
    """One respondent walking through the wizard.

    Answers live in ``state.answers`` and are pushed to the server by the
    auto-saver on every tick and on every explicit save or continue.
    """

    def __init__(
        self,
        client: AssessmentClient,
        user_id: int,
        state: WizardState,
        assessment_id: Optional[int] = None,
        interval: Optional[float] = None,
    ):
        self.client = client
        self.user_id = user_id
        self.state = state
        self.assessment_id = assessment_id
        self.autosaver = AutoSaver(self.save, interval=interval)
        self.completed = False

    @classmethod
    async def start(
        cls,
        client: AssessmentClient,
        user_id: int,
        assessment_id: Optional[int] = None,
        interval: Optional[float] = None,
    ) -> "WizardSession":
        """Build a session from the server's section list and stored answers."""
        sections = await client.get_sections()
        state = WizardState(
            sections=[FormSection(id=s["id"], title=s["title"]) for s in sections]
        )
        for response in await client.get_responses(user_id):
            state.set_answer(response["questionId"], response["answer"])
        return cls(client, user_id, state, assessment_id=assessment_id, interval=interval)

    async def save(self) -> None:
        """Push every answer; one rejected answer does not block the rest.

        Raises ``AssessmentClientError`` after the pass if any answer failed.
        """
        failed = {}
        answers = list(self.state.answers.items())
        for question_id, answer in answers:
            try:
                await self.client.save_response(self.user_id, question_id, answer)
            except AssessmentClientError as e:
                logger.warning(f"Could not save answer to question {question_id}: {e}")
                failed[question_id] = e
        logger.debug(f"Saved {len(answers) - len(failed)} of {len(answers)} answers for user {self.user_id}")
        if failed:
            raise AssessmentClientError(
                max(e.status_code for e in failed.values()),
                f"{len(failed)} answer(s) not saved: questions {sorted(failed)}",
            )

    async def save_now(self) -> bool:
        return await self.autosaver.save_now()

    async def continue_(self) -> FormSection:
        """Save, then advance; on the last section, complete the assessment."""
        await self.autosaver.save_now()
        if self.state.is_last:
            if self.assessment_id is not None and not self.completed:
                await self.client.complete_assessment(self.assessment_id)
                self.completed = True
            return self.state.current_section
        return self.state.next()

    def previous(self) -> FormSection:
        return self.state.previous()

    def jump(self, index: int) -> FormSection:
        return self.state.jump(index)
