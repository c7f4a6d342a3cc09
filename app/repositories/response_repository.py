"""Repository for questionnaire responses.

A response is keyed on ``(user_id, question_id)``: at most one row exists
per pair and writes are upserts on that key.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.assessment import Assessment
from app.models.response import Response
from app.models.user import User
from app.schemas.answer import ResponseCreate

logger = logging.getLogger(__name__)

_DIALECT_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


@dataclass
class UserSubmissionRecord:
    """A user with everything they submitted."""
    user: User
    responses: List[Response] = field(default_factory=list)
    assessments: List[Assessment] = field(default_factory=list)


class ResponseRepository:
    """Repository for Response entity operations."""

    def __init__(self, db_session: AsyncSession):
        """Initialize repository with database session.

        Args:
            db_session: SQLAlchemy async session
        """
        self.db_session = db_session

    def _insert(self):
        dialect = self.db_session.get_bind().dialect.name
        try:
            return _DIALECT_INSERTS[dialect]
        except KeyError:
            raise ValueError(f"Upsert is not supported for dialect '{dialect}'")

    async def create(self, response_data: ResponseCreate) -> Response:
        """Insert a response row.

        Raises ``IntegrityError`` if the pair already has a response; use
        :meth:`upsert` for auto-save writes.

        Args:
            response_data: Response creation data

        Returns:
            Created Response instance
        """
        response = Response(
            user_id=response_data.user_id,
            question_id=response_data.question_id,
            answer=response_data.answer,
        )
        self.db_session.add(response)
        await self.db_session.flush()

        logger.info(f"Created response: {response.id} (user={response.user_id}, question={response.question_id})")
        return response

    async def upsert(self, user_id: int, question_id: int, answer: str) -> Response:
        """Insert or update the response for a (user, question) pair.

        Issued as a single ``INSERT ... ON CONFLICT DO UPDATE`` statement, so
        concurrent writers for the same pair converge on one row holding the
        last written answer.

        Args:
            user_id: Respondent ID
            question_id: Question ID
            answer: Answer text (checkbox answers are comma-joined values)

        Returns:
            The stored Response instance
        """
        now = datetime.now()
        insert = self._insert()
        stmt = insert(Response).values(
            user_id=user_id,
            question_id=question_id,
            answer=answer,
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id", "question_id"],
            set_={
                "answer": stmt.excluded.answer,
                "updated_at": stmt.excluded.updated_at,
            },
        ).returning(Response)

        result = await self.db_session.scalars(
            stmt, execution_options={"populate_existing": True}
        )
        response = result.one()

        logger.info(f"Upserted response: {response.id} (user={user_id}, question={question_id})")
        return response

    async def list_by_user(self, user_id: int) -> List[Response]:
        """List a user's responses with their questions loaded.

        Args:
            user_id: Respondent ID

        Returns:
            List of Response instances ordered by ID
        """
        stmt = (
            select(Response)
            .options(selectinload(Response.question))
            .where(Response.user_id == user_id)
            .order_by(Response.id)
        )
        result = await self.db_session.execute(stmt)
        return list(result.scalars().all())

    async def grouped_by_user(self) -> List[UserSubmissionRecord]:
        """Gather every user's responses and assessments.

        All users are grouped first (left-join semantics, so users without
        responses are still present), then users with neither responses nor
        assessments are dropped.

        Returns:
            List of UserSubmissionRecord ordered by user ID
        """
        stmt = (
            select(User)
            .options(
                selectinload(User.responses).selectinload(Response.question),
                selectinload(User.assessments),
            )
            .order_by(User.id)
        )
        result = await self.db_session.execute(stmt)
        users = result.scalars().all()

        grouped = [
            UserSubmissionRecord(
                user=user,
                responses=list(user.responses),
                assessments=list(user.assessments),
            )
            for user in users
        ]
        return [record for record in grouped if record.responses or record.assessments]
