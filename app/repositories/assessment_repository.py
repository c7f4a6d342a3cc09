"""Repository for yearly assessments.

Assessments are created once per (user, year) and then mutated by repeated
partial updates until they are completed. Completion is one-way.
"""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.assessment import Assessment
from app.schemas.assessment import AssessmentCreate, AssessmentUpdate

logger = logging.getLogger(__name__)


class AssessmentRepository:
    """Repository for Assessment entity operations."""

    def __init__(self, db_session: AsyncSession):
        self.db_session = db_session

    async def get_by_id(self, assessment_id: int) -> Optional[Assessment]:
        stmt = select(Assessment).where(Assessment.id == assessment_id)
        result = await self.db_session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_user_and_year(self, user_id: int, year: int) -> Optional[Assessment]:
        stmt = select(Assessment).where(
            Assessment.user_id == user_id, Assessment.year == year
        )
        result = await self.db_session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_user(self, user_id: int) -> List[Assessment]:
        """List a user's assessments, oldest year first.

        Args:
            user_id: Owner of the assessments

        Returns:
            List of Assessment instances (possibly empty)
        """
        stmt = (
            select(Assessment)
            .where(Assessment.user_id == user_id)
            .order_by(Assessment.year, Assessment.id)
        )
        result = await self.db_session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, assessment_data: AssessmentCreate) -> Assessment:
        """Create a new assessment.

        Args:
            assessment_data: Owner, year and any answers known up front

        Returns:
            Created Assessment instance
        """
        assessment = Assessment(**assessment_data.model_dump(exclude_unset=True))

        self.db_session.add(assessment)
        await self.db_session.flush()

        logger.info(
            f"Created assessment: {assessment.id} (user={assessment.user_id}, year={assessment.year})"
        )
        return assessment

    async def update(
        self, assessment_id: int, assessment_data: AssessmentUpdate
    ) -> Optional[Assessment]:
        """Apply a partial update to an assessment.

        Only fields present in the request are written; ``updated_at`` is
        always bumped.

        Args:
            assessment_id: Assessment ID
            assessment_data: Fields to change

        Returns:
            Updated Assessment instance or None if not found
        """
        assessment = await self.get_by_id(assessment_id)
        if not assessment:
            return None

        update_data = assessment_data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(assessment, field, value)
        assessment.updated_at = datetime.now()

        await self.db_session.flush()

        logger.info(f"Updated assessment: {assessment.id} ({len(update_data)} fields)")
        return assessment

    async def complete(self, assessment_id: int) -> Optional[Assessment]:
        """Mark an assessment as completed.

        Completing an already completed assessment leaves it untouched, so
        ``completed_at`` keeps the time of the first completion.

        Args:
            assessment_id: Assessment ID

        Returns:
            Completed Assessment instance or None if not found
        """
        assessment = await self.get_by_id(assessment_id)
        if not assessment:
            return None

        if assessment.is_completed:
            logger.info(f"Assessment {assessment.id} already completed")
            return assessment

        now = datetime.now()
        assessment.is_completed = True
        assessment.completed_at = now
        assessment.updated_at = now
        await self.db_session.flush()

        logger.info(f"Completed assessment: {assessment.id}")
        return assessment
