"""Repository for uploaded assessment file metadata."""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.assessment_file import AssessmentFile
from app.schemas.file import AssessmentFileCreate

logger = logging.getLogger(__name__)


class FileRepository:
    """Repository for AssessmentFile entity operations."""

    def __init__(self, db_session: AsyncSession):
        self.db_session = db_session

    async def create(self, file_data: AssessmentFileCreate) -> AssessmentFile:
        assessment_file = AssessmentFile(**file_data.model_dump())

        self.db_session.add(assessment_file)
        await self.db_session.flush()

        logger.info(
            f"Saved file record: {assessment_file.id} ({assessment_file.file_name}, user={assessment_file.user_id})"
        )
        return assessment_file

    async def list_by_user(self, user_id: int) -> List[AssessmentFile]:
        stmt = (
            select(AssessmentFile)
            .where(AssessmentFile.user_id == user_id)
            .order_by(AssessmentFile.id)
        )
        result = await self.db_session.execute(stmt)
        return list(result.scalars().all())
