"""Repository for questions and their options."""

import logging
from typing import Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.catalog import get_catalog
from app.models.question import Option, Question
from app.schemas.question import QuestionCreate

logger = logging.getLogger(__name__)


def _section_positions() -> Dict[str, int]:
    return {section.id: index for index, section in enumerate(get_catalog())}


class QuestionRepository:
    """Repository for Question entity operations.

    Every read returns questions with their options eagerly loaded and
    ordered by ``Option.order``.
    """

    def __init__(self, db_session: AsyncSession):
        self.db_session = db_session

    async def get_by_id(self, question_id: int) -> Optional[Question]:
        stmt = (
            select(Question)
            .options(selectinload(Question.options))
            .where(Question.id == question_id)
        )
        result = await self.db_session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self) -> List[Question]:
        """List all questions in wizard section order, then display order.

        Sections missing from the catalog sort last, alphabetically.
        """
        stmt = select(Question).options(selectinload(Question.options))
        result = await self.db_session.execute(stmt)
        position = _section_positions()
        return sorted(
            result.scalars().all(),
            key=lambda q: (position.get(q.section, len(position)), q.section, q.order, q.id),
        )

    async def list_by_section(self, section: str) -> List[Question]:
        """List one section's questions in display order.

        Args:
            section: Section id, e.g. ``password-policy``

        Returns:
            List of questions; empty for an unknown section
        """
        stmt = (
            select(Question)
            .options(selectinload(Question.options))
            .where(Question.section == section)
            .order_by(Question.order, Question.id)
        )
        result = await self.db_session.execute(stmt)
        return list(result.scalars().all())

    async def list_sections(self) -> List[str]:
        """Distinct stored section ids in wizard order.

        Sections missing from the catalog sort last, alphabetically.
        """
        result = await self.db_session.execute(select(Question.section).distinct())
        position = _section_positions()
        return sorted(
            result.scalars().all(),
            key=lambda section: (position.get(section, len(position)), section),
        )

    async def count_by_section(self) -> Dict[str, int]:
        stmt = select(Question.section, func.count(Question.id)).group_by(Question.section)
        result = await self.db_session.execute(stmt)
        return {section: count for section, count in result.all()}

    async def count(self) -> int:
        result = await self.db_session.execute(select(func.count(Question.id)))
        return result.scalar_one()

    async def create(self, question_data: QuestionCreate) -> Question:
        """Create a question together with its options.

        Args:
            question_data: Question definition with options

        Returns:
            Created Question instance with options attached
        """
        question = Question(
            text=question_data.text,
            type=question_data.type.value,
            section=question_data.section,
            order=question_data.order,
            options=[
                Option(text=opt.text, value=opt.value, order=opt.order)
                for opt in sorted(question_data.options, key=lambda o: o.order)
            ],
        )

        self.db_session.add(question)
        await self.db_session.flush()

        logger.info(
            f"Created question: {question.id} ({question.section}#{question.order}, {question.type})"
        )
        return question
