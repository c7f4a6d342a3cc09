"""Seed the questions/options tables from the YAML catalog.

Usage::

    python -m app.db.seed
"""
import asyncio
import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.catalog import CatalogSection, load_catalog
from app.repositories.question_repository import QuestionRepository
from app.schemas.question import OptionCreate, QuestionCreate

logger = logging.getLogger(__name__)


async def seed_questions(
    session: AsyncSession, catalog: Optional[List[CatalogSection]] = None
) -> int:
    """Insert every catalog question unless the table already has rows.

    Returns the number of questions created.
    """
    repo = QuestionRepository(session)
    existing = await repo.count()
    if existing:
        logger.info(f"Questions table already holds {existing} rows; skipping seed")
        return 0

    if catalog is None:
        catalog = load_catalog()

    created = 0
    for section in catalog:
        for order, question in enumerate(section.questions, start=1):
            await repo.create(
                QuestionCreate(
                    text=question.text,
                    type=question.type,
                    section=section.id,
                    order=order,
                    options=[
                        OptionCreate(text=opt.text, value=opt.value, order=opt_order)
                        for opt_order, opt in enumerate(question.options, start=1)
                    ],
                )
            )
            created += 1

    await session.commit()
    logger.info(f"Seeded {created} questions across {len(catalog)} sections")
    return created


async def main() -> None:
    from app.db.session import async_session, engine

    async with async_session() as session:
        await seed_questions(session)
    await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
