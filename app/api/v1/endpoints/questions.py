import logging
from typing import Any, List
from fastapi import APIRouter, HTTPException, status
from app.api.deps import SessionDep
from app.core.catalog import get_catalog
from app.repositories.question_repository import QuestionRepository
from app.schemas.question import QuestionWithOptions, SectionSummary
from app.schemas.response import APIResponse
from app.core.errors import InternalServerErrorException

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/sections", response_model=APIResponse[List[SectionSummary]], status_code=status.HTTP_200_OK)
async def read_sections(session: SessionDep) -> Any:
    """Wizard sections in display order with the number of stored questions."""
    try:
        counts = await QuestionRepository(session).count_by_section()
        sections = [
            SectionSummary(
                id=section.id,
                title=section.title,
                icon=section.icon,
                question_count=counts.get(section.id, 0),
            )
            for section in get_catalog()
        ]
        return APIResponse.success_response(data=sections)
    except HTTPException as http_exc:
        raise http_exc
    except Exception as e:
        logger.error(f"Error fetching sections: {e}", exc_info=True)
        raise InternalServerErrorException(detail="Failed to retrieve sections")


@router.get("/questions", response_model=APIResponse[List[QuestionWithOptions]], status_code=status.HTTP_200_OK)
async def read_questions(session: SessionDep) -> Any:
    try:
        questions = await QuestionRepository(session).list_all()
        return APIResponse.success_response(
            data=[QuestionWithOptions.model_validate(q) for q in questions]
        )
    except HTTPException as http_exc:
        raise http_exc
    except Exception as e:
        logger.error(f"Error fetching questions: {e}", exc_info=True)
        raise InternalServerErrorException(detail="Failed to retrieve questions")


@router.get(
    "/questions/section/{section}",
    response_model=APIResponse[List[QuestionWithOptions]],
    status_code=status.HTTP_200_OK,
)
async def read_section_questions(session: SessionDep, section: str) -> Any:
    try:
        questions = await QuestionRepository(session).list_by_section(section)
        return APIResponse.success_response(
            data=[QuestionWithOptions.model_validate(q) for q in questions]
        )
    except HTTPException as http_exc:
        raise http_exc
    except Exception as e:
        logger.error(f"Error fetching questions for section {section}: {e}", exc_info=True)
        raise InternalServerErrorException(detail="Failed to retrieve questions")
