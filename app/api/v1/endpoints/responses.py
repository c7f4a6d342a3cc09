import logging
from typing import Any
from fastapi import APIRouter, HTTPException, status
from app.api.deps import SessionDep
from app.repositories.question_repository import QuestionRepository
from app.repositories.response_repository import ResponseRepository
from app.repositories.user_repository import UserRepository
from app.schemas.answer import Response as ResponseSchema, ResponseCreate
from app.schemas.response import APIResponse
from app.services.answers import normalize_answer
from app.core.errors import InternalServerErrorException, NotFoundException

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=APIResponse[ResponseSchema], status_code=status.HTTP_200_OK)
async def save_response(session: SessionDep, response_in: ResponseCreate) -> Any:
    """Auto-save one answer. Repeated calls for the same pair overwrite it."""
    try:
        if not await UserRepository(session).get_by_id(response_in.user_id):
            raise NotFoundException(detail="User not found")
        question = await QuestionRepository(session).get_by_id(response_in.question_id)
        if not question:
            raise NotFoundException(detail="Question not found")

        answer = normalize_answer(question.type, response_in.answer)
        response = await ResponseRepository(session).upsert(
            response_in.user_id, response_in.question_id, answer
        )
        await session.commit()
        return APIResponse.success_response(
            data=ResponseSchema.model_validate(response),
            message="Response saved"
        )
    except HTTPException as http_exc:
        raise http_exc
    except Exception as e:
        logger.error(f"Failed to save response: {e}", exc_info=True)
        await session.rollback()
        raise InternalServerErrorException(detail="Failed to save response")
