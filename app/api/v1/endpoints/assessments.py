import logging
from typing import Any
from fastapi import APIRouter, HTTPException, status
from app.api.deps import SessionDep
from app.repositories.assessment_repository import AssessmentRepository
from app.repositories.user_repository import UserRepository
from app.schemas.assessment import (
    Assessment as AssessmentSchema,
    AssessmentCreate,
    AssessmentUpdate,
)
from app.schemas.response import APIResponse
from app.core.errors import (
    BadRequestException,
    InternalServerErrorException,
    NotFoundException,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=APIResponse[AssessmentSchema], status_code=status.HTTP_201_CREATED)
async def create_assessment(session: SessionDep, assessment_in: AssessmentCreate) -> Any:
    try:
        if not await UserRepository(session).get_by_id(assessment_in.user_id):
            raise NotFoundException(detail="User not found")

        repo = AssessmentRepository(session)
        if await repo.get_by_user_and_year(assessment_in.user_id, assessment_in.year):
            raise BadRequestException(
                detail=f"An assessment for {assessment_in.year} already exists for this user"
            )

        assessment = await repo.create(assessment_in)
        await session.commit()
        await session.refresh(assessment)
        return APIResponse.success_response(
            data=AssessmentSchema.model_validate(assessment),
            message="Assessment created successfully"
        )
    except HTTPException as http_exc:
        raise http_exc
    except Exception as e:
        logger.error(f"Error creating assessment: {e}", exc_info=True)
        await session.rollback()
        raise InternalServerErrorException(detail="Failed to create assessment")


@router.put("/{assessment_id}", response_model=APIResponse[AssessmentSchema], status_code=status.HTTP_200_OK)
async def update_assessment(
    session: SessionDep, assessment_id: int, assessment_in: AssessmentUpdate
) -> Any:
    try:
        assessment = await AssessmentRepository(session).update(assessment_id, assessment_in)
        if not assessment:
            raise NotFoundException(detail="Assessment not found")
        await session.commit()
        await session.refresh(assessment)
        return APIResponse.success_response(
            data=AssessmentSchema.model_validate(assessment),
            message="Assessment saved"
        )
    except HTTPException as http_exc:
        raise http_exc
    except Exception as e:
        logger.error(f"Error updating assessment {assessment_id}: {e}", exc_info=True)
        await session.rollback()
        raise InternalServerErrorException(detail="Failed to update assessment")


@router.post(
    "/{assessment_id}/complete",
    response_model=APIResponse[AssessmentSchema],
    status_code=status.HTTP_200_OK,
)
async def complete_assessment(session: SessionDep, assessment_id: int) -> Any:
    try:
        assessment = await AssessmentRepository(session).complete(assessment_id)
        if not assessment:
            raise NotFoundException(detail="Assessment not found")
        await session.commit()
        await session.refresh(assessment)
        return APIResponse.success_response(
            data=AssessmentSchema.model_validate(assessment),
            message="Assessment completed"
        )
    except HTTPException as http_exc:
        raise http_exc
    except Exception as e:
        logger.error(f"Error completing assessment {assessment_id}: {e}", exc_info=True)
        await session.rollback()
        raise InternalServerErrorException(detail="Failed to complete assessment")


@router.get("/{assessment_id}", response_model=APIResponse[AssessmentSchema], status_code=status.HTTP_200_OK)
async def read_assessment(session: SessionDep, assessment_id: int) -> Any:
    try:
        assessment = await AssessmentRepository(session).get_by_id(assessment_id)
        if not assessment:
            raise NotFoundException(detail="Assessment not found")
        return APIResponse.success_response(data=AssessmentSchema.model_validate(assessment))
    except HTTPException as http_exc:
        raise http_exc
    except Exception as e:
        logger.error(f"Error fetching assessment {assessment_id}: {e}", exc_info=True)
        raise InternalServerErrorException(detail="Failed to retrieve assessment")
