import logging
from typing import Any, List
from fastapi import APIRouter, HTTPException, status
from app.api.deps import SessionDep
from app.repositories.user_repository import UserRepository
from app.repositories.assessment_repository import AssessmentRepository
from app.repositories.response_repository import ResponseRepository
from app.repositories.file_repository import FileRepository
from app.schemas.user import User as UserSchema, UserCreate
from app.schemas.assessment import Assessment as AssessmentSchema
from app.schemas.answer import ResponseWithQuestion
from app.schemas.file import AssessmentFile as AssessmentFileSchema
from app.schemas.response import APIResponse
from app.core.errors import InternalServerErrorException, NotFoundException

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=APIResponse[UserSchema], status_code=status.HTTP_201_CREATED)
async def create_user(session: SessionDep, user_in: UserCreate) -> Any:
    try:
        user = await UserRepository(session).create(user_in)
        await session.commit()
        await session.refresh(user)
        return APIResponse.success_response(
            data=UserSchema.model_validate(user),
            message="User created successfully"
        )
    except HTTPException as http_exc:
        raise http_exc
    except Exception as e:
        logger.error(f"Error creating user: {e}", exc_info=True)
        await session.rollback()
        raise InternalServerErrorException(detail="Failed to create user")


@router.get("/{user_id}", response_model=APIResponse[UserSchema], status_code=status.HTTP_200_OK)
async def read_user(session: SessionDep, user_id: int) -> Any:
    try:
        user = await UserRepository(session).get_by_id(user_id)
        if not user:
            raise NotFoundException(detail="User not found")
        return APIResponse.success_response(data=UserSchema.model_validate(user))
    except HTTPException as http_exc:
        raise http_exc
    except Exception as e:
        logger.error(f"Error fetching user {user_id}: {e}", exc_info=True)
        raise InternalServerErrorException(detail="Failed to retrieve user")


@router.get(
    "/{user_id}/assessments",
    response_model=APIResponse[List[AssessmentSchema]],
    status_code=status.HTTP_200_OK,
)
async def read_user_assessments(session: SessionDep, user_id: int) -> Any:
    try:
        if not await UserRepository(session).get_by_id(user_id):
            raise NotFoundException(detail="User not found")
        assessments = await AssessmentRepository(session).list_by_user(user_id)
        return APIResponse.success_response(
            data=[AssessmentSchema.model_validate(a) for a in assessments]
        )
    except HTTPException as http_exc:
        raise http_exc
    except Exception as e:
        logger.error(f"Error fetching assessments for user {user_id}: {e}", exc_info=True)
        raise InternalServerErrorException(detail="Failed to retrieve assessments")


@router.get(
    "/{user_id}/responses",
    response_model=APIResponse[List[ResponseWithQuestion]],
    status_code=status.HTTP_200_OK,
)
async def read_user_responses(session: SessionDep, user_id: int) -> Any:
    try:
        if not await UserRepository(session).get_by_id(user_id):
            raise NotFoundException(detail="User not found")
        responses = await ResponseRepository(session).list_by_user(user_id)
        return APIResponse.success_response(
            data=[ResponseWithQuestion.model_validate(r) for r in responses]
        )
    except HTTPException as http_exc:
        raise http_exc
    except Exception as e:
        logger.error(f"Error fetching responses for user {user_id}: {e}", exc_info=True)
        raise InternalServerErrorException(detail="Failed to retrieve responses")


@router.get(
    "/{user_id}/files",
    response_model=APIResponse[List[AssessmentFileSchema]],
    status_code=status.HTTP_200_OK,
)
async def read_user_files(session: SessionDep, user_id: int) -> Any:
    """Evidence documents a user has uploaded, oldest first."""
    try:
        if not await UserRepository(session).get_by_id(user_id):
            raise NotFoundException(detail="User not found")
        files = await FileRepository(session).list_by_user(user_id)
        return APIResponse.success_response(
            data=[AssessmentFileSchema.model_validate(f) for f in files]
        )
    except HTTPException as http_exc:
        raise http_exc
    except Exception as e:
        logger.error(f"Error fetching files for user {user_id}: {e}", exc_info=True)
        raise InternalServerErrorException(detail="Failed to retrieve files")
