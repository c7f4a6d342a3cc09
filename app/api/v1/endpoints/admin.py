import logging
from typing import Any, List
from fastapi import APIRouter, HTTPException, status
from app.api.deps import CurrentAdmin, SessionDep
from app.core import security
from app.core.errors import InternalServerErrorException, UnauthorizedException
from app.repositories.response_repository import ResponseRepository
from app.schemas.admin import UserOverview, UserSubmission
from app.schemas.answer import ResponseWithQuestion
from app.schemas.assessment import Assessment as AssessmentSchema
from app.schemas.user import User as UserSchema
from app.schemas.response import APIResponse
from app.schemas.token import AdminLogin, Token
from app.services.admin_view import build_admin_overview

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/auth", response_model=APIResponse[Token], status_code=status.HTTP_200_OK)
async def admin_login(login_data: AdminLogin) -> Any:
    if not security.verify_admin_password(login_data.password):
        logger.warning("Rejected admin login attempt")
        raise UnauthorizedException(detail="Invalid password")

    token = Token(
        access_token=security.create_access_token(security.ADMIN_SUBJECT),
        token_type="bearer",
    )
    return APIResponse.success_response(data=token, message="Authenticated")


@router.get("/responses", response_model=APIResponse[List[UserSubmission]], status_code=status.HTTP_200_OK)
async def read_all_responses(session: SessionDep, admin: CurrentAdmin) -> Any:
    """Every respondent with their responses and assessments."""
    try:
        records = await ResponseRepository(session).grouped_by_user()
        data = [
            UserSubmission(
                user=UserSchema.model_validate(record.user),
                responses=[ResponseWithQuestion.model_validate(r) for r in record.responses],
                assessments=[AssessmentSchema.model_validate(a) for a in record.assessments],
            )
            for record in records
        ]
        return APIResponse.success_response(data=data)
    except HTTPException as http_exc:
        raise http_exc
    except Exception as e:
        logger.error(f"Error fetching admin responses: {e}", exc_info=True)
        raise InternalServerErrorException(detail="Failed to retrieve responses")


@router.get("/overview", response_model=APIResponse[List[UserOverview]], status_code=status.HTTP_200_OK)
async def read_overview(session: SessionDep, admin: CurrentAdmin) -> Any:
    """Responses grouped by user and section, checkbox answers split into tags."""
    try:
        records = await ResponseRepository(session).grouped_by_user()
        return APIResponse.success_response(data=build_admin_overview(records))
    except HTTPException as http_exc:
        raise http_exc
    except Exception as e:
        logger.error(f"Error building admin overview: {e}", exc_info=True)
        raise InternalServerErrorException(detail="Failed to build overview")
