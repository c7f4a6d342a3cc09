import logging
from typing import Any, Optional
from fastapi import APIRouter, File, Form, HTTPException, UploadFile, status
from app.api.deps import SessionDep
from app.repositories.file_repository import FileRepository
from app.repositories.question_repository import QuestionRepository
from app.repositories.response_repository import ResponseRepository
from app.repositories.user_repository import UserRepository
from app.schemas.file import AssessmentFile as AssessmentFileSchema, AssessmentFileCreate
from app.schemas.response import APIResponse
from app.services.uploads import store_upload, validate_upload
from app.core.errors import InternalServerErrorException, NotFoundException

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("", response_model=APIResponse[AssessmentFileSchema], status_code=status.HTTP_201_CREATED)
async def upload_file(
    session: SessionDep,
    file: UploadFile = File(...),
    user_id: int = Form(..., alias="userId"),
    question_id: Optional[int] = Form(None, alias="questionId"),
) -> Any:
    stored_path = None
    try:
        content = await file.read()
        validate_upload(file.filename, file.content_type, len(content))

        if not await UserRepository(session).get_by_id(user_id):
            raise NotFoundException(detail="User not found")
        if question_id is not None and not await QuestionRepository(session).get_by_id(question_id):
            raise NotFoundException(detail="Question not found")

        stored_path = store_upload(content, file.filename)
        assessment_file = await FileRepository(session).create(
            AssessmentFileCreate(
                user_id=user_id,
                question_id=question_id,
                file_name=file.filename,
                file_type=file.content_type,
                file_size=len(content),
                file_path=str(stored_path),
            )
        )
        if question_id is not None:
            await ResponseRepository(session).upsert(user_id, question_id, file.filename)

        await session.commit()
        await session.refresh(assessment_file)
        return APIResponse.success_response(
            data=AssessmentFileSchema.model_validate(assessment_file),
            message="File uploaded successfully"
        )
    except HTTPException as http_exc:
        raise http_exc
    except Exception as e:
        logger.error(f"Error uploading file {file.filename}: {e}", exc_info=True)
        await session.rollback()
        if stored_path is not None:
            stored_path.unlink(missing_ok=True)
        raise InternalServerErrorException(detail="Failed to upload file")
