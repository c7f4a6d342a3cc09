from typing import Optional
from datetime import datetime
from app.schemas.base import CamelModel


class AssessmentFileCreate(CamelModel):
    user_id: int
    question_id: Optional[int] = None
    file_name: str
    file_type: str
    file_size: int
    file_path: str


class AssessmentFile(AssessmentFileCreate):
    id: int
    uploaded_at: datetime
