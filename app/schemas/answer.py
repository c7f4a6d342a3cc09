from datetime import datetime
from pydantic import Field
from app.schemas.base import CamelModel
from app.schemas.question import Question


class ResponseCreate(CamelModel):
    """Body of ``POST /responses``: one answer for one (user, question) pair."""
    user_id: int = Field(..., gt=0)
    question_id: int = Field(..., gt=0)
    answer: str


class Response(CamelModel):
    id: int
    user_id: int
    question_id: int
    answer: str
    created_at: datetime
    updated_at: datetime


class ResponseWithQuestion(Response):
    question: Question
