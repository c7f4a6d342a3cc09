from typing import List
from pydantic import Field
from app.schemas.base import CamelModel
from app.schemas.user import User
from app.schemas.assessment import Assessment
from app.schemas.answer import ResponseWithQuestion


class UserSubmission(CamelModel):
    """One respondent with everything they have submitted."""
    user: User
    responses: List[ResponseWithQuestion] = Field(default_factory=list)
    assessments: List[Assessment] = Field(default_factory=list)


class OverviewEntry(CamelModel):
    question_id: int
    question: str
    type: str
    answer: str
    tags: List[str] = Field(default_factory=list)


class OverviewSection(CamelModel):
    section: str
    title: str
    entries: List[OverviewEntry] = Field(default_factory=list)


class UserOverview(CamelModel):
    user: User
    sections: List[OverviewSection] = Field(default_factory=list)
    assessment_count: int = 0
    completed_assessments: int = 0
