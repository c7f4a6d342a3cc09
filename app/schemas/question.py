from enum import Enum
from typing import List, Optional
from datetime import datetime
from pydantic import Field
from app.schemas.base import CamelModel


class QuestionType(str, Enum):
    TEXT = "text"
    RADIO = "radio"
    CHECKBOX = "checkbox"
    FILE = "file"


class OptionBase(CamelModel):
    text: str
    value: str
    order: int


class OptionCreate(OptionBase):
    pass


class Option(OptionBase):
    id: int
    question_id: int


class QuestionBase(CamelModel):
    text: str
    type: QuestionType
    section: str
    order: int


class QuestionCreate(QuestionBase):
    options: List[OptionCreate] = Field(default_factory=list)


class Question(QuestionBase):
    id: int
    created_at: datetime


class QuestionWithOptions(Question):
    options: List[Option] = Field(default_factory=list)


class SectionSummary(CamelModel):
    id: str
    title: str
    icon: Optional[str] = None
    question_count: int = 0
