"""Question catalog loaded from YAML.

The catalog defines the wizard sections in display order and the questions
(with options) seeded into the ``questions`` and ``options`` tables.
"""
import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, model_validator

from app.core.config import settings
from app.schemas.question import QuestionType
from app.services.answers import CHECKBOX_SEPARATOR

logger = logging.getLogger(__name__)


class CatalogOption(BaseModel):
    text: str
    value: str


class CatalogQuestion(BaseModel):
    text: str
    type: QuestionType
    options: List[CatalogOption] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_options(self) -> "CatalogQuestion":
        needs_options = self.type in (QuestionType.RADIO, QuestionType.CHECKBOX)
        if needs_options and not self.options:
            raise ValueError(f"{self.type.value} question '{self.text}' has no options")
        if not needs_options and self.options:
            raise ValueError(f"{self.type.value} question '{self.text}' cannot have options")
        if self.type == QuestionType.CHECKBOX:
            for option in self.options:
                if CHECKBOX_SEPARATOR in option.value:
                    raise ValueError(f"Checkbox value '{option.value}' contains '{CHECKBOX_SEPARATOR}'")
        return self


class CatalogSection(BaseModel):
    id: str
    title: str
    icon: Optional[str] = None
    questions: List[CatalogQuestion] = Field(default_factory=list)


def load_catalog(path: Optional[str] = None) -> List[CatalogSection]:
    catalog_path = Path(path or settings.QUESTIONS_FILE)
    raw = yaml.safe_load(catalog_path.read_text(encoding="utf-8"))
    sections = [CatalogSection.model_validate(item) for item in raw["sections"]]
    logger.debug(f"Loaded {len(sections)} sections from {catalog_path}")
    return sections


@lru_cache
def get_catalog() -> List[CatalogSection]:
    return load_catalog()
