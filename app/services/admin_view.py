"""Read-only aggregation for the admin dashboard."""
from typing import Dict, Iterable, List

from app.models.response import Response
from app.repositories.response_repository import UserSubmissionRecord
from app.schemas.admin import OverviewEntry, OverviewSection, UserOverview
from app.schemas.question import QuestionType
from app.schemas.user import User as UserSchema
from app.services.answers import split_checkbox_answer


def format_section_name(section: str) -> str:
    """``password-policy`` -> ``Password Policy``"""
    return " ".join(word[:1].upper() + word[1:] for word in section.split("-"))


def group_responses_by_section(responses: Iterable[Response]) -> Dict[str, List[Response]]:
    grouped: Dict[str, List[Response]] = {}
    for response in responses:
        grouped.setdefault(response.question.section, []).append(response)
    for section_responses in grouped.values():
        section_responses.sort(key=lambda r: (r.question.order, r.question.id))
    return grouped


def to_overview_entry(response: Response) -> OverviewEntry:
    question = response.question
    if question.type == QuestionType.CHECKBOX.value:
        tags = split_checkbox_answer(response.answer)
    else:
        tags = [response.answer] if response.answer else []
    return OverviewEntry(
        question_id=question.id,
        question=question.text,
        type=question.type,
        answer=response.answer,
        tags=tags,
    )


def build_admin_overview(records: Iterable[UserSubmissionRecord]) -> List[UserOverview]:
    overview = []
    for record in records:
        sections = [
            OverviewSection(
                section=section,
                title=format_section_name(section),
                entries=[to_overview_entry(r) for r in section_responses],
            )
            for section, section_responses in group_responses_by_section(record.responses).items()
        ]
        overview.append(
            UserOverview(
                user=UserSchema.model_validate(record.user),
                sections=sections,
                assessment_count=len(record.assessments),
                completed_assessments=sum(1 for a in record.assessments if a.is_completed),
            )
        )
    return overview
