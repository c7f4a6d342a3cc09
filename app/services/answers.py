"""Encoding of stored answer strings.

Every answer is persisted as a single string. Checkbox answers hold the
selected option values joined with ``,``.
"""
from typing import Iterable, List

from app.schemas.question import QuestionType

CHECKBOX_SEPARATOR = ","


def join_checkbox_answer(values: Iterable[str]) -> str:
    values = list(values)
    for value in values:
        if CHECKBOX_SEPARATOR in value:
            raise ValueError(f"Option value {value!r} contains '{CHECKBOX_SEPARATOR}'")
    return CHECKBOX_SEPARATOR.join(values)


def split_checkbox_answer(answer: str) -> List[str]:
    if not answer:
        return []
    return answer.split(CHECKBOX_SEPARATOR)


def normalize_answer(question_type: str, answer: str) -> str:
    """Normalise an incoming answer for storage.

    Checkbox answers are stripped, de-duplicated (first occurrence wins) and
    cleared of empty values. Other answers are stored verbatim.
    """
    if question_type != QuestionType.CHECKBOX.value:
        return answer

    seen = []
    for value in split_checkbox_answer(answer):
        value = value.strip()
        if value and value not in seen:
            seen.append(value)
    return join_checkbox_answer(seen)
