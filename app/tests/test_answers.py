"""Tests for answer encoding and the admin view helpers."""

from types import SimpleNamespace

import pytest

from app.services.admin_view import format_section_name, group_responses_by_section, to_overview_entry
from app.services.answers import join_checkbox_answer, normalize_answer, split_checkbox_answer


@pytest.mark.parametrize(
    "selection",
    [
        [],
        ["gdpr"],
        ["gdpr", "hipaa"],
        ["min-length-8", "mixed-case", "expiry"],
    ],
)
def test_checkbox_round_trip(selection) -> None:
    assert split_checkbox_answer(join_checkbox_answer(selection)) == selection


def test_empty_answer_splits_to_empty_selection() -> None:
    assert join_checkbox_answer([]) == ""
    assert split_checkbox_answer("") == []


def test_join_rejects_separator_in_value() -> None:
    with pytest.raises(ValueError):
        join_checkbox_answer(["a,b"])


def test_normalize_checkbox() -> None:
    assert normalize_answer("checkbox", "b, a ,,b") == "b,a"


def test_normalize_leaves_text_untouched() -> None:
    assert normalize_answer("text", " two incidents, both minor ") == " two incidents, both minor "


def test_format_section_name() -> None:
    assert format_section_name("password-policy") == "Password Policy"
    assert format_section_name("siem") == "Siem"


def make_response(section: str, order: int, answer: str, type_: str = "radio", qid: int = 1):
    question = SimpleNamespace(id=qid, section=section, order=order, type=type_, text=f"Q{qid}")
    return SimpleNamespace(question=question, answer=answer)


def test_group_responses_by_section() -> None:
    responses = [
        make_response("training", 2, "yes", qid=3),
        make_response("encryption", 1, "no", qid=1),
        make_response("training", 1, "no", qid=2),
    ]

    grouped = group_responses_by_section(responses)

    assert list(grouped) == ["training", "encryption"]
    assert [r.question.id for r in grouped["training"]] == [2, 3]


def test_overview_entry_splits_checkbox_tags() -> None:
    entry = to_overview_entry(make_response("privacy-compliance", 4, "gdpr,ccpa", type_="checkbox"))

    assert entry.tags == ["gdpr", "ccpa"]
    assert entry.answer == "gdpr,ccpa"


def test_overview_entry_empty_answer_has_no_tags() -> None:
    assert to_overview_entry(make_response("siem", 1, "", type_="text")).tags == []
