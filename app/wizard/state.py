"""Section stepper for the assessment wizard.

The wizard is a linear forward/back stepper over a fixed ordered list of
sections. ``current`` is the only navigation state.
"""
from dataclasses import dataclass, field
from typing import Dict, List

from app.services.answers import join_checkbox_answer, split_checkbox_answer


@dataclass
class FormSection:
    id: str
    title: str
    completed: bool = False


@dataclass
class WizardState:
    sections: List[FormSection]
    current: int = 0
    answers: Dict[int, str] = field(default_factory=dict)

    def __post_init__(self):
        if not self.sections:
            raise ValueError("Wizard needs at least one section")

    @property
    def current_section(self) -> FormSection:
        return self.sections[self.current]

    @property
    def is_first(self) -> bool:
        return self.current == 0

    @property
    def is_last(self) -> bool:
        return self.current == len(self.sections) - 1

    @property
    def progress(self) -> float:
        return (self.current + 1) / len(self.sections) * 100

    def next(self) -> FormSection:
        """Mark the current section completed and advance; no-op on the last section."""
        if not self.is_last:
            self.sections[self.current].completed = True
            self.current += 1
        return self.current_section

    def previous(self) -> FormSection:
        # Going back never revokes completion.
        if self.current > 0:
            self.current -= 1
        return self.current_section

    def jump(self, index: int) -> FormSection:
        if not 0 <= index < len(self.sections):
            raise IndexError(f"Section index {index} out of range")
        self.current = index
        return self.current_section

    def set_answer(self, question_id: int, answer: str) -> None:
        self.answers[question_id] = answer

    def toggle_option(self, question_id: int, value: str, checked: bool) -> str:
        """Add or remove one checkbox value and return the new joined answer."""
        selected = split_checkbox_answer(self.answers.get(question_id, ""))
        if checked and value not in selected:
            selected.append(value)
        elif not checked:
            selected = [v for v in selected if v != value]
        answer = join_checkbox_answer(selected)
        self.answers[question_id] = answer
        return answer
