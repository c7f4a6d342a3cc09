"""Tests for the wizard stepper and auto-saver."""

import asyncio

import pytest

from app.wizard.autosave import AutoSaver
from app.wizard.state import FormSection, WizardState


@pytest.fixture
def state() -> WizardState:
    return WizardState(
        sections=[
            FormSection(id="user-info", title="User Information"),
            FormSection(id="general-org", title="General Organization"),
            FormSection(id="privacy-compliance", title="Privacy & Compliance"),
        ]
    )


class TestWizardState:

    def test_next_marks_completion(self, state) -> None:
        section = state.next()

        assert section.id == "general-org"
        assert state.sections[0].completed is True
        assert state.sections[1].completed is False

    def test_next_on_last_section_is_noop(self, state) -> None:
        state.jump(2)
        state.next()

        assert state.current == 2
        assert state.sections[2].completed is False

    def test_previous_keeps_completion(self, state) -> None:
        state.next()
        state.previous()

        assert state.current == 0
        assert state.sections[0].completed is True

    def test_previous_on_first_section(self, state) -> None:
        state.previous()

        assert state.current == 0

    def test_jump_is_unguarded(self, state) -> None:
        state.jump(2)

        assert state.current == 2
        assert not any(section.completed for section in state.sections)

    def test_jump_out_of_range(self, state) -> None:
        with pytest.raises(IndexError):
            state.jump(3)

    def test_progress(self, state) -> None:
        assert state.progress == pytest.approx(100 / 3)
        state.jump(2)
        assert state.progress == pytest.approx(100)
        assert state.is_last

    def test_toggle_option(self, state) -> None:
        assert state.toggle_option(5, "gdpr", True) == "gdpr"
        assert state.toggle_option(5, "ccpa", True) == "gdpr,ccpa"
        assert state.toggle_option(5, "gdpr", True) == "gdpr,ccpa"
        assert state.toggle_option(5, "gdpr", False) == "ccpa"
        assert state.toggle_option(5, "ccpa", False) == ""
        assert state.answers[5] == ""

    def test_empty_wizard_rejected(self) -> None:
        with pytest.raises(ValueError):
            WizardState(sections=[])


class TestAutoSaver:

    async def test_saves_every_tick_without_changes(self) -> None:
        calls = []

        async def save():
            calls.append(1)

        async with AutoSaver(save, interval=0.01) as saver:
            await asyncio.sleep(0.08)
            assert saver.running

        assert len(calls) >= 3
        assert saver.last_saved is not None
        assert not saver.running

    async def test_save_now(self) -> None:
        calls = []

        async def save():
            calls.append(1)

        saver = AutoSaver(save, interval=60)
        assert await saver.save_now() is True
        assert await saver.save_now() is True

        assert len(calls) == 2

    async def test_failures_do_not_stop_the_loop(self) -> None:
        calls = []

        async def save():
            calls.append(1)
            if len(calls) == 1:
                raise RuntimeError("server unavailable")

        async with AutoSaver(save, interval=0.01) as saver:
            await asyncio.sleep(0.08)

        assert saver.failures == 1
        assert len(calls) >= 2
        assert saver.last_saved is not None

    async def test_default_interval_from_settings(self) -> None:
        async def save():
            pass

        assert AutoSaver(save).interval == 30
