"""Shared fixtures for editor tests."""

from __future__ import annotations

from datetime import datetime

import pytest

from pinball_editor.commands import EditorController
from pinball_editor.config import EditorConfig
from pinball_editor.models.session import EditorSession


def _fixed_clock() -> datetime:
    return datetime(2024, 1, 1, 12, 30, 45)


@pytest.fixture
def session() -> EditorSession:
    return EditorSession.create(EditorConfig(seed_starter_track=False), clock=_fixed_clock)


@pytest.fixture
def controller(session: EditorSession) -> EditorController:
    return EditorController(session)
