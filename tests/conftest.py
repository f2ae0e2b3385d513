"""Shared pytest fixtures for DeepFocus tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from deepfocus.database.db import configure_engine, init_db
from deepfocus.timer.collaborators import MemoryDurationStore
from deepfocus.timer.engine import TimerEngine

from helpers import FakeClock, RecordingFeedback, RecordingNotifier


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def test_db():
    """Point every test at a fresh in-memory SQLite database."""
    configure_engine("sqlite:///:memory:")
    init_db()
    yield


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def feedback():
    return RecordingFeedback()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def store():
    return MemoryDurationStore()


@pytest.fixture
def engine(qapp, store, feedback, notifier, clock):
    """Fresh TimerEngine wired to recording fakes and a fake clock."""
    return TimerEngine(
        parent=None,
        store=store,
        feedback=feedback,
        notifier=notifier,
        clock=clock,
    )
