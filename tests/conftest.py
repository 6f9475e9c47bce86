"""
Shared fixtures for the MathJaxLoader tests.
"""
import pytest

from .fakes import FakeRenderer, RecordingSleep


@pytest.fixture
def fake_renderer():
    return FakeRenderer()


@pytest.fixture
def recording_sleep():
    return RecordingSleep()
