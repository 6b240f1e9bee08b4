"""Shared fixtures for the slavonym test suite."""

import pytest

from slavonym.engine import NameCaseEngine


@pytest.fixture
def russian():
    """Fresh Russian engine per test (engines carry per-task state)."""
    return NameCaseEngine("ru")


@pytest.fixture
def ukrainian():
    """Fresh Ukrainian engine per test."""
    return NameCaseEngine("uk")
