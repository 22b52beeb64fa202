"""Shared fixtures for fuzzyselect tests."""

import pytest

from fuzzyselect import RecursiveMatcher, SequentialMatcher, sequence_getter
from fuzzyselect.constants import STRATEGY_ENV_VAR


@pytest.fixture(autouse=True)
def _no_strategy_env(monkeypatch):
    """Keep a developer's FUZZYSELECT_STRATEGY out of the tests."""
    monkeypatch.delenv(STRATEGY_ENV_VAR, raising=False)


@pytest.fixture
def recursive():
    return RecursiveMatcher()


@pytest.fixture
def sequential():
    return SequentialMatcher()


@pytest.fixture
def getter():
    return sequence_getter("N/A")


@pytest.fixture(scope="session")
def qapp():
    """A QCoreApplication for the proxy model tests."""
    from PySide6.QtCore import QCoreApplication

    app = QCoreApplication.instance() or QCoreApplication([])
    yield app
