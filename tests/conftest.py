from __future__ import annotations

from typing import List

import pytest

from livetest import bootstrap

from .fakes import FakeClock, FakeSubject


@pytest.fixture(scope="session", autouse=True)
def setup_livetest_registry() -> None:
    """Register built-in reporters once for the entire test session."""

    bootstrap()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def journal() -> List[str]:
    return []


@pytest.fixture
def subject(journal: List[str], clock: FakeClock) -> FakeSubject:
    return FakeSubject(journal, clock)
