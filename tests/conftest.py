"""Shared fixtures and helpers for the test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from htmlruns.parser import MarkupParser

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def parser() -> MarkupParser:
    return MarkupParser()


@pytest.fixture
def markdown_parser() -> MarkupParser:
    return MarkupParser(source="markdown")


class FakeNavigator:
    """Navigator that records opened targets instead of launching a browser."""

    def __init__(self, usable: bool = True, error: Exception | None = None) -> None:
        self.usable = usable
        self.error = error
        self.checked: list[str] = []
        self.opened: list[str] = []

    async def can_open(self, target: str) -> bool:
        self.checked.append(target)
        if self.error is not None:
            raise self.error
        return self.usable

    def open(self, target: str) -> None:
        self.opened.append(target)


@pytest.fixture
def navigator() -> FakeNavigator:
    return FakeNavigator()
