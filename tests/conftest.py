"""Shared pytest fixtures for jpdatetime tests."""

from __future__ import annotations

from datetime import datetime

import pytest
from click.testing import CliRunner

from jpdatetime.domain import context

FROZEN_NOW = datetime(2026, 10, 18, 12, 34, 56, tzinfo=context.TOKYO)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def frozen_now(monkeypatch: pytest.MonkeyPatch) -> datetime:
    """Pin the library clock to ``FROZEN_NOW`` and return it."""
    monkeypatch.setattr(context, "now", lambda: FROZEN_NOW)
    return FROZEN_NOW


def jst(*args: int) -> datetime:
    """Shorthand for an aware Tokyo datetime."""
    return datetime(*args, tzinfo=context.TOKYO)
