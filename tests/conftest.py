"""Shared fixtures: small domain types and a clean settings/logging state per test."""
from __future__ import annotations

import logging
from dataclasses import dataclass

import pytest
import structlog

from rulebind.config import get_settings
from rulebind.logging import LoggerRegistry


@dataclass
class Address:
    street: str | None
    city: str | None


@dataclass
class Person:
    name: str | None
    age: int | None
    email: str | None = None
    address: Address | None = None


@dataclass
class CreditCard:
    id: str | None
    owner: Person | None


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    for var in ("RULEBIND_LOG_LEVEL", "RULEBIND_LOG_JSON", "RULEBIND_DEFAULT_MODE", "RULEBIND_MAX_FAILURES"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_logging():
    """Undo configure_logging: structlog defaults, root handlers and cached loggers."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers = handlers
    root.setLevel(level)
    LoggerRegistry._loggers.clear()


@pytest.fixture
def alice() -> Person:
    return Person(name="Alice", age=30)


@pytest.fixture
def invalid_person() -> Person:
    return Person(name=None, age=-1)
