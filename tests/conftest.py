"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterator

from loguru import logger
import pytest

from funcdeck.registry.catalog import reset_catalog


@pytest.fixture(autouse=True)
def _reset_process_catalog() -> Iterator[None]:
    """Tear down the process-wide catalog around each test.

    The catalog is cached per process, so tests that build it from different
    env configurations would otherwise see each other's targets.
    """
    reset_catalog()
    yield
    reset_catalog()


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect loguru messages emitted during a test."""
    messages: list[str] = []
    sink_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(sink_id)
