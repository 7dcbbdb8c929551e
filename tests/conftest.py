"""Shared fixtures for cartesian tests."""

import pytest
from loguru import logger


class CountingFactory:
    """Factory producer recording how often it is traversed and drawn from."""

    def __init__(self, items):
        self.items = list(items)
        self.instantiated = 0
        self.drawn = 0
        self.closed = 0

    def __call__(self):
        self.instantiated += 1
        return self._generate()

    def _generate(self):
        try:
            for item in self.items:
                self.drawn += 1
                yield item
        finally:
            self.closed += 1


@pytest.fixture
def counting():
    """Return the CountingFactory class."""
    return CountingFactory


@pytest.fixture
def log_messages():
    """Capture cartesian's loguru messages in a list."""
    messages: list[str] = []
    logger.enable("cartesian")
    sink_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(sink_id)
    logger.disable("cartesian")
