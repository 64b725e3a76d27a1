"""Tests for debug logging through loguru."""

import pytest
from loguru import logger

from ratdeduct import RatioPair, pair_compose, try_from_tree, NotGroup


@pytest.fixture
def messages():
    """Capture ratdeduct debug messages."""
    captured = []
    logger.enable("ratdeduct")
    handler = logger.add(lambda m: captured.append(m.record["message"]), level="DEBUG")
    yield captured
    logger.remove(handler)
    logger.disable("ratdeduct")


class TestLogging:
    """Tests for log output."""

    def test_cancellation_logged(self, messages):
        """Cancelling compositions log the cancelled terms."""
        pair_compose(RatioPair(["a"], ["b"]), RatioPair(["b"], []))
        assert any("cancelled 1 term" in m for m in messages)

    def test_no_cancellation_not_logged(self, messages):
        """Compositions that cancel nothing stay quiet."""
        pair_compose(RatioPair(["a"], []), RatioPair(["b"], []))
        assert messages == []

    def test_shape_error_logged(self, messages):
        """Rejected trees are logged with the error kind."""
        with pytest.raises(NotGroup):
            try_from_tree("x")
        assert any("NotGroup" in m for m in messages)

    def test_disabled_by_default(self):
        """Nothing is emitted unless the package is enabled."""
        captured = []
        handler = logger.add(lambda m: captured.append(m), level="DEBUG")
        try:
            pair_compose(RatioPair([], ["b"]), RatioPair(["b"], []))
        finally:
            logger.remove(handler)
        assert captured == []
