"""Tests for centralized logging behavior and configuration."""

import logging
from fractions import Fraction
from io import StringIO

import pytest

from cycleratio.lib.algorithms.min_cycle_ratio import min_cycle_ratio
from cycleratio.lib.graph import StrictDiGraph
from cycleratio.logging import (
    PACKAGE_LOGGER,
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Reset logging state before and after each test to avoid cross-test bleed."""
    reset_logging()
    yield
    reset_logging()


def test_effective_levels_enable_disable():
    """INFO by default, DEBUG after enable, back to INFO after disable."""
    logger = get_logger("cycleratio.test")

    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    try:
        logger.info("info-1")
        assert "info-1" in capture.getvalue()

        logger.debug("debug-1")
        assert "debug-1" not in capture.getvalue()

        enable_debug_logging()
        logger.debug("debug-2")
        assert "debug-2" in capture.getvalue()

        disable_debug_logging()
        logger.debug("debug-3")
        assert "debug-3" not in capture.getvalue()
    finally:
        logger.removeHandler(handler)


def test_global_level_propagates_to_children():
    logger1 = get_logger("cycleratio.module1")
    assert logger1.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert get_logger("cycleratio.module2").getEffectiveLevel() == logging.WARNING


def test_level_names_accepted():
    set_global_log_level("debug")
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG

    with pytest.raises(ValueError, match="Unknown log level"):
        set_global_log_level("chatty")


def test_setup_root_logger_idempotent():
    """Repeated setup should not accumulate handlers."""
    capture = StringIO()
    setup_root_logger(level=logging.INFO, handler=logging.StreamHandler(capture))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    assert len(package_logger.handlers) == 1

    setup_root_logger(level=logging.DEBUG)
    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.INFO


def test_custom_format_string_applied():
    capture = StringIO()
    fmt = "LEVEL:%(levelname)s|NAME:%(name)s|MSG:%(message)s"
    setup_root_logger(
        level=logging.INFO, format_string=fmt, handler=logging.StreamHandler(capture)
    )

    get_logger("cycleratio.test.format").info("hello")
    out = capture.getvalue()
    assert "LEVEL:INFO" in out
    assert "NAME:cycleratio.test.format" in out
    assert "MSG:hello" in out


def test_solver_rounds_logged_at_debug():
    capture = StringIO()
    setup_root_logger(level=logging.DEBUG, handler=logging.StreamHandler(capture))

    g = StrictDiGraph()
    g.add_node("A")
    g.add_node("B")
    g.add_edge("A", "B", cost=2, time=1)
    g.add_edge("B", "A", cost=4, time=1)
    min_cycle_ratio(g, r0=Fraction(10))

    out = capture.getvalue()
    assert "Round 0: ratio 10 -> 3 via 2-edge cycle" in out
    assert "Converged after 1 round(s) at ratio 3" in out
    assert "Minimum cycle ratio 3 (2-edge cycle)" in out
