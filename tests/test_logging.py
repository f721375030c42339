import io
import logging
import sys

import numpy as np
import pytest

from lpsimplex.logging import configure_logging, get_logger, set_log_level
from lpsimplex.simplex.solver import simplex


def test_get_logger_namespaces_and_caches():
    logger = get_logger("custom")
    assert logger.name == "lpsimplex.custom"
    assert get_logger("custom") is logger
    assert get_logger("lpsimplex.simplex.solver").name == "lpsimplex.simplex.solver"
    assert get_logger().name == "lpsimplex"
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_set_log_level_accepts_names():
    logger = get_logger("levels")
    try:
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG
        set_log_level(logging.ERROR)
        assert logger.level == logging.ERROR
    finally:
        set_log_level(logging.WARNING)


def test_unknown_level_name_raises():
    with pytest.raises(ValueError, match="VERBOSE"):
        set_log_level("VERBOSE")
    with pytest.raises(ValueError):
        configure_logging(level="basicConfig", stream=sys.__stderr__)


def test_solver_logs_pivots_at_debug_level():
    get_logger("lpsimplex.simplex.solver")
    stream = io.StringIO()
    try:
        configure_logging(level="DEBUG", stream=stream)
        simplex(np.array([[1.0, 1.0], [1.0, -1.0]]), np.array([4.0, 0.0]), np.array([1.0, 1.0]))
    finally:
        configure_logging(level=logging.WARNING, stream=sys.__stderr__)
    output = stream.getvalue()
    assert "[DEBUG] lpsimplex.simplex.solver: pivot 1" in output
    assert "optimal value 4" in output
