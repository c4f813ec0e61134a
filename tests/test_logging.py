"""Tests for isapflow.logging."""

import logging
from io import StringIO

import pytest

from isapflow.lib.algorithms.isap import calc_max_flow
from isapflow.lib.graph import ResidualGraph
from isapflow.logging import ROOT_LOGGER_NAME, configure_logging, get_logger


@pytest.fixture
def root_logger():
    """The package logger, restored to its import-time state afterwards."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def _single_edge_graph():
    g = ResidualGraph(2)
    g.add_edge(0, 1, 4)
    return g


def test_import_installs_only_a_null_handler(root_logger):
    """Importing the package adds no output handler of its own."""
    assert any(isinstance(h, logging.NullHandler) for h in root_logger.handlers)
    assert not any(
        getattr(h, "_isapflow_configured", False) for h in root_logger.handlers
    )


def test_get_logger_joins_package_hierarchy():
    """Module loggers are children of the package logger and inherit its level."""
    logger = get_logger("isapflow.lib.algorithms.isap")
    assert logger.name == "isapflow.lib.algorithms.isap"
    assert logger.parent.name in ("isapflow.lib.algorithms", "isapflow.lib", "isapflow")
    assert logger.level == logging.NOTSET


def test_configure_logging_routes_engine_records(root_logger):
    """After configuration, debug records from the engine reach the handler."""
    stream = StringIO()
    configure_logging(
        logging.DEBUG,
        handler=logging.StreamHandler(stream),
        format_string="%(levelname)s:%(message)s",
    )
    calc_max_flow(_single_edge_graph(), 0, 1)
    assert "DEBUG:Max flow 0 -> 1: flow=4" in stream.getvalue()


def test_configure_logging_level_filters(root_logger):
    """An INFO configuration suppresses the engine's debug records."""
    stream = StringIO()
    configure_logging(logging.INFO, handler=logging.StreamHandler(stream))
    calc_max_flow(_single_edge_graph(), 0, 1)
    assert stream.getvalue() == ""


def test_configure_logging_replaces_previous_handler(root_logger):
    """Reconfiguring swaps the installed handler instead of stacking another."""
    first = configure_logging(logging.INFO, handler=logging.StreamHandler(StringIO()))
    second = configure_logging(logging.DEBUG, handler=logging.StreamHandler(StringIO()))
    assert first not in root_logger.handlers
    assert second in root_logger.handlers
    assert root_logger.level == logging.DEBUG
    assert any(isinstance(h, logging.NullHandler) for h in root_logger.handlers)
