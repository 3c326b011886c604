"""
Tests for the logging setup helper.
"""
import io
import logging

import pytest

import utils.logger as logger_module


@pytest.fixture(autouse=True)
def restore_root_logger(monkeypatch):
    root = logging.getLogger()
    level = root.level
    previous = logger_module._handler
    yield
    if logger_module._handler is not None and logger_module._handler is not previous:
        root.removeHandler(logger_module._handler)
    if previous is not None and previous not in root.handlers:
        root.addHandler(previous)
    logger_module._handler = previous
    root.setLevel(level)


def test_reconfiguring_replaces_the_handler():
    first = logger_module.configure_logging("INFO", io.StringIO())
    second = logger_module.configure_logging("INFO", io.StringIO())

    root = logging.getLogger()
    assert second in root.handlers
    assert first not in root.handlers


def test_records_use_the_pipe_format():
    stream = io.StringIO()
    logger_module.configure_logging("DEBUG", stream)

    logger_module.get_logger("repositories.seller_repo").debug("Inserted seller #1 (Bob)")

    line = stream.getvalue().strip()
    assert line.endswith("| DEBUG    | repositories.seller_repo | Inserted seller #1 (Bob)")


def test_level_name_is_case_insensitive_and_unknown_falls_back_to_info():
    logger_module.configure_logging("warning", io.StringIO())
    assert logging.getLogger().level == logging.WARNING

    logger_module.configure_logging("LOUD", io.StringIO())
    assert logging.getLogger().level == logging.INFO
