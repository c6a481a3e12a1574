"""Unit tests for command-line logging setup."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import logging

import pytest

from mdliteral.logging_utils import configure_logging, resolve_log_level


@pytest.mark.unit
class TestResolveLogLevel:
    """Test level name resolution."""

    @pytest.mark.parametrize(
        "value,expected",
        [("DEBUG", logging.DEBUG), ("info", logging.INFO), (logging.ERROR, logging.ERROR), ("nonsense", logging.WARNING)],
    )
    def test_levels(self, value, expected):
        assert resolve_log_level(value) == expected


@pytest.mark.unit
class TestConfigureLogging:
    """Test handler installation on the root logger."""

    def test_console_handler(self, restore_root_logger, capsys):
        root = configure_logging("INFO")

        assert root is logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

        logging.getLogger("mdliteral.test").info("hello")
        assert "INFO: hello" in capsys.readouterr().err

    def test_repeated_calls_do_not_duplicate(self, restore_root_logger):
        configure_logging("WARNING")
        configure_logging("WARNING")
        assert len(logging.getLogger().handlers) == 1

    def test_trace_format(self, restore_root_logger, capsys):
        configure_logging("DEBUG", trace_mode=True)

        logging.getLogger("mdliteral.test").debug("traced")
        assert "[mdliteral.test] traced" in capsys.readouterr().err

    def test_log_file(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "run.log"
        configure_logging("INFO", log_file=str(log_file))

        logging.getLogger("mdliteral.test").info("to file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "to file" in log_file.read_text(encoding="utf-8")

    def test_unwritable_log_file(self, restore_root_logger, tmp_path, capsys):
        configure_logging("INFO", log_file=str(tmp_path / "missing" / "run.log"))

        assert len(logging.getLogger().handlers) == 1
        assert "Could not open log file" in capsys.readouterr().err
