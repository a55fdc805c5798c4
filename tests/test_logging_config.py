"""Tests for netgauge.logging_config."""

import logging
import threading

import pytest

from netgauge.logging_config import configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Test log level selection from the environment."""

    def test_default_level_info(self, monkeypatch, restore_root_logger):
        monkeypatch.delenv("NETGAUGE_LOG_LEVEL", raising=False)
        configure_logging()
        assert restore_root_logger.level == logging.INFO

    def test_debug_level(self, monkeypatch, restore_root_logger):
        monkeypatch.setenv("NETGAUGE_LOG_LEVEL", "debug")
        configure_logging()
        assert restore_root_logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, monkeypatch, restore_root_logger):
        monkeypatch.setenv("NETGAUGE_LOG_LEVEL", "chatty")
        configure_logging()
        assert restore_root_logger.level == logging.INFO

    def test_explicit_level_overrides_environment(self, monkeypatch, restore_root_logger):
        monkeypatch.setenv("NETGAUGE_LOG_LEVEL", "DEBUG")
        configure_logging("warning")
        assert restore_root_logger.level == logging.WARNING


class TestLogOutput:
    """Test what configured records look like on stderr."""

    def test_unknown_level_warns(self, monkeypatch, restore_root_logger, capsys):
        monkeypatch.setenv("NETGAUGE_LOG_LEVEL", "chatty")
        configure_logging()

        err = capsys.readouterr().err
        assert "WARNING" in err
        assert "Unknown log level 'chatty' in NETGAUGE_LOG_LEVEL" in err

    def test_known_level_does_not_warn(self, monkeypatch, restore_root_logger, capsys):
        monkeypatch.setenv("NETGAUGE_LOG_LEVEL", "INFO")
        configure_logging()
        assert "Unknown log level" not in capsys.readouterr().err

    def test_records_name_thread(self, monkeypatch, restore_root_logger, capsys):
        monkeypatch.setenv("NETGAUGE_LOG_LEVEL", "INFO")
        configure_logging()

        def log_from_worker():
            logging.getLogger("netgauge.collection_loop").warning("Sample failed")

        worker = threading.Thread(target=log_from_worker, name="latency-worker")
        worker.start()
        worker.join()

        err = capsys.readouterr().err
        assert "[MainThread] Logging configured" in err
        assert "[latency-worker] Sample failed" in err
