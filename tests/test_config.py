"""
Unit Tests for Configuration and Logging Setup
"""

import logging

import pytest
from chesscore.board import Player
from chesscore.config import EngineConfig
from chesscore.errors import ChessCoreError, ConfigError
from chesscore.utils import setup_logger


class TestEngineConfig:
    """Tests for EngineConfig validation."""

    def test_defaults(self):
        config = EngineConfig()

        assert config.search_depth == 2
        assert config.opponent_depth == 3
        assert config.opponent is Player.BLACK
        assert not config.score_from_root
        assert config.logging_level == logging.INFO

    def test_opponent_from_string(self):
        assert EngineConfig(opponent="WHITE").opponent is Player.WHITE

    @pytest.mark.parametrize("kwargs", [
        {"search_depth": 0},
        {"opponent_depth": -1},
        {"opponent": "green"},
        {"log_level": "LOUD"},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ConfigError):
            EngineConfig(**kwargs)

    def test_config_error_hierarchy(self):
        assert issubclass(ConfigError, ChessCoreError)
        assert issubclass(ConfigError, ValueError)

    def test_log_level_normalized(self):
        config = EngineConfig(log_level="debug")

        assert config.log_level == "DEBUG"
        assert config.logging_level == logging.DEBUG


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_stream_handler(self):
        logger = setup_logger(logging.DEBUG)

        assert logger.name == "chesscore"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "engine.log"
        logger = setup_logger(logging.INFO, log_file)
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()

        assert "hello" in log_file.read_text()

        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def test_repeated_setup_closes_previous_file_handler(self, tmp_path):
        first = setup_logger(logging.INFO, tmp_path / "first.log").handlers[0]
        logger = setup_logger(logging.INFO, tmp_path / "second.log")

        assert first.stream is None, "Previous file handler should be closed"
        assert first not in logger.handlers

        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logger()
        logger = setup_logger()
        assert len(logger.handlers) == 1
