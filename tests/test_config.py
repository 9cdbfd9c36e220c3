"""Test class CalculatorSettings and function configure_logging."""
import logging

from arithmetic_calculator.common.config import CalculatorSettings
from arithmetic_calculator.common.logger import configure_logging, logger


def test_settings_defaults(monkeypatch) -> None:
    """Defaults apply when no CALC_* variable is set."""
    for name in ("CALC_LOG_LEVEL", "CALC_LOG_FILE", "CALC_ERROR_TEXT"):
        monkeypatch.delenv(name, raising=False)
    settings = CalculatorSettings(_env_file=None)
    assert settings.log_level == "INFO"
    assert settings.log_file is None
    assert settings.error_text == "Error"


def test_settings_from_environment(monkeypatch, tmp_path) -> None:
    """CALC_* variables override the defaults."""
    monkeypatch.setenv("CALC_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("CALC_LOG_FILE", str(tmp_path / "calc.log"))
    monkeypatch.setenv("CALC_ERROR_TEXT", "E")
    settings = CalculatorSettings(_env_file=None)
    assert settings.log_level == "DEBUG"
    assert settings.log_file == tmp_path / "calc.log"
    assert settings.error_text == "E"


def test_configure_logging_writes_file(tmp_path) -> None:
    """Records reach the configured log file at the configured level."""
    log_file = tmp_path / "calc.log"
    configured = configure_logging(CalculatorSettings(_env_file=None, log_level="debug", log_file=log_file))
    try:
        assert configured is logger
        assert logger.level == logging.DEBUG
        logger.debug("hello from the test")
        for handler in logger.handlers:
            handler.flush()
        assert "[DEBUG] hello from the test" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)


def test_configure_logging_replaces_handlers() -> None:
    """Configuring twice does not duplicate handlers."""
    try:
        configure_logging(CalculatorSettings(_env_file=None))
        configure_logging(CalculatorSettings(_env_file=None))
        assert len(logger.handlers) == 1
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)
