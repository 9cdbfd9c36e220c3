"""Shared logger for the calculator package."""
import logging
from typing import Optional

from arithmetic_calculator.common.config import CalculatorSettings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

logger = logging.getLogger("arithmetic_calculator")


def configure_logging(settings: Optional[CalculatorSettings] = None) -> logging.Logger:
    """
    Attach handlers to the package logger according to the settings.

    Calling it again replaces the previously attached handlers.

    :param CalculatorSettings settings: Settings to use, loaded from the environment if omitted

    :return: The configured package logger
    :rtype: logging.Logger
    """
    settings = settings or CalculatorSettings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if settings.log_file is not None:
        file_handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
