"""Logging setup for the payment_gateway logger hierarchy."""

import logging

from payment_gateway.infrastructure.config import Settings

ROOT_LOGGER_NAME = "payment_gateway"
HANDLER_NAME = "payment_gateway.stream"


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Apply level and format from settings to the package logger.

    The package logger gets its own handler and stops propagating to the
    root logger, so a host application that also configures the root
    logger does not print each record twice.

    Safe to call more than once: the handler installed by a previous
    call is replaced, never duplicated.
    """
    settings = settings or Settings()
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(settings.LOG_LEVEL)

    for existing in list(logger.handlers):
        if existing.get_name() == HANDLER_NAME:
            logger.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(settings.LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
