"""Logging setup built on loguru.

Log records go to stderr so that machine-readable command output on stdout
stays clean.
"""

import sys
import typing as t

from loguru import logger

from ..config.settings import LogLevel, RuntimeEnvironment, Settings

if t.TYPE_CHECKING:
    import loguru

_DEVELOPMENT_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)

_configured = False


def configure_logger(
    level: LogLevel = LogLevel.INFO,
    environment: RuntimeEnvironment = RuntimeEnvironment.DEVELOPMENT,
) -> None:
    """Replace loguru sinks with a single stderr sink.

    Production output is serialized JSON, anything else is human-readable.
    """
    global _configured

    logger.remove()
    logger.configure(extra={"name": "flavorkit"})
    if environment == RuntimeEnvironment.PRODUCTION:
        logger.add(sys.stderr, level=str(level), serialize=True)
    else:
        logger.add(
            sys.stderr,
            level=str(level),
            format=_DEVELOPMENT_FORMAT,
            colorize=environment == RuntimeEnvironment.DEVELOPMENT,
        )
    _configured = True


def setup_logging(settings: Settings) -> None:
    """Configure logging from application settings."""
    configure_logger(level=settings.log_level, environment=settings.runtime_environment)


def get_logger(name: str) -> "loguru.Logger":
    """Return a logger bound to ``name``, configuring defaults on first use."""
    if not _configured:
        configure_logger()
    return logger.bind(name=name)


def is_configured() -> bool:
    return _configured


def reset_logging() -> None:
    """Drop all sinks and forget configuration. Intended for tests."""
    global _configured

    logger.remove()
    _configured = False
