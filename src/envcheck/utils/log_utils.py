import logging
import sys
from enum import Enum

from envcheck.utils.env_utils import get_envcheck_log_format, get_envcheck_log_level


class LogFormat(str, Enum):
    VERBOSE = '[{levelname}] {asctime} - {name}:{lineno} - {message}'
    SIMPLE = '[{levelname}] {message}'


# Cache for initialized loggers to avoid adding handlers multiple times
_initialized_loggers = set()


def get_env_log_format() -> LogFormat:
    format_str = get_envcheck_log_format().upper()
    try:
        return LogFormat[format_str]
    except KeyError:
        return LogFormat.VERBOSE


def setup_logging(logger_name: str | None = "envcheck", level: str | int | None = None, force_reconfigure: bool = False) -> logging.Logger:
    """
    Configures and returns a logger instance. Ensures handlers are not duplicated
    and prevents propagation to avoid duplicate messages from parent loggers.

    Args:
        logger_name: Name of the logger. If None, configures the root logger.
        level: Logging level (e.g., 'DEBUG', 'INFO', logging.DEBUG). Defaults to ENVCHECK_LOG_LEVEL env var.
        force_reconfigure: If True, remove existing handlers before adding new ones.

    Returns:
        Configured logger instance.
    """
    effective_level = level if level is not None else get_envcheck_log_level()
    log_level_val = logging.getLevelName(str(effective_level).upper()) if isinstance(effective_level, str) else effective_level
    if not isinstance(log_level_val, int):
        # getLevelName returns "Level X" for unknown names
        log_level_val = logging.WARNING

    logger = logging.getLogger(logger_name)
    logger_id = logger_name if logger_name is not None else "root"

    if logger_id in _initialized_loggers and not force_reconfigure:
        if logger.level != log_level_val:
            logger.setLevel(log_level_val)
        return logger

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    logger.setLevel(log_level_val)
    logger.propagate = False

    # stderr keeps diagnostics out of the report printed on stdout
    handler = logging.StreamHandler(sys.stderr)
    log_format = get_env_log_format()
    handler.setFormatter(logging.Formatter(log_format.value, style='{'))
    logger.addHandler(handler)

    _initialized_loggers.add(logger_id)
    return logger
