"""
Environment variables that configure envcheck itself.

These are read from the process environment, never from the .env file being
validated.
"""

import os


def get_envcheck_log_level() -> str:
    """Get envcheck log level."""
    return os.getenv('ENVCHECK_LOG_LEVEL', 'WARNING')


def get_envcheck_log_format() -> str:
    """Get envcheck log format name (VERBOSE or SIMPLE)."""
    return os.getenv('ENVCHECK_LOG_FORMAT', 'VERBOSE')


def is_color_disabled() -> bool:
    """Check whether colored output is disabled via NO_COLOR."""
    return bool(os.getenv('NO_COLOR'))
