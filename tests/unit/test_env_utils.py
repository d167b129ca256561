import os
from unittest.mock import patch

from envcheck.utils.env_utils import (
    get_envcheck_log_format,
    get_envcheck_log_level,
    is_color_disabled,
)


@patch.dict(os.environ, {}, clear=True)
def test_defaults():
    assert get_envcheck_log_level() == "WARNING"
    assert get_envcheck_log_format() == "VERBOSE"
    assert is_color_disabled() is False


@patch.dict(os.environ, {"NO_COLOR": "1", "ENVCHECK_LOG_LEVEL": "DEBUG"}, clear=True)
def test_overrides():
    assert get_envcheck_log_level() == "DEBUG"
    assert is_color_disabled() is True
