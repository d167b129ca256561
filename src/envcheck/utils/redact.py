"""
Utilities for keeping secret values out of console output.
"""

PREVIEW_LENGTH = 20
PREVIEW_SUFFIX = "..."


def preview_value(value: str, length: int = PREVIEW_LENGTH, suffix: str = PREVIEW_SUFFIX) -> str:
    """
    Return the first ``length`` characters of ``value`` followed by ``suffix``.

    The suffix is always appended, even when the value is shorter than
    ``length``, so a preview never reads as the complete value.
    """
    return value[:length] + suffix
