"""Input validation utilities for synreads."""

import logging
import numbers
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


def validate_file_exists(filepath: Union[str, Path], description: str = "File") -> None:
    """
    Validate that a file exists.

    The special path "-" (stdin/stdout) is always accepted.

    Args:
        filepath: Path to check
        description: Description for error message

    Raises:
        FileNotFoundError: If file doesn't exist
    """
    if str(filepath) == "-":
        return
    if not Path(filepath).exists():
        raise FileNotFoundError(f"{description} not found: {filepath}")


def require_positive(
    value: Optional[Union[int, float]],
    name: str,
    integer: bool = False,
) -> Optional[str]:
    """
    Check that a numeric parameter is set, of the right type and strictly positive.

    Args:
        value: Parameter value (None means missing)
        name: Parameter name for the message
        integer: Require an int (bools are rejected either way)

    Returns:
        A problem description, or None if the value is acceptable
    """
    if value is None:
        return f"{name} is required"
    expected = numbers.Integral if integer else numbers.Real
    if isinstance(value, bool) or not isinstance(value, expected):
        kind = "an integer" if integer else "a number"
        return f"{name} must be {kind} (got {value!r})"
    if value <= 0:
        return f"{name} must be > 0 (got {value})"
    return None
