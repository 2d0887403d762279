"""
Argument checks shared by the document constructors and the rendering context.

Each ``check_*`` function returns the value it was given if it passes, so it can be used inline.
"""

from typing import Any


def ucfirst(word: str) -> str:
    """Capitalize the first letter of a word (while leaving the rest alone, unlike ``str.capitalize``)"""
    return '' if len(word) == 0 else (word[0].upper() + word[1:])


def check_single_line(value: str, value_name: str = 'value') -> str:
    """Checks that a string does not contain line breaks and returns it, otherwise throws a `ValueError`"""
    if ('\n' in value) or ('\r' in value):
        raise ValueError(ucfirst(f"{value_name} must be a single-line string".lstrip()))

    return value


def check_non_negative_int(value: Any, value_name: str = 'value') -> int:
    """Checks that a value is an integer >= 0 and returns it, otherwise throws a `TypeError` or `ValueError`"""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(ucfirst(f"{value_name} must be an integer, got {type(value).__name__}".lstrip()))
    if value < 0:
        raise ValueError(ucfirst(f"{value_name} must be non-negative, got {value}".lstrip()))

    return value
