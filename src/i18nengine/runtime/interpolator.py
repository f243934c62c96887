"""Placeholder interpolation for resolved translation strings.

    interpolate("file {{file}} opened by \\{{user}}", {"file": "test.txt"})
    # => "file test.txt opened by {{user}}"

A backslash directly before a token escapes it: the token is emitted
without the backslash and without substitution. In Python source the
backslash itself needs escaping ("\\{{user}}") or a raw string.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from i18nengine.constants import INTERPOLATION_RESERVED_KEYS
from i18nengine.diagnostics import MissingInterpolationArgument, ReservedInterpolationKey

__all__ = ["PLACEHOLDER", "interpolate", "placeholders"]

PLACEHOLDER = re.compile(r"(\\)?\{\{([^}]+)\}\}")


def placeholders(template: str) -> tuple[str, ...]:
    """Return the names of non-escaped placeholders in order of appearance.

    Example:
        >>> placeholders("{{a}} and \\{{b}} and {{c}}")
        ('a', 'c')
    """
    return tuple(
        match.group(2) for match in PLACEHOLDER.finditer(template) if match.group(1) is None
    )


def interpolate[T](template: T, values: Mapping[str, object]) -> T | str:
    """Substitute {{name}} placeholders in template with values.

    Args:
        template: Resolved entry; only str templates are processed
        values: Interpolation values keyed by placeholder name

    Returns:
        The interpolated string, or template unchanged if it is not a str

    Raises:
        ReservedInterpolationKey: If a placeholder is named scope or default
        MissingInterpolationArgument: If a placeholder has no value
    """
    if not isinstance(template, str):
        return template

    def substitute(match: re.Match[str]) -> str:
        escaped, name = match.group(1), match.group(2)
        if escaped is not None:
            return "{{" + name + "}}"
        if name in INTERPOLATION_RESERVED_KEYS:
            raise ReservedInterpolationKey(name, template)
        if name not in values:
            raise MissingInterpolationArgument(name, template)
        return str(values[name])

    return PLACEHOLDER.sub(substitute, template)
