"""Enumerations for i18nengine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they compare equal to the
plain keys used in translation trees.

Python 3.13+.
"""

from enum import StrEnum


class PluralCategory(StrEnum):
    """Plural category keys recognized in count-indexed entries.

    StrEnum provides automatic string conversion: PluralCategory.ONE == "one"
    """

    ZERO = "zero"
    """Selected for count == 0 when the entry defines it."""

    ONE = "one"
    """Singular form."""

    TWO = "two"
    """Dual form (CLDR plural rule only)."""

    FEW = "few"
    """Paucal form (CLDR plural rule only)."""

    MANY = "many"
    """Large-number form (CLDR plural rule only)."""

    OTHER = "other"
    """General plural form."""


class LoadStatus(StrEnum):
    """Status of a translation resource load attempt.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Resource loaded and merged into the store."""

    NOT_FOUND = "not_found"
    """Resource file does not exist for this locale."""

    ERROR = "error"
    """Resource exists but could not be read or decoded."""


__all__ = [
    "LoadStatus",
    "PluralCategory",
]
