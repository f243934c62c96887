"""Hypothesis strategies for i18nengine property-based testing.

Usage:
    from tests.strategies import locale_chains, dotted_keys, safe_text
"""

from .localization import (
    LOCALE_POOL,
    dotted_keys,
    interpolation_values,
    key_segments,
    locale_chains,
    locale_codes,
    safe_text,
    translation_trees,
)

__all__ = [
    "LOCALE_POOL",
    "dotted_keys",
    "interpolation_values",
    "key_segments",
    "locale_chains",
    "locale_codes",
    "safe_text",
    "translation_trees",
]
