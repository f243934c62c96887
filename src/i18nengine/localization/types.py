"""Type aliases for the localization domain.

Semantic aliases used by the localization package and by user code when
annotating I18n call sites.

Python 3.13+. Zero external dependencies.
"""

from i18nengine.runtime.value_types import LocaleCode, TranslationTree

__all__ = [
    "LocaleCode",
    "ResourceId",
    "TranslationTree",
]

type ResourceId = str
"""Translation resource file identifier (e.g., 'main.json', 'errors.toml')."""
