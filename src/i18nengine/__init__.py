"""i18nengine - translation lookup with locale fallback, plurals and interpolation.

Resolves a key against an ordered locale chain, falling back through
key-reference, per-locale and literal defaults, then selects a plural
variant and fills {{placeholders}}.

Public API:
    I18n - Facade owning a store and the current locale chain
    TranslationResolver - Stateless resolution pipeline over a store
    MemoryStore - In-memory, deep-merging translation store
    PathTranslationLoader - Loads .json/.toml/.yml translation files
    ref - Marks a default alternative as a key reference
    interpolate - Placeholder substitution
    pluralize - Plural variant selection

Exceptions:
    I18nError - Base exception class
    InvalidLocale - Missing/empty locale chain or malformed locale code
    MissingTranslationData - Nothing resolved
    InvalidPluralizationData - Plural entry lacks the selected category
    ReservedInterpolationKey - Template uses scope/default as a placeholder
    MissingInterpolationArgument - Template placeholder without a value

Example:
    >>> from i18nengine import I18n, ref
    >>> i18n = I18n(["es-MX", "es", "en"])
    >>> i18n.store_translations("en", {"inbox": {"one": "1 message",
    ...                                          "other": "{{count}} messages"}})
    >>> i18n.translate("inbox", count=3)
    '3 messages'
    >>> i18n.translate("missing", default=[ref("inbox.one"), "Nothing"])
    '1 message'
"""

from .diagnostics import (
    I18nError,
    InvalidDefaultSpec,
    InvalidLocale,
    InvalidPluralizationData,
    MissingInterpolationArgument,
    MissingTranslationData,
    ReservedInterpolationKey,
    UnknownFileType,
)
from .localization import FallbackInfo, I18n, LoadSummary, PathTranslationLoader
from .runtime import (
    KeyRef,
    MemoryStore,
    ResolverConfig,
    TranslationResolver,
    TranslationStore,
    cldr_plural_rule,
    english_plural_rule,
    interpolate,
    pluralize,
    ref,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("i18nengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "FallbackInfo",
    "I18n",
    "I18nError",
    "InvalidDefaultSpec",
    "InvalidLocale",
    "InvalidPluralizationData",
    "KeyRef",
    "LoadSummary",
    "MemoryStore",
    "MissingInterpolationArgument",
    "MissingTranslationData",
    "PathTranslationLoader",
    "ReservedInterpolationKey",
    "ResolverConfig",
    "TranslationResolver",
    "TranslationStore",
    "UnknownFileType",
    "__version__",
    "cldr_plural_rule",
    "english_plural_rule",
    "interpolate",
    "pluralize",
    "ref",
]
