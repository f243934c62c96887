"""Locale-chain localization package.

Provides the I18n facade, translation resource loading, and type aliases.

Submodules:
    types        - PEP 695 type aliases (LocaleCode, ResourceId, TranslationTree)
    loading      - TranslationLoader protocol, PathTranslationLoader, load_locale_file,
                   FallbackInfo, ResourceLoadResult, LoadSummary
    orchestrator - I18n (locale chain, store ownership, loading)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from i18nengine.enums import LoadStatus
from i18nengine.localization.loading import (
    FallbackInfo,
    LoadSummary,
    PathTranslationLoader,
    ResourceLoadResult,
    TranslationLoader,
    load_locale_file,
)
from i18nengine.localization.orchestrator import I18n
from i18nengine.localization.types import LocaleCode, ResourceId, TranslationTree

__all__ = [
    # Facade
    "I18n",
    # Loader protocol and implementations
    "TranslationLoader",
    "PathTranslationLoader",
    "load_locale_file",
    # Load tracking
    "LoadStatus",
    "LoadSummary",
    "ResourceLoadResult",
    # Fallback observability
    "FallbackInfo",
    # Type aliases for user code type annotations
    "LocaleCode",
    "ResourceId",
    "TranslationTree",
]
