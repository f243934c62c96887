"""Locale-chain orchestration: the I18n facade.

I18n owns one TranslationStore and one TranslationResolver and keeps the
current locale fallback chain, so application code can call
``i18n.translate("greeting", name="Ana")`` without threading locales
through every call site.

Key architectural decisions:
- No process-wide singleton: each I18n owns (or is handed) its store
- Eager resource loading: resources named at construction are loaded
  immediately; failures are recorded in a LoadSummary, not raised
- Protocol-based TranslationLoader (dependency inversion)
- Lifecycle: init -> store/load (repeatable) -> translate (repeatable)
  -> reload

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from i18nengine.constants import DEFAULT_LOCALE, DEFAULT_SEPARATOR
from i18nengine.diagnostics import MissingTranslationData
from i18nengine.enums import LoadStatus
from i18nengine.locale_utils import canonicalize_locale, normalize_locales
from i18nengine.localization.loading import (
    FallbackInfo,
    LoadSummary,
    ResourceLoadResult,
    TranslationLoader,
    load_locale_file,
)
from i18nengine.localization.types import LocaleCode, ResourceId, TranslationTree
from i18nengine.runtime.config import ResolverConfig
from i18nengine.runtime.pluralizer import PluralRule, english_plural_rule
from i18nengine.runtime.resolver import KeyOrKeys, TranslationResolver
from i18nengine.runtime.store import MemoryStore, TranslationStore
from i18nengine.runtime.value_types import Key

__all__ = ["I18n"]

logger = logging.getLogger(__name__)


class I18n:
    """Translation lookups against a locale fallback chain.

    Example - In-memory translations:
        >>> i18n = I18n(["es-MX", "es", "en"])
        >>> i18n.store_translations("en", {"fallback": "Fallback [en]"})
        >>> i18n.translate("fallback")
        'Fallback [en]'
        >>> i18n.store_translations("es", {"fallback": "Fallback [es]"})
        >>> i18n.translate("fallback")
        'Fallback [es]'

    Example - Disk-based resources:
        >>> loader = PathTranslationLoader("locales/{locale}")
        >>> i18n = I18n(["lv", "en"], ["main.json"], loader)
        >>> i18n.get_load_summary().all_successful
        True

    Attributes:
        locale: Current fallback chain (tuple), settable with a code or list
    """

    __slots__ = (
        "_default_locale",
        "_files",
        "_load_results",
        "_locales",
        "_on_fallback",
        "_resolver",
        "_resource_ids",
        "_resource_loader",
    )

    def __init__(
        self,
        locales: LocaleCode | Iterable[LocaleCode] | None = None,
        resource_ids: Iterable[ResourceId] | None = None,
        resource_loader: TranslationLoader | None = None,
        *,
        default_locale: LocaleCode = DEFAULT_LOCALE,
        store: TranslationStore | None = None,
        separator: str = DEFAULT_SEPARATOR,
        plural_rule: PluralRule = english_plural_rule,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Initialize the facade.

        Args:
            locales: Locale code or fallback chain; defaults to default_locale
            resource_ids: Translation files to load for every chain locale
            resource_loader: Loader for resource_ids
            default_locale: Chain used when locales is None
            store: Translation store (a fresh MemoryStore if omitted)
            separator: Key/scope segment separator
            plural_rule: Plural category policy (english_plural_rule by default;
                pass cldr_plural_rule for CLDR categories)
            on_fallback: Called with FallbackInfo whenever a translation comes
                from a locale other than the first in the chain

        Raises:
            InvalidLocale: If locales is empty or malformed
            ValueError: If resource_ids is provided without resource_loader
        """
        resource_list = tuple(resource_ids) if resource_ids else ()
        if resource_list and resource_loader is None:
            msg = "resource_loader required when resource_ids provided"
            raise ValueError(msg)

        self._default_locale = normalize_locales(default_locale)[0]
        self._locales = normalize_locales(locales if locales is not None else default_locale)
        self._resolver = TranslationResolver(
            store if store is not None else MemoryStore(),
            ResolverConfig(separator=separator, plural_rule=plural_rule),
        )
        self._on_fallback = on_fallback
        self._resource_loader = resource_loader
        self._resource_ids: list[ResourceId] = []
        self._files: list[str] = []
        self._load_results: list[ResourceLoadResult] = []

        if resource_list:
            self.load_translations(*resource_list)

    def __repr__(self) -> str:
        return f"I18n(locale={self._locales!r}, store={self._resolver.store!r})"

    @property
    def locale(self) -> tuple[LocaleCode, ...]:
        """Current fallback chain in priority order."""
        return self._locales

    @locale.setter
    def locale(self, value: LocaleCode | Iterable[LocaleCode] | None) -> None:
        self._locales = normalize_locales(value if value is not None else self._default_locale)

    @property
    def default_locale(self) -> LocaleCode:
        """Locale used when the chain is reset with ``i18n.locale = None``."""
        return self._default_locale

    @property
    def resolver(self) -> TranslationResolver:
        """Underlying resolution pipeline."""
        return self._resolver

    @property
    def store(self) -> TranslationStore:
        """Underlying translation store."""
        return self._resolver.store

    def translate(
        self,
        key: KeyOrKeys,
        /,
        *,
        locale: LocaleCode | Iterable[LocaleCode] | None = None,
        **options: object,
    ) -> object:
        """Translate key using locale (or the current chain).

        Args:
            key: Key, or list of keys (lists may nest) to translate element-wise.
                Positional-only, so "key" is free for use as an interpolation value
            locale: Overrides the current chain for this call
            **options: count, scope, default, and interpolation values

        Returns:
            Translated string (or entry), or a list of them for a list of keys

        Raises:
            MissingTranslationData: If nothing resolves
            Every other error of TranslationResolver.resolve()
        """
        chain = self._chain(locale)
        if isinstance(key, list):
            return [self.translate(k, locale=chain, **options) for k in key]
        return self._translate_one(chain, key, options)

    t = translate

    def try_translate(
        self,
        key: KeyOrKeys,
        /,
        *,
        locale: LocaleCode | Iterable[LocaleCode] | None = None,
        **options: object,
    ) -> object | None:
        """Translate key, returning None instead of raising on a miss.

        For a list of keys each missing element becomes None.
        """
        chain = self._chain(locale)
        if isinstance(key, list):
            return [self.try_translate(k, locale=chain, **options) for k in key]
        return self._try_one(chain, key, options)

    def exists(
        self,
        key: Key,
        *,
        locale: LocaleCode | Iterable[LocaleCode] | None = None,
        scope: str | Sequence[str] | None = None,
    ) -> bool:
        """Check whether key is stored for any locale of the chain."""
        return self._resolver.exists(self._chain(locale), key, scope)

    def store_translations(self, locale: LocaleCode, data: TranslationTree) -> None:
        """Deep-merge data into the translations of locale."""
        self._resolver.store.store(locale, data)

    def available_locales(self) -> frozenset[LocaleCode]:
        """Locales that have at least one stored translation."""
        return self._resolver.store.available_locales()

    def load_translations(
        self,
        *resource_ids: ResourceId,
        locales: Iterable[LocaleCode] | None = None,
    ) -> LoadSummary:
        """Load resources through the configured loader.

        Each resource is loaded for each locale (the current chain unless
        locales is given) and merged into the store. Missing files and
        read/decode errors are recorded, not raised. The resources are
        remembered so reload() can load them again.

        Returns:
            LoadSummary for this call only

        Raises:
            ValueError: If no resource_loader was configured
            UnknownFileType: If a resource has an unsupported extension
        """
        if self._resource_loader is None:
            msg = "load_translations() requires a resource_loader"
            raise ValueError(msg)

        targets = normalize_locales(locales) if locales is not None else self._locales
        results = [
            self._load_single_resource(locale, resource_id, self._resource_loader)
            for resource_id in resource_ids
            for locale in targets
        ]
        for resource_id in resource_ids:
            if resource_id not in self._resource_ids:
                self._resource_ids.append(resource_id)
        self._load_results.extend(results)

        return self._summarize(results)

    def load_files(self, *paths: str | Path) -> LoadSummary:
        """Load files whose top-level keys are locale codes.

        Every locale in a file is merged into the store, whether or not it
        is in the current chain, and gets its own SUCCESS result. A file
        that is missing or cannot be decoded yields one result with locale
        None and nothing from it is stored. The files are remembered so
        reload() can load them again.

        Example:
            >>> i18n.load_files("config/locales/app.yml")

        Returns:
            LoadSummary for this call only

        Raises:
            UnknownFileType: If a file has an unsupported extension
        """
        results: list[ResourceLoadResult] = []
        for path in map(str, paths):
            results.extend(self._load_single_file(path))
            if path not in self._files:
                self._files.append(path)
        self._load_results.extend(results)
        return self._summarize(results)

    def get_load_summary(self) -> LoadSummary:
        """Summary of every load attempt since construction (or last reload)."""
        return LoadSummary(results=tuple(self._load_results))

    def reload(self) -> LoadSummary:
        """Drop all translations and load the remembered resources and files again.

        Translations added with store_translations() are discarded.

        Returns:
            LoadSummary of the reload
        """
        self._resolver.store.reset()
        self._load_results.clear()
        results: list[ResourceLoadResult] = []
        if self._resource_ids and self._resource_loader is not None:
            results.extend(self.load_translations(*self._resource_ids).results)
        if self._files:
            results.extend(self.load_files(*self._files).results)
        return LoadSummary(results=tuple(results))

    @staticmethod
    def _summarize(results: list[ResourceLoadResult]) -> LoadSummary:
        summary = LoadSummary(results=tuple(results))
        logger.info(
            "Loaded %d/%d translation resources (%d not found, %d errors)",
            summary.successful,
            summary.total_attempted,
            summary.not_found,
            summary.errors,
        )
        return summary

    def _chain(self, locale: LocaleCode | Iterable[LocaleCode] | None) -> tuple[LocaleCode, ...]:
        return self._locales if locale is None else normalize_locales(locale)

    def _translate_one(
        self, chain: tuple[LocaleCode, ...], key: Key, options: dict[str, object]
    ) -> object:
        value, resolved_locale = self._resolver.resolve_with_locale(chain, key, options)
        if self._on_fallback is not None and (
            canonicalize_locale(resolved_locale) != canonicalize_locale(chain[0])
        ):
            self._on_fallback(
                FallbackInfo(requested_locale=chain[0], resolved_locale=resolved_locale, key=key)
            )
        return value

    def _try_one(
        self, chain: tuple[LocaleCode, ...], key: Key, options: dict[str, object]
    ) -> object | None:
        try:
            return self._translate_one(chain, key, options)
        except MissingTranslationData:
            return None

    def _load_single_resource(
        self,
        locale: LocaleCode,
        resource_id: ResourceId,
        resource_loader: TranslationLoader,
    ) -> ResourceLoadResult:
        source_path = resource_loader.describe_path(locale, resource_id)
        try:
            data = resource_loader.load(locale, resource_id)
            self._resolver.store.store(locale, data)
        except FileNotFoundError:
            return ResourceLoadResult(
                locale=locale,
                resource_id=resource_id,
                status=LoadStatus.NOT_FOUND,
                source_path=source_path,
            )
        except (OSError, ValueError) as e:
            logger.warning("Failed to load translations from %s: %s", source_path, e)
            return ResourceLoadResult(
                locale=locale,
                resource_id=resource_id,
                status=LoadStatus.ERROR,
                error=e,
                source_path=source_path,
            )
        return ResourceLoadResult(
            locale=locale,
            resource_id=resource_id,
            status=LoadStatus.SUCCESS,
            source_path=source_path,
        )

    def _load_single_file(self, path: str) -> list[ResourceLoadResult]:
        try:
            trees = load_locale_file(path)
        except FileNotFoundError:
            return [
                ResourceLoadResult(
                    locale=None, resource_id=path, status=LoadStatus.NOT_FOUND, source_path=path
                )
            ]
        except (OSError, ValueError) as e:
            logger.warning("Failed to load translations from %s: %s", path, e)
            return [
                ResourceLoadResult(
                    locale=None,
                    resource_id=path,
                    status=LoadStatus.ERROR,
                    error=e,
                    source_path=path,
                )
            ]

        store = self._resolver.store
        for locale, tree in trees.items():
            store.store(locale, tree)
        return [
            ResourceLoadResult(
                locale=locale, resource_id=path, status=LoadStatus.SUCCESS, source_path=path
            )
            for locale in trees
        ]
