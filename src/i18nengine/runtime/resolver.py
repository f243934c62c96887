"""Translation resolution pipeline.

Resolves a key against an ordered locale chain:

1. Split options into control fields (count, scope, default) and
   interpolation values.
2. Split the default into translated alternatives and one literal.
3. For each locale in order: direct lookup, then the translated
   alternatives for that same locale. First hit wins.
4. Nothing found: fall back to the literal default under the first locale.
5. Still nothing: MissingTranslationData.
6. Pluralize with count, then interpolate.

Stateless per call: the resolver only reads from its store.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from i18nengine.constants import (
    INTERPOLATION_RESERVED_KEYS,
    OPTION_COUNT,
    OPTION_DEFAULT,
    OPTION_SCOPE,
)
from i18nengine.diagnostics import MissingTranslationData
from i18nengine.locale_utils import normalize_locales
from i18nengine.runtime.config import ResolverConfig
from i18nengine.runtime.defaults import (
    ChainDefault,
    Found,
    parse_default,
    resolve_default,
    split_default,
)
from i18nengine.runtime.interpolator import interpolate
from i18nengine.runtime.keys import key_path
from i18nengine.runtime.pluralizer import is_count, pluralize
from i18nengine.runtime.store import TranslationStore
from i18nengine.runtime.value_types import Key, KeyRef, LocaleCode, Options

__all__ = ["KeyOrKeys", "Locales", "TranslationResolver"]

logger = logging.getLogger(__name__)

type Locales = LocaleCode | Iterable[LocaleCode] | None
type KeyOrKeys = Key | list[KeyOrKeys]


class TranslationResolver:
    """Resolves keys against a TranslationStore with locale fallback.

    Example:
        >>> store = MemoryStore()
        >>> store.store("en", {"fallback": "Fallback [en]"})
        >>> resolver = TranslationResolver(store)
        >>> resolver.resolve(["es-MX", "es", "en"], "fallback")
        'Fallback [en]'

    Attributes:
        store: Translation store read by every lookup
        config: Separator and plural rule
    """

    __slots__ = ("_config", "_store")

    def __init__(self, store: TranslationStore, config: ResolverConfig | None = None) -> None:
        self._store = store
        self._config = config if config is not None else ResolverConfig()

    @property
    def store(self) -> TranslationStore:
        """Translation store this resolver reads."""
        return self._store

    @property
    def config(self) -> ResolverConfig:
        """Resolver configuration (read-only)."""
        return self._config

    def __repr__(self) -> str:
        return f"TranslationResolver(store={self._store!r})"

    def resolve(self, locales: Locales, key: KeyOrKeys, options: Options | None = None) -> object:
        """Resolve key for the first locale in locales that can provide it.

        Args:
            locales: Locale code or ordered, non-empty fallback chain
            key: Key, or list of keys (lists may nest) to resolve element-wise
            options: count, scope, default, and interpolation values

        Returns:
            The resolved entry (a str for string translations), or a list of
            them when key is a list

        Raises:
            InvalidLocale: If locales is None, empty, or malformed
            MissingTranslationData: If nothing resolves
            InvalidPluralizationData: If count selects an absent category
            ReservedInterpolationKey: If the template uses scope/default
            MissingInterpolationArgument: If the template lacks a value
            InvalidDefaultSpec: If the default option is malformed
        """
        chain = normalize_locales(locales)
        opts = dict(options or {})
        if isinstance(key, list):
            return [self.resolve(chain, k, opts) for k in key]
        return self._resolve_one(chain, key, opts)[0]

    def resolve_with_locale(
        self, locales: Locales, key: Key, options: Options | None = None
    ) -> tuple[object, LocaleCode]:
        """Resolve a single key and report the locale that provided it.

        The reported locale is the first requested locale when only the
        literal default matched.

        Raises:
            TypeError: If key is a list
            Same errors as resolve()
        """
        if isinstance(key, list):
            msg = "resolve_with_locale() takes a single key; use resolve() for key lists"
            raise TypeError(msg)
        return self._resolve_one(normalize_locales(locales), key, dict(options or {}))

    def try_resolve(
        self, locales: Locales, key: KeyOrKeys, options: Options | None = None
    ) -> object | None:
        """Like resolve(), but a miss yields None instead of raising.

        For a list of keys each missing element becomes None. Errors other
        than MissingTranslationData still propagate.
        """
        chain = normalize_locales(locales)
        opts = dict(options or {})
        if isinstance(key, list):
            return [self.try_resolve(chain, k, opts) for k in key]
        return self._try_one(chain, key, opts)

    def exists(
        self,
        locales: Locales,
        key: Key,
        scope: str | Sequence[str] | None = None,
    ) -> bool:
        """Check whether any locale in the chain stores key directly.

        Defaults are not consulted.
        """
        return any(self._lookup(locale, key, scope) is not None for locale in normalize_locales(locales))

    def _try_one(self, chain: tuple[LocaleCode, ...], key: Key, options: dict[str, object]) -> object | None:
        try:
            return self._resolve_one(chain, key, options)[0]
        except MissingTranslationData:
            return None

    def _lookup(self, locale: LocaleCode, key: Key, scope: object) -> object | None:
        return self._store.lookup(locale, key_path(key, scope, self._config.separator))  # type: ignore[arg-type]

    def _resolve_one(
        self,
        chain: tuple[LocaleCode, ...],
        key: Key,
        options: dict[str, object],
    ) -> tuple[object, LocaleCode]:
        count = options.get(OPTION_COUNT)
        if count is not None and not is_count(count):
            msg = f"count must be a number, got {type(count).__name__}"
            raise TypeError(msg)
        scope = options.get(OPTION_SCOPE)
        alternatives, literal = split_default(parse_default(options.get(OPTION_DEFAULT)))
        translated_defaults = ChainDefault(alternatives)
        values: Mapping[str, object] = {
            name: value for name, value in options.items() if name not in INTERPOLATION_RESERVED_KEYS
        }

        def lookup_ref(locale: LocaleCode, reference: KeyRef) -> object | None:
            return self._lookup(locale, reference, scope)

        entry: object | None = None
        resolved_locale: LocaleCode | None = None
        for locale in chain:
            entry = self._lookup(locale, key, scope)
            if entry is None:
                result = resolve_default(locale, translated_defaults, lookup_ref)
                if isinstance(result, Found):
                    entry = result.value
                    logger.debug("Key %r resolved from a default for locale %s", key, locale)
            if entry is not None:
                resolved_locale = locale
                break

        if resolved_locale is None:
            resolved_locale = chain[0]
            result = resolve_default(resolved_locale, literal, lookup_ref)
            if isinstance(result, Found):
                entry = result.value

        if entry is None:
            details = {name: value for name, value in options.items() if name != OPTION_DEFAULT}
            raise MissingTranslationData(resolved_locale, key, details)

        if resolved_locale != chain[0]:
            logger.debug(
                "Key %r resolved from fallback locale %s (requested %s)",
                key,
                resolved_locale,
                chain[0],
            )

        entry = pluralize(entry, count, locale=resolved_locale, rule=self._config.plural_rule)  # type: ignore[arg-type]
        return interpolate(entry, values), resolved_locale
