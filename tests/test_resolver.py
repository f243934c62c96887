"""Tests for TranslationResolver, the resolution pipeline.

Tests verify:
- Direct lookup, scope, tuple keys and key lists
- Locale fallback order and the reported resolved locale
- Key-reference and locale-mapping defaults tried per locale
- Literal defaults tried only after every locale is exhausted
- Pluralization and interpolation applied to the winning entry
- Error propagation (InvalidLocale, MissingTranslationData, ...)
"""

from __future__ import annotations

import logging

import pytest

from i18nengine import (
    InvalidDefaultSpec,
    InvalidLocale,
    InvalidPluralizationData,
    MemoryStore,
    MissingInterpolationArgument,
    MissingTranslationData,
    ReservedInterpolationKey,
    ResolverConfig,
    TranslationResolver,
    cldr_plural_rule,
    ref,
)

CHAIN = ["es-MX", "es", "en"]


@pytest.fixture
def resolver(store: MemoryStore) -> TranslationResolver:
    """Resolver over the shared English/Spanish store."""
    return TranslationResolver(store)


class TestDirectLookup:
    """Keys found without any fallback."""

    def test_dotted_key(self, resolver: TranslationResolver) -> None:
        """A dotted key resolves to its leaf."""
        assert resolver.resolve("en", "currency.format.separator") == "."

    def test_tuple_key(self, resolver: TranslationResolver) -> None:
        """A tuple key is a segment path."""
        assert resolver.resolve("en", ("currency", "format", "delimiter")) == ","

    def test_scope(self, resolver: TranslationResolver) -> None:
        """scope is prepended to the key."""
        assert resolver.resolve("en", "separator", {"scope": "currency.format"}) == "."

    def test_scope_sequence(self, resolver: TranslationResolver) -> None:
        """scope may be a list of segments."""
        assert resolver.resolve("en", "delimiter", {"scope": ["currency", "format"]}) == ","

    def test_subtree_returned(self, resolver: TranslationResolver) -> None:
        """A key addressing a subtree returns the mapping."""
        assert resolver.resolve("en", "currency.format") == {"separator": ".", "delimiter": ","}

    def test_key_list_element_wise(self, resolver: TranslationResolver) -> None:
        """A list of keys resolves each element independently."""
        result = resolver.resolve("en", ["currency.format.separator", "currency.format.delimiter"])
        assert result == [".", ","]

    def test_key_list_fails_on_any_miss(self, resolver: TranslationResolver) -> None:
        """One missing element aborts the whole list."""
        with pytest.raises(MissingTranslationData):
            resolver.resolve("en", ["currency.format.separator", "nope"])

    def test_nested_key_list(self, resolver: TranslationResolver) -> None:
        """Nested key lists resolve recursively and keep their shape."""
        resolver.store.store("en", {"a": "A", "b": "B", "c": "C"})
        assert resolver.resolve("en", ["a", ["b", "c"]]) == ["A", ["B", "C"]]
        assert resolver.try_resolve("en", [["a", "nope"], "c"]) == [["A", None], "C"]

    def test_keyref_as_key(self, resolver: TranslationResolver) -> None:
        """A KeyRef is accepted anywhere a key is."""
        assert resolver.resolve("en", ref("currency.format.separator")) == "."

    def test_single_locale_string(self, resolver: TranslationResolver) -> None:
        """A bare locale string is a one-element chain."""
        assert resolver.resolve("es", "greeting", {"name": "Ana"}) == "¡Hola, Ana!"

    def test_empty_key_rejected(self, resolver: TranslationResolver) -> None:
        """An empty key is a ValueError."""
        with pytest.raises(ValueError, match="must not be empty"):
            resolver.resolve("en", "")


class TestLocaleFallback:
    """Fallback across the locale chain."""

    def test_falls_back_to_later_locale(self, resolver: TranslationResolver) -> None:
        """A key only in the last locale resolves there."""
        value, locale = resolver.resolve_with_locale(CHAIN, "currency.format.separator")
        assert value == "."
        assert locale == "en"

    def test_first_locale_wins(self, resolver: TranslationResolver) -> None:
        """The earliest locale providing the key wins."""
        value, locale = resolver.resolve_with_locale(CHAIN, "greeting", {"name": "Ana"})
        assert value == "¡Hola, Ana!"
        assert locale == "es"

    def test_more_specific_locale_outranks(
        self, store: MemoryStore, resolver: TranslationResolver
    ) -> None:
        """Storing under the first locale changes the result."""
        store.store("es-MX", {"greeting": "¿Qué onda, {{name}}?"})
        assert resolver.resolve(CHAIN, "greeting", {"name": "Ana"}) == "¿Qué onda, Ana?"

    def test_resolved_locale_keeps_spelling(self, resolver: TranslationResolver) -> None:
        """The reported locale is spelled as the caller spelled it."""
        _, locale = resolver.resolve_with_locale(["ES-mx", "EN"], "currency.format.separator")
        assert locale == "EN"

    def test_duplicate_locales_collapsed(self, resolver: TranslationResolver) -> None:
        """Canonically duplicate chain entries are tried once."""
        assert resolver.resolve(["en", "EN", "en_US"], "greeting", {"name": "x"}) == "Hello, x!"

    def test_fallback_logged_at_debug(
        self, resolver: TranslationResolver, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Using a fallback locale emits a debug record."""
        with caplog.at_level(logging.DEBUG, logger="i18nengine.runtime.resolver"):
            resolver.resolve(CHAIN, "currency.format.separator")
        assert any("fallback locale en" in r.getMessage() for r in caplog.records)


class TestInvalidLocale:
    """Locale argument validation."""

    @pytest.mark.parametrize("locales", [None, [], (), "", ["en", ""], [" "]])
    def test_rejected(self, resolver: TranslationResolver, locales: object) -> None:
        """Absent, empty and blank locales raise InvalidLocale."""
        with pytest.raises(InvalidLocale):
            resolver.resolve(locales, "greeting")  # type: ignore[arg-type]

    def test_invalid_locale_is_value_error(self, resolver: TranslationResolver) -> None:
        """InvalidLocale doubles as ValueError."""
        with pytest.raises(ValueError):
            resolver.resolve([], "greeting")


class TestDefaults:
    """Default resolution inside the pipeline."""

    def test_literal_default(self, resolver: TranslationResolver) -> None:
        """A literal is used when nothing else resolves."""
        assert resolver.resolve(CHAIN, "missing", {"default": "Oops"}) == "Oops"

    def test_literal_default_reports_first_locale(self, resolver: TranslationResolver) -> None:
        """Literal defaults resolve under the first requested locale."""
        _, locale = resolver.resolve_with_locale(CHAIN, "missing", {"default": "Oops"})
        assert locale == "es-MX"

    def test_direct_hit_ignores_default(self, resolver: TranslationResolver) -> None:
        """A stored value beats every default."""
        result = resolver.resolve("en", "currency.format.separator", {"default": "x"})
        assert result == "."

    def test_key_default(self, resolver: TranslationResolver) -> None:
        """A key reference is looked up in place of the key."""
        result = resolver.resolve("en", "missing", {"default": ref("currency.format.delimiter")})
        assert result == ","

    def test_key_default_outranks_literal_across_locales(
        self, store: MemoryStore, resolver: TranslationResolver
    ) -> None:
        """A reference found in a later locale beats a literal."""
        store.store("en", {"fallback": "Fallback [en]"})
        result = resolver.resolve(CHAIN, "missing_key", {"default": ["String", ref("fallback")]})
        assert result == "Fallback [en]"

    def test_earlier_locale_default_beats_later_direct_hit(
        self, store: MemoryStore, resolver: TranslationResolver
    ) -> None:
        """Each locale tries the key, then its defaults, before the next locale."""
        store.store("es", {"target": "es target", "alt": "es alt"})
        store.store("es-MX", {"alt": "mx alt"})
        value, locale = resolver.resolve_with_locale(CHAIN, "target", {"default": ref("alt")})
        assert (value, locale) == ("mx alt", "es-MX")

    def test_key_default_chain_order(
        self, store: MemoryStore, resolver: TranslationResolver
    ) -> None:
        """Reference alternatives are tried left to right."""
        store.store("en", {"b": "B", "c": "C"})
        assert resolver.resolve("en", "missing", {"default": [ref("a"), ref("b"), ref("c")]}) == "B"

    def test_key_default_uses_scope(self, resolver: TranslationResolver) -> None:
        """References are looked up under the same scope."""
        options = {"scope": "currency.format", "default": ref("delimiter")}
        assert resolver.resolve("en", "missing", options) == ","

    def test_key_default_does_not_inherit_default(self, resolver: TranslationResolver) -> None:
        """A reference is a plain lookup, so self references terminate."""
        with pytest.raises(MissingTranslationData):
            resolver.resolve("en", "a", {"default": [ref("a"), ref("b")]})

    def test_locale_mapping_default(self, resolver: TranslationResolver) -> None:
        """A locale mapping matches the locale being tried."""
        default = {"es": "Hash predeterminado [es]", "en": "Hash Default [en]"}
        assert resolver.resolve("en", "missing", {"default": default}) == "Hash Default [en]"

    def test_locale_mapping_follows_chain(self, resolver: TranslationResolver) -> None:
        """Locale mappings are tried per locale in chain order."""
        default = {"es": "es default", "en": "en default"}
        assert resolver.resolve(CHAIN, "missing", {"default": default}) == "es default"

    def test_locale_mapping_with_reference(
        self, store: MemoryStore, resolver: TranslationResolver
    ) -> None:
        """References inside a mapping value resolve before its literal."""
        default = {"en": [ref("missing_en"), "Hash Default [en]"]}
        assert resolver.resolve("en", "missing", {"default": default}) == "Hash Default [en]"
        store.store("en", {"missing_en": "Missing [en]"})
        assert resolver.resolve("en", "missing", {"default": default}) == "Missing [en]"

    def test_locale_mapping_miss_raises(self, resolver: TranslationResolver) -> None:
        """No matching locale and no literal means a miss."""
        with pytest.raises(MissingTranslationData):
            resolver.resolve("de", "missing", {"default": {"en": "x"}})

    def test_first_literal_wins(self, resolver: TranslationResolver) -> None:
        """Only the first top-level literal is kept."""
        assert resolver.resolve("en", "missing", {"default": ["first", "second"]}) == "first"

    def test_literal_default_is_interpolated(self, resolver: TranslationResolver) -> None:
        """Literal defaults go through interpolation."""
        options = {"default": "Hi {{name}}", "name": "Ana"}
        assert resolver.resolve("en", "missing", options) == "Hi Ana"

    def test_invalid_default_rejected(self, resolver: TranslationResolver) -> None:
        """Unsupported default shapes raise before lookup succeeds."""
        with pytest.raises(InvalidDefaultSpec):
            resolver.resolve("en", "missing", {"default": 42})


class TestMissingTranslation:
    """MissingTranslationData details."""

    def test_carries_locale_key_options(self, resolver: TranslationResolver) -> None:
        """The error records the first locale, the key and the options."""
        with pytest.raises(MissingTranslationData) as exc_info:
            resolver.resolve(CHAIN, "nope", {"scope": "app", "name": "x"})
        error = exc_info.value
        assert error.locale == "es-MX"
        assert error.key == "nope"
        assert error.options == {"scope": "app", "name": "x"}
        assert str(error) == "Translation missing: es-MX.app.nope"

    def test_options_exclude_default(self, resolver: TranslationResolver) -> None:
        """The default chain that failed is not repeated in the error options."""
        with pytest.raises(MissingTranslationData) as exc_info:
            resolver.resolve(CHAIN, "nope", {"default": ref("also_nope"), "name": "n"})
        assert exc_info.value.options == {"name": "n"}

    def test_try_resolve_returns_none(self, resolver: TranslationResolver) -> None:
        """try_resolve absorbs misses."""
        assert resolver.try_resolve(CHAIN, "nope") is None

    def test_try_resolve_list(self, resolver: TranslationResolver) -> None:
        """Each missing element of a list becomes None."""
        assert resolver.try_resolve("en", ["nope", "currency.format.separator"]) == [None, "."]

    def test_try_resolve_propagates_other_errors(self, resolver: TranslationResolver) -> None:
        """Only misses are absorbed."""
        with pytest.raises(MissingInterpolationArgument):
            resolver.try_resolve("en", "greeting")

    def test_try_resolve_still_validates_locale(self, resolver: TranslationResolver) -> None:
        """InvalidLocale is not a miss."""
        with pytest.raises(InvalidLocale):
            resolver.try_resolve([], "greeting")


class TestPluralizeAndInterpolate:
    """Post-processing of the winning entry."""

    @pytest.mark.parametrize(
        ("count", "expected"), [(0, "No messages"), (1, "1 message"), (5, "5 messages")]
    )
    def test_count_selects_variant(
        self, resolver: TranslationResolver, count: int, expected: str
    ) -> None:
        """count picks the plural variant and is interpolated."""
        assert resolver.resolve("en", "inbox", {"count": count}) == expected

    def test_plural_through_fallback(self, resolver: TranslationResolver) -> None:
        """Plural entries found in a fallback locale pluralize normally."""
        assert resolver.resolve(CHAIN, "inbox", {"count": 2}) == "2 messages"

    def test_plural_through_key_default(self, resolver: TranslationResolver) -> None:
        """A reference to a plural entry is pluralized once."""
        assert resolver.resolve("en", "missing", {"default": ref("inbox"), "count": 1}) == "1 message"

    def test_missing_category(self, store: MemoryStore, resolver: TranslationResolver) -> None:
        """A plural entry without the selected category raises."""
        store.store("en", {"broken": {"one": "one thing"}})
        with pytest.raises(InvalidPluralizationData):
            resolver.resolve("en", "broken", {"count": 5})

    def test_non_numeric_count_rejected(self, resolver: TranslationResolver) -> None:
        """count must be a number."""
        with pytest.raises(TypeError, match="count must be a number"):
            resolver.resolve("en", "inbox", {"count": "3"})

    def test_reserved_placeholder(self, store: MemoryStore, resolver: TranslationResolver) -> None:
        """Templates cannot use scope/default as placeholders."""
        store.store("en", {"bad": "{{scope}}"})
        with pytest.raises(ReservedInterpolationKey):
            resolver.resolve("en", "bad", {"scope": None})

    def test_missing_argument(self, resolver: TranslationResolver) -> None:
        """A template placeholder without a value raises."""
        with pytest.raises(MissingInterpolationArgument):
            resolver.resolve("en", "greeting")

    def test_cldr_rule(self, store: MemoryStore) -> None:
        """A configured CLDR rule selects Russian categories."""
        store.store(
            "ru",
            {"files": {"one": "{{count}} файл", "few": "{{count}} файла", "many": "{{count}} файлов"}},
        )
        resolver = TranslationResolver(store, ResolverConfig(plural_rule=cldr_plural_rule))
        assert resolver.resolve("ru", "files", {"count": 3}) == "3 файла"
        assert resolver.resolve("ru", "files", {"count": 11}) == "11 файлов"


class TestExists:
    """exists() only checks stored data."""

    def test_present_in_fallback(self, resolver: TranslationResolver) -> None:
        """Any chain locale counts."""
        assert resolver.exists(CHAIN, "currency.format")

    def test_absent(self, resolver: TranslationResolver) -> None:
        """Missing keys are absent."""
        assert not resolver.exists(CHAIN, "nope")

    def test_scope(self, resolver: TranslationResolver) -> None:
        """scope is applied."""
        assert resolver.exists("en", "separator", scope="currency.format")


class TestConfiguration:
    """ResolverConfig validation and custom separators."""

    def test_custom_separator(self, store: MemoryStore) -> None:
        """Keys split on the configured separator."""
        resolver = TranslationResolver(store, ResolverConfig(separator="|"))
        assert resolver.resolve("en", "currency|format|separator") == "."

    @pytest.mark.parametrize("separator", ["", " "])
    def test_blank_separator_rejected(self, separator: str) -> None:
        """Blank separators are rejected."""
        with pytest.raises(ValueError, match="separator"):
            ResolverConfig(separator=separator)

    def test_non_callable_rule_rejected(self) -> None:
        """plural_rule must be callable."""
        with pytest.raises(TypeError, match="plural_rule"):
            ResolverConfig(plural_rule="english")  # type: ignore[arg-type]

    def test_resolve_with_locale_rejects_list(self, resolver: TranslationResolver) -> None:
        """resolve_with_locale handles one key at a time."""
        with pytest.raises(TypeError):
            resolver.resolve_with_locale("en", ["a", "b"])  # type: ignore[arg-type]
