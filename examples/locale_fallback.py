"""I18n Example - Multi-Locale Fallback Chains.

Demonstrates real-world usage of I18n for handling incomplete
translations and locale fallback chains.

Scenarios covered:
1. Basic two-locale fallback with partial Latvian translations
2. Three-locale chain (Baltic states) with fallback notifications
3. Disk-based JSON/TOML/YAML resources and load summaries
4. Custom in-memory resource loader
5. Key-reference defaults outranking literal defaults

Python 3.13+.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

from i18nengine import FallbackInfo, I18n, PathTranslationLoader, ref


def example_1_basic_fallback() -> None:
    """Example 1: Basic two-locale fallback (Latvian -> English)."""
    print("=" * 60)
    print("Example 1: Basic Fallback (lv -> en)")
    print("=" * 60)

    i18n = I18n(["lv", "en"])

    # Latvian translations (incomplete)
    i18n.store_translations("lv", {"welcome": "Sveiki, {{name}}!", "cart": "Grozs"})

    # English translations (complete)
    i18n.store_translations(
        "en",
        {
            "welcome": "Hello, {{name}}!",
            "cart": "Cart",
            "payment": {"success": "Payment successful", "error": "Payment failed"},
        },
    )

    print("\nMessages in Latvian:")
    print(f"  welcome: {i18n.translate('welcome', name='Anna')}")
    print(f"  cart: {i18n.translate('cart')}")

    print("\nMessages falling back to English:")
    print(f"  payment.success: {i18n.translate('payment.success')}")
    print(f"  payment.error: {i18n.translate('payment.error')}")

    print("\nNon-existent message:")
    print(f"  nonexistent: {i18n.try_translate('nonexistent')}")


def example_2_three_locale_chain() -> None:
    """Example 2: Three-locale chain with fallback notifications."""
    print("\n" + "=" * 60)
    print("Example 2: Three-Locale Chain (lv -> lt -> en)")
    print("=" * 60)

    def report(info: FallbackInfo) -> None:
        print(f"  [fallback] {info.key}: {info.requested_locale} -> {info.resolved_locale}")

    i18n = I18n(["lv", "lt", "en"], on_fallback=report)
    i18n.store_translations("lv", {"msg1": "Latvian"})
    i18n.store_translations("lt", {"msg2": "Lithuanian"})
    i18n.store_translations("en", {"msg1": "English", "msg2": "English", "msg3": "English"})

    print("\nFallback resolution:")
    for key in ("msg1", "msg2", "msg3"):
        print(f"  {key}: {i18n.translate(key)}")


def example_3_disk_based_resources(tmp_path: Path) -> None:
    """Example 3: Loading JSON, TOML and YAML files from disk."""
    print("\n" + "=" * 60)
    print("Example 3: Disk-Based Resources")
    print("=" * 60)

    locales_dir = tmp_path / "locales"
    (locales_dir / "lv").mkdir(parents=True)
    (locales_dir / "en").mkdir(parents=True)

    (locales_dir / "lv" / "ui.json").write_text(
        json.dumps({"hello": "Sveiki!"}, ensure_ascii=False), encoding="utf-8"
    )
    (locales_dir / "en" / "ui.json").write_text(json.dumps({"hello": "Hello!"}), encoding="utf-8")
    (locales_dir / "en" / "errors.toml").write_text(
        '[errors]\nnot_found = "Page not found"\n', encoding="utf-8"
    )

    loader = PathTranslationLoader(str(locales_dir / "{locale}"))
    i18n = I18n(["lv", "en"], ["ui.json", "errors.toml"], loader)

    summary = i18n.get_load_summary()
    print(f"\nLoaded from: {locales_dir}")
    print(f"  {summary}")
    for result in summary.get_not_found():
        print(f"  not found: {result.source_path}")

    print("\nUI messages (from lv/ui.json):")
    print(f"  hello: {i18n.translate('hello')}")

    print("\nError messages (fallback to en/errors.toml):")
    print(f"  errors.not_found: {i18n.translate('errors.not_found')}")

    # One YAML file holding several locales
    (tmp_path / "app.yml").write_text(
        "lv:\n  bye: Uz redzēšanos!\nen:\n  bye: Goodbye!\n", encoding="utf-8"
    )
    print(f"\n  {i18n.load_files(tmp_path / 'app.yml')}")
    print(f"  bye: {i18n.translate('bye')}")


def example_4_custom_loader() -> None:
    """Example 4: Custom in-memory loader implementing TranslationLoader."""
    print("\n" + "=" * 60)
    print("Example 4: Custom In-Memory Loader")
    print("=" * 60)

    class MemoryLoader:
        """Loader serving translation trees from a dict."""

        def __init__(self) -> None:
            self.resources: dict[tuple[str, str], dict[str, object]] = {}

        def add(self, locale: str, resource_id: str, tree: dict[str, object]) -> None:
            self.resources[(locale, resource_id)] = tree

        def load(self, locale: str, resource_id: str) -> dict[str, object]:
            try:
                return self.resources[(locale, resource_id)]
            except KeyError:
                raise FileNotFoundError(f"{locale}/{resource_id}") from None

        def describe_path(self, locale: str, resource_id: str) -> str:
            return f"memory://{locale}/{resource_id}"

    loader = MemoryLoader()
    loader.add("lv", "main", {"hello": "Sveiki no atmiņas!"})
    loader.add("en", "main", {"hello": "Hello from memory!", "welcome": "Welcome!"})

    i18n = I18n(["lv", "en"], ["main"], loader)

    print("\nLoaded from in-memory cache:")
    print(f"  hello (lv): {i18n.translate('hello')}")
    print(f"  welcome (en fallback): {i18n.translate('welcome')}")


def example_5_defaults() -> None:
    """Example 5: Key-reference defaults outrank literal defaults."""
    print("\n" + "=" * 60)
    print("Example 5: Defaults Across the Chain")
    print("=" * 60)

    i18n = I18n(["es-MX", "es", "en"])
    i18n.store_translations("en", {"fallback": "Fallback [en]"})

    print(f"\n  {i18n.translate('missing_key', default=['String', ref('fallback')])}")
    print(f"  {i18n.translate('missing_key', default={'es': 'Predeterminado [es]'})}")
    print(f"  {i18n.translate('missing_key', default='Only a literal')}")


if __name__ == "__main__":
    example_1_basic_fallback()
    example_2_three_locale_chain()

    with tempfile.TemporaryDirectory() as tmp_dir_main:
        example_3_disk_based_resources(Path(tmp_dir_main))

    example_4_custom_loader()
    example_5_defaults()

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples complete!")
    print("=" * 60)
