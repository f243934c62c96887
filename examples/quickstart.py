"""Quickstart example for i18nengine.

This example demonstrates basic usage of i18nengine: storing translations,
interpolation, pluralization, scopes, defaults and error handling.

Note: Missing translations raise MissingTranslationData. Use
try_translate() where a None result is more convenient than an exception.
"""

from i18nengine import (
    I18n,
    MissingInterpolationArgument,
    MissingTranslationData,
    cldr_plural_rule,
    ref,
)

# Example 1: Simple message
print("=" * 50)
print("Example 1: Simple Message")
print("=" * 50)

i18n = I18n("en")
i18n.store_translations("en", {"hello": "Hello, World!", "welcome": "Welcome to i18nengine!"})

print(i18n.translate("hello"))
# Output: Hello, World!

print(i18n.t("welcome"))
# Output: Welcome to i18nengine!

# Example 2: Interpolation
print("\n" + "=" * 50)
print("Example 2: Interpolation")
print("=" * 50)

i18n.store_translations("en", {"greeting": "Hello, {{name}}!", "escaped": r"Literal \{{name}}"})

print(i18n.translate("greeting", name="Alice"))
# Output: Hello, Alice!

print(i18n.translate("escaped"))
# Output: Literal {{name}}

# Example 3: Pluralization
print("\n" + "=" * 50)
print("Example 3: Pluralization")
print("=" * 50)

i18n.store_translations(
    "en",
    {"emails": {"zero": "No emails", "one": "You have 1 email", "other": "You have {{count}} emails"}},
)

for count in (0, 1, 5):
    print(f"  count={count}: {i18n.translate('emails', count=count)}")
# Output:
#   count=0: No emails
#   count=1: You have 1 email
#   count=5: You have 5 emails

# Example 4: CLDR plural rules (Babel)
print("\n" + "=" * 50)
print("Example 4: CLDR Plural Rules")
print("=" * 50)

ru = I18n("ru", plural_rule=cldr_plural_rule)
ru.store_translations(
    "ru",
    {"files": {"one": "{{count}} файл", "few": "{{count}} файла", "many": "{{count}} файлов"}},
)
for count in (1, 3, 5):
    print(f"  {ru.translate('files', count=count)}")
# Output:
#   1 файл
#   3 файла
#   5 файлов

# Example 5: Scopes
print("\n" + "=" * 50)
print("Example 5: Scopes")
print("=" * 50)

i18n.store_translations(
    "en",
    {"activerecord": {"errors": {"messages": {"blank": "can't be blank"}}}},
)
print(i18n.translate("blank", scope="activerecord.errors.messages"))
print(i18n.translate(("errors", "messages", "blank"), scope="activerecord"))
# Output: can't be blank (twice)

# Example 6: Defaults
print("\n" + "=" * 50)
print("Example 6: Defaults")
print("=" * 50)

print(i18n.translate("missing", default="Literal default"))
# Output: Literal default

print(i18n.translate("missing", default=[ref("also_missing"), ref("hello"), "Literal"]))
# Output: Hello, World!

print(i18n.translate("missing", default={"en": "English default", "de": "Deutsch"}))
# Output: English default

# Example 7: Error handling
print("\n" + "=" * 50)
print("Example 7: Error Handling")
print("=" * 50)

try:
    i18n.translate("does.not.exist")
except MissingTranslationData as e:
    print(f"Missing: {e}")
    if e.diagnostic is not None:
        print(e.diagnostic.format_error())

try:
    i18n.translate("greeting")
except MissingInterpolationArgument as e:
    print(f"Missing argument: {e.key}")

print(f"try_translate: {i18n.try_translate('does.not.exist')}")
# Output: try_translate: None

print("\n" + "=" * 50)
print("[SUCCESS] All examples complete!")
print("=" * 50)
