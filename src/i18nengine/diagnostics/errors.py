"""i18nengine exception hierarchy with structured diagnostics.

Every exception stores a Diagnostic object built by ErrorTemplate, plus
the raw values involved (locale, key, entry, template) for callers that
want to react programmatically.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

from .codes import Diagnostic
from .templates import ErrorTemplate

__all__ = [
    "DepthLimitExceededError",
    "I18nError",
    "InvalidDefaultSpec",
    "InvalidLocale",
    "InvalidPluralizationData",
    "InvalidResourceData",
    "MissingInterpolationArgument",
    "MissingTranslationData",
    "ReservedInterpolationKey",
    "UnknownFileType",
]


def _describe_key(key: object, scope: object = None) -> str:
    """Render key (and optional scope) as a dotted path for messages."""
    parts: list[str] = []
    for part in (scope, key):
        match part:
            case None:
                continue
            case str():
                parts.append(part)
            case tuple() | list():
                parts.extend(str(segment) for segment in part)
            case _:
                parts.append(str(part))
    return ".".join(parts)


class I18nError(Exception):
    """Base exception for all i18nengine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize I18nError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidLocale(I18nError, ValueError):
    """Locale argument is absent, empty, or not a usable locale code.

    Raised before any lookup happens.
    """

    def __init__(self, locale: object) -> None:
        super().__init__(ErrorTemplate.invalid_locale(locale))
        self.locale = locale


class MissingTranslationData(I18nError):
    """No entry found after exhausting all locales and default alternatives.

    Attributes:
        locale: Resolved locale (the first requested one on a full miss)
        key: Key as passed by the caller
        options: Caller options without the default chain
    """

    def __init__(self, locale: str, key: object, options: Mapping[str, object]) -> None:
        scope = options.get("scope")
        super().__init__(ErrorTemplate.missing_translation(locale, _describe_key(key, scope)))
        self.locale = locale
        self.key = key
        self.options = dict(options)


class InvalidPluralizationData(I18nError):
    """Plural entry does not define the category selected by count."""

    def __init__(self, entry: object, count: object) -> None:
        super().__init__(ErrorTemplate.invalid_pluralization_data(entry, count))
        self.entry = entry
        self.count = count


class ReservedInterpolationKey(I18nError):
    """Template uses a reserved option name as a placeholder."""

    def __init__(self, key: str, template: str) -> None:
        super().__init__(ErrorTemplate.reserved_interpolation_key(key, template))
        self.key = key
        self.template = template


class MissingInterpolationArgument(I18nError):
    """Template references a placeholder with no corresponding value."""

    def __init__(self, key: str, template: str) -> None:
        super().__init__(ErrorTemplate.missing_interpolation_argument(key, template))
        self.key = key
        self.template = template


class InvalidDefaultSpec(I18nError, TypeError):
    """Default option has a shape the default resolver does not support."""

    def __init__(self, value: object, reason: str) -> None:
        super().__init__(ErrorTemplate.invalid_default(value, reason))
        self.value = value


class DepthLimitExceededError(I18nError):
    """Maximum nesting depth exceeded.

    Indicates a malformed or adversarial default specification
    (sequences nested hundreds of levels deep).
    """


class UnknownFileType(I18nError):
    """Translation resource has an extension no loader handles."""

    def __init__(self, file_type: str, path: str) -> None:
        super().__init__(ErrorTemplate.unknown_file_type(file_type, path))
        self.file_type = file_type
        self.path = path


class InvalidResourceData(I18nError, ValueError):
    """Translation resource decoded to something other than a mapping."""

    def __init__(self, path: str, received: str) -> None:
        super().__init__(ErrorTemplate.invalid_resource_data(path, received))
        self.path = path
