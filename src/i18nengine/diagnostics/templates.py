"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable, consistently formatted, and documents
    every error case in one place.
    """

    @staticmethod
    def invalid_locale(locale: object) -> Diagnostic:
        """Locale argument missing, empty, or malformed.

        Args:
            locale: The offending locale value (or locale list)

        Returns:
            Diagnostic for INVALID_LOCALE
        """
        msg = f"{locale!r} is not a valid locale"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALE,
            message=msg,
            hint="Pass a non-empty locale code or a non-empty list of locale codes",
        )

    @staticmethod
    def missing_translation(locale: str, key: str) -> Diagnostic:
        """No translation or default found after exhausting the fallback chain.

        Args:
            locale: Resolved locale (first requested locale on a full miss)
            key: Dotted key including scope

        Returns:
            Diagnostic for MISSING_TRANSLATION
        """
        msg = f"Translation missing: {locale}.{key}"
        return Diagnostic(
            code=DiagnosticCode.MISSING_TRANSLATION,
            message=msg,
            hint=f"Store a translation for '{key}' or pass a default",
            locale=locale,
            key=key,
        )

    @staticmethod
    def invalid_pluralization_data(entry: object, count: object) -> Diagnostic:
        """Plural entry lacks the category selected by count.

        Args:
            entry: The count-indexed mapping
            count: The count that selected the missing category

        Returns:
            Diagnostic for INVALID_PLURALIZATION_DATA
        """
        msg = f"Translation data {entry!r} can not be used with :count => {count!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_PLURALIZATION_DATA,
            message=msg,
            hint="Plural entries need an 'other' variant and 'one' for singular counts",
        )

    @staticmethod
    def reserved_interpolation_key(key: str, template: str) -> Diagnostic:
        """Template references a reserved option name.

        Args:
            key: The reserved placeholder name
            template: The template being interpolated

        Returns:
            Diagnostic for RESERVED_INTERPOLATION_KEY
        """
        msg = f"Reserved key {key!r} used in {template!r}"
        return Diagnostic(
            code=DiagnosticCode.RESERVED_INTERPOLATION_KEY,
            message=msg,
            hint="'scope' and 'default' are control options; rename the placeholder",
            placeholder=key,
        )

    @staticmethod
    def missing_interpolation_argument(key: str, template: str) -> Diagnostic:
        """Template references a placeholder with no value.

        Args:
            key: The placeholder name
            template: The template being interpolated

        Returns:
            Diagnostic for MISSING_INTERPOLATION_ARGUMENT
        """
        msg = f"Interpolation argument {key!r} missing in {template!r}"
        return Diagnostic(
            code=DiagnosticCode.MISSING_INTERPOLATION_ARGUMENT,
            message=msg,
            hint=f"Pass {key}=... to translate()",
            placeholder=key,
        )

    @staticmethod
    def invalid_default(value: object, reason: str) -> Diagnostic:
        """Default specification has an unsupported shape."""
        msg = f"Invalid default {value!r}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DEFAULT,
            message=msg,
            hint="Use a string, ref('key'), a list of those, or a locale mapping",
        )

    @staticmethod
    def depth_exceeded(max_depth: int) -> Diagnostic:
        """Nesting limit exceeded.

        Args:
            max_depth: Maximum allowed depth

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth exceeded (max: {max_depth})"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Flatten nested default sequences",
        )

    @staticmethod
    def unknown_file_type(file_type: str, path: str) -> Diagnostic:
        """Translation resource has an unsupported extension."""
        msg = f"Can not load translations from {path}, the file type {file_type!r} is not known"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_FILE_TYPE,
            message=msg,
            hint="Supported translation files: .json, .toml",
        )

    @staticmethod
    def invalid_resource_data(path: str, received: str) -> Diagnostic:
        """Translation resource did not decode to a mapping."""
        msg = f"Translation resource {path} must contain a mapping, got {received}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_RESOURCE_DATA,
            message=msg,
            hint="The top level of a translation file maps keys to strings or tables",
        )
