"""Translation resource loading for I18n.

Provides the protocol for translation loaders, a filesystem implementation
with path-traversal checks, and result/summary records for load attempts.

Components:
    TranslationLoader - Protocol for loading one resource for one locale
    PathTranslationLoader - Disk-based loader for .json, .toml and .yml files
    load_locale_file - Decode a file whose top-level keys are locales
    FallbackInfo - Immutable record of a locale fallback event
    ResourceLoadResult - Immutable result of a single load attempt
    LoadSummary - Immutable aggregate of load results

Python 3.13+. Depends on PyYAML for .yml/.yaml resources.
"""

from __future__ import annotations

import json
import tomllib
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

import yaml

from i18nengine.diagnostics import InvalidResourceData, UnknownFileType
from i18nengine.enums import LoadStatus
from i18nengine.locale_utils import validate_locale
from i18nengine.localization.types import LocaleCode, ResourceId, TranslationTree

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "TranslationLoader",
    # Concrete loader
    "PathTranslationLoader",
    "DECODERS",
    "load_locale_file",
    # Fallback observability
    "FallbackInfo",
    # Load result types
    "ResourceLoadResult",
    "LoadSummary",
]


def _load_yaml(text: str) -> object:
    """Decode YAML with safe_load; an empty document decodes to {}."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        msg = f"Failed to parse YAML: {e}"
        raise ValueError(msg) from e
    return {} if data is None else data


DECODERS: Mapping[str, Callable[[str], object]] = {
    "json": json.loads,
    "toml": tomllib.loads,
    "yml": _load_yaml,
    "yaml": _load_yaml,
}
"""File extension (without dot, lower case) -> text decoder."""


def _decoder_for(path: str) -> Callable[[str], object]:
    file_type = Path(path).suffix.lstrip(".").lower()
    decoder = DECODERS.get(file_type)
    if decoder is None:
        raise UnknownFileType(file_type, path)
    return decoder


def load_locale_file(path: str | Path) -> dict[LocaleCode, TranslationTree]:
    """Decode a translation file whose top-level keys are locale codes.

    The format is chosen by extension, as for PathTranslationLoader:

        en:
          hello: "Hello"
        de:
          hello: "Hallo"

    Returns:
        Mapping of locale code to that locale's translation tree

    Raises:
        UnknownFileType: If the extension has no decoder
        ValueError: If decoding fails
        InvalidResourceData: If the file is not a mapping of locale -> mapping
        InvalidLocale: If a top-level key is not a usable locale code
        FileNotFoundError: If the file doesn't exist
        OSError: If the file cannot be read
    """
    decoder = _decoder_for(str(path))
    data = decoder(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, Mapping):
        raise InvalidResourceData(str(path), type(data).__name__)

    trees: dict[LocaleCode, TranslationTree] = {}
    for locale, tree in data.items():
        if not isinstance(tree, Mapping):
            raise InvalidResourceData(f"{path} [{locale}]", type(tree).__name__)
        trees[validate_locale(locale)] = tree
    return trees


class TranslationLoader(Protocol):
    """Protocol for loading translation trees for specific locales.

    A Protocol (structural typing) rather than an ABC so any object with
    load() and describe_path() works, including in-memory test doubles.

    Example:
        >>> class DictLoader:
        ...     def __init__(self, data): self.data = data
        ...     def load(self, locale, resource_id):
        ...         try:
        ...             return self.data[locale][resource_id]
        ...         except KeyError:
        ...             raise FileNotFoundError(resource_id) from None
        ...     def describe_path(self, locale, resource_id):
        ...         return f"memory://{locale}/{resource_id}"
    """

    def load(self, locale: LocaleCode, resource_id: ResourceId) -> TranslationTree:
        """Load the translation tree of resource_id for locale.

        Raises:
            FileNotFoundError: If the resource doesn't exist for this locale
            OSError: If the resource cannot be read
            ValueError: If the resource cannot be decoded
        """

    def describe_path(self, locale: LocaleCode, resource_id: ResourceId) -> str:
        """Return human-readable path for diagnostics."""
        return f"{locale}/{resource_id}"


@dataclass(frozen=True, slots=True)
class PathTranslationLoader:
    """File system loader using a path template.

    The {locale} placeholder in base_path is replaced by the locale code;
    the file format is chosen by the resource extension (.json, .toml,
    .yml, .yaml).
    Each file holds the translation tree of one locale.

    Security:
        Locale codes containing path separators or ".." are rejected.
        Resource IDs containing ".." or absolute paths are rejected.
        All resolved paths are validated against a fixed root directory.

    Example:
        >>> loader = PathTranslationLoader("locales/{locale}")
        >>> tree = loader.load("en", "main.json")
        # Loads from: locales/en/main.json

    Attributes:
        base_path: Path template with {locale} placeholder
        root_dir: Fixed root directory for path traversal validation.
                  Defaults to the static prefix of base_path.
    """

    base_path: str
    root_dir: str | None = None
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate the template and cache the resolved root directory.

        Raises:
            ValueError: If base_path does not contain {locale} placeholder
        """
        if "{locale}" not in self.base_path:
            msg = (
                f"base_path must contain '{{locale}}' placeholder for locale substitution, "
                f"got: '{self.base_path}'"
            )
            raise ValueError(msg)

        if self.root_dir is not None:
            resolved = Path(self.root_dir).resolve()
        else:
            static_prefix = self.base_path.split("{locale}")[0].rstrip("/\\")
            resolved = Path(static_prefix).resolve() if static_prefix else Path.cwd().resolve()
        object.__setattr__(self, "_resolved_root", resolved)

    @staticmethod
    def _validate_locale(locale: LocaleCode) -> None:
        if not locale:
            msg = "Locale code cannot be empty"
            raise ValueError(msg)
        if ".." in locale:
            msg = f"Path traversal sequences not allowed in locale: '{locale}'"
            raise ValueError(msg)
        if "/" in locale or "\\" in locale:
            msg = f"Path separators not allowed in locale: '{locale}'"
            raise ValueError(msg)

    @staticmethod
    def _validate_resource_id(resource_id: ResourceId) -> None:
        if resource_id.strip() != resource_id:
            msg = f"Resource ID contains leading/trailing whitespace: {resource_id!r}"
            raise ValueError(msg)
        if Path(resource_id).is_absolute() or resource_id.startswith(("/", "\\")):
            msg = f"Absolute paths not allowed in resource_id: '{resource_id}'"
            raise ValueError(msg)
        if ".." in resource_id:
            msg = f"Path traversal sequences not allowed in resource_id: '{resource_id}'"
            raise ValueError(msg)

    def describe_path(self, locale: LocaleCode, resource_id: ResourceId) -> str:
        """Return the locale-substituted path of resource_id."""
        return f"{self.base_path.replace('{locale}', locale)}/{resource_id}"

    def load(self, locale: LocaleCode, resource_id: ResourceId) -> TranslationTree:
        """Read and decode a translation file.

        Raises:
            UnknownFileType: If the extension has no decoder
            ValueError: If locale or resource_id is unsafe, or decoding fails
            InvalidResourceData: If the file does not hold a mapping
            FileNotFoundError: If the file doesn't exist
            OSError: If the file cannot be read
        """
        self._validate_locale(locale)
        self._validate_resource_id(resource_id)

        decoder = _decoder_for(self.describe_path(locale, resource_id))

        base_dir = Path(self.base_path.replace("{locale}", locale)).resolve()
        full_path = (base_dir / resource_id).resolve()
        try:
            full_path.relative_to(self._resolved_root)
        except ValueError:
            msg = (
                f"Path traversal detected: resolved path escapes root directory. "
                f"locale='{locale}', resource_id='{resource_id}'"
            )
            raise ValueError(msg) from None

        data = decoder(full_path.read_text(encoding="utf-8"))
        if not isinstance(data, Mapping):
            raise InvalidResourceData(str(full_path), type(data).__name__)
        return data


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a locale fallback event.

    Provided to the on_fallback callback when I18n resolves a key from a
    locale other than the first one in the chain.

    Attributes:
        requested_locale: The primary (first) locale in the chain
        resolved_locale: The locale that actually provided the translation
        key: The key as passed to translate()

    Example:
        >>> def log_fallback(info: FallbackInfo) -> None:
        ...     print(f"{info.key} came from {info.resolved_locale}")
        >>> i18n = I18n(["es-MX", "es", "en"], on_fallback=log_fallback)
    """

    requested_locale: LocaleCode
    resolved_locale: LocaleCode
    key: object


@dataclass(frozen=True, slots=True)
class ResourceLoadResult:
    """Result of loading a single translation resource.

    Attributes:
        locale: Locale code for this resource; None when a locale-keyed
                file (see I18n.load_files) could not be read
        resource_id: Resource identifier (e.g., 'main.json')
        status: Load status (success, not_found, error)
        error: Exception if status is ERROR, None otherwise
        source_path: Human-readable path to resource (if available)
    """

    locale: LocaleCode | None
    resource_id: ResourceId
    status: LoadStatus
    error: Exception | None = None
    source_path: str | None = None

    @property
    def is_success(self) -> bool:
        """Check if resource loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if resource was not found (expected for partial locales)."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if resource load failed with an error."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of resource load results.

    All statistics are computed from the ``results`` tuple.

    Example:
        >>> summary = i18n.get_load_summary()
        >>> for result in summary.get_errors():
        ...     print(f"Failed: {result.source_path}: {result.error}")
    """

    results: tuple[ResourceLoadResult, ...]

    def __repr__(self) -> str:
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"not_found={self.not_found}, "
            f"errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of load attempts."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of successful loads."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        """Number of resources not found."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        """Number of load errors."""
        return sum(1 for r in self.results if r.is_error)

    @property
    def has_errors(self) -> bool:
        """Check if any resource failed to load."""
        return self.errors > 0

    @property
    def all_successful(self) -> bool:
        """True if every attempted resource was found and loaded."""
        return self.errors == 0 and self.not_found == 0

    def get_errors(self) -> tuple[ResourceLoadResult, ...]:
        """Get all results with errors."""
        return tuple(r for r in self.results if r.is_error)

    def get_not_found(self) -> tuple[ResourceLoadResult, ...]:
        """Get all results where the resource was not found."""
        return tuple(r for r in self.results if r.is_not_found)

    def get_by_locale(self, locale: LocaleCode) -> tuple[ResourceLoadResult, ...]:
        """Get all results for a specific locale."""
        return tuple(r for r in self.results if r.locale == locale)
