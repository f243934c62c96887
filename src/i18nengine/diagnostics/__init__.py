"""Diagnostic system for i18nengine errors.

Provides structured error diagnostics with codes, hints, and the
exception hierarchy raised by the resolution pipeline.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    DepthLimitExceededError,
    I18nError,
    InvalidDefaultSpec,
    InvalidLocale,
    InvalidPluralizationData,
    InvalidResourceData,
    MissingInterpolationArgument,
    MissingTranslationData,
    ReservedInterpolationKey,
    UnknownFileType,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "I18nError",
    "InvalidDefaultSpec",
    "InvalidLocale",
    "InvalidPluralizationData",
    "InvalidResourceData",
    "MissingInterpolationArgument",
    "MissingTranslationData",
    "OutputFormat",
    "ReservedInterpolationKey",
    "UnknownFileType",
]
