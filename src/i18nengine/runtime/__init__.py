"""Runtime resolution: store, pipeline, and its stages.

Python 3.13+.
"""

from .config import ResolverConfig
from .defaults import (
    NOT_FOUND,
    ChainDefault,
    DefaultSpec,
    Found,
    KeyDefault,
    LiteralDefault,
    LocaleDefault,
    NotFound,
    parse_default,
    resolve_default,
    split_default,
)
from .interpolator import interpolate, placeholders
from .keys import key_path
from .pluralizer import PluralRule, cldr_plural_rule, english_plural_rule, pluralize
from .resolver import TranslationResolver
from .rwlock import RWLock
from .store import MemoryStore, TranslationStore, deep_merge
from .value_types import KeyRef, ref

__all__ = [
    "NOT_FOUND",
    "ChainDefault",
    "DefaultSpec",
    "Found",
    "KeyDefault",
    "KeyRef",
    "LiteralDefault",
    "LocaleDefault",
    "MemoryStore",
    "NotFound",
    "PluralRule",
    "RWLock",
    "ResolverConfig",
    "TranslationResolver",
    "TranslationStore",
    "cldr_plural_rule",
    "deep_merge",
    "english_plural_rule",
    "interpolate",
    "key_path",
    "parse_default",
    "placeholders",
    "pluralize",
    "ref",
    "resolve_default",
    "split_default",
]
