"""Shared constants for i18nengine.

Centralized configuration constants used by the runtime and localization
packages. Placing them here avoids circular imports and keeps a single
source of truth for reserved option names and limits.

Constants are grouped by domain:
- Option names: Reserved control fields in translate() options
- Keys: Separator used to split dotted key paths
- Depth limits: Recursion protection for nested default specifications
- Locales: Default locale for new I18n instances

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Option names
    "OPTION_COUNT",
    "OPTION_SCOPE",
    "OPTION_DEFAULT",
    "INTERPOLATION_RESERVED_KEYS",
    # Keys
    "DEFAULT_SEPARATOR",
    # Depth limits
    "MAX_DEPTH",
    # Locales
    "DEFAULT_LOCALE",
]

# ============================================================================
# OPTION NAMES
# ============================================================================

OPTION_COUNT = "count"
OPTION_SCOPE = "scope"
OPTION_DEFAULT = "default"

# Placeholder names a template may never reference. ``count`` is still an
# interpolation value ("{{count}} items").
INTERPOLATION_RESERVED_KEYS: frozenset[str] = frozenset({OPTION_SCOPE, OPTION_DEFAULT})

# ============================================================================
# KEYS
# ============================================================================

DEFAULT_SEPARATOR = "."

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting of default sequences (["a", ["b", ["c"]]]). Real defaults
# are one or two levels deep; anything near this limit is malformed input.
MAX_DEPTH = 100

# ============================================================================
# LOCALES
# ============================================================================

DEFAULT_LOCALE = "en"
