"""Pytest configuration for the i18nengine test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

from __future__ import annotations

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from i18nengine import I18n, MemoryStore

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def store() -> MemoryStore:
    """Store pre-populated with a small English/Spanish tree."""
    memory = MemoryStore()
    memory.store(
        "en",
        {
            "currency": {"format": {"separator": ".", "delimiter": ","}},
            "greeting": "Hello, {{name}}!",
            "inbox": {"zero": "No messages", "one": "1 message", "other": "{{count}} messages"},
        },
    )
    memory.store("es", {"greeting": "¡Hola, {{name}}!"})
    return memory


@pytest.fixture
def i18n() -> I18n:
    """Facade with the es-MX -> es -> en chain and an English base tree."""
    facade = I18n(["es-MX", "es", "en"])
    facade.store_translations(
        "en",
        {"currency": {"format": {"separator": ".", "delimiter": ","}}},
    )
    return facade
