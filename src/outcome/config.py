"""
Configuration for the outcome package.
"""

from typing import Final

# --- Panic Configuration ---
OR_PANIC_MESSAGE: Final[str] = "Called `Outcome.or_panic(...)` on a `Failure` value"

# --- Runtime Type Checking ---
BEARTYPE_THIS_PACKAGE_ENV: Final[str] = "OUTCOME_BEARTYPE_THIS_PACKAGE"
BEARTYPE_ALL_ENV: Final[str] = "OUTCOME_BEARTYPE_ALL"

# --- SSoT Enforcement ---
__all__ = [
    "BEARTYPE_ALL_ENV",
    "BEARTYPE_THIS_PACKAGE_ENV",
    "OR_PANIC_MESSAGE",
]
