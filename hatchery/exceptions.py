"""Hatchery exception hierarchy.

Centralised base classes so callers can catch generator failures narrowly
instead of reaching for bare ``except Exception`` blocks.
"""


class HatcheryError(Exception):
    """Root of all hatchery domain exceptions."""


class ConfigurationError(HatcheryError):
    """Invalid or missing configuration (unknown key, empty pool, bad weights)."""


class GeneticsError(HatcheryError):
    """A genetic profile could not be generated."""


class InvalidOverrideError(GeneticsError, ValueError):
    """An unrecognised rarity tier was passed as an override."""

    def __init__(self, value: object, allowed: tuple = ()) -> None:
        self.value = value
        self.allowed = tuple(allowed)
        message = f"Unknown rarity override {value!r}"
        if self.allowed:
            message += f" (expected one of: {', '.join(self.allowed)})"
        super().__init__(message)
