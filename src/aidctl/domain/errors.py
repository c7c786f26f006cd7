"""Exceptions raised by the identifier subsystem.

Validation helpers never raise; they report malformed input through
``False``/``None``. Only generation and description lookups raise, because
a bad prefix there is a programming error at the call site.
"""

from __future__ import annotations


class AidError(Exception):
    """Base class for identifier errors."""


class InvalidPrefixError(AidError, ValueError):
    """Requested prefix is not a registered uppercase letter."""

    def __init__(self, prefix: object, valid: list[str]) -> None:
        self.prefix = prefix
        super().__init__(f"Invalid AID prefix: {prefix}. Valid prefixes: {', '.join(valid)}")


class UnknownPrefixError(AidError, LookupError):
    """Description lookup for a letter outside the registry."""

    def __init__(self, prefix: object) -> None:
        self.prefix = prefix
        super().__init__(f"Unknown AID prefix: {prefix!r}")


class ExhaustedIdentifierSpaceError(AidError, RuntimeError):
    """Collision retries hit the configured cap without finding a free AID."""

    def __init__(self, prefix: str, attempts: int) -> None:
        self.prefix = prefix
        self.attempts = attempts
        super().__init__(
            f"Could not issue a unique AID for prefix {prefix!r} after {attempts} attempts"
        )
