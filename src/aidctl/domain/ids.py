"""AID format validation and parsing.

Format: one lowercase ASCII letter, a hyphen, then six characters from
``[a-z0-9]`` (e.g. ``g-a1b2c3``). These helpers are pure and never raise
on malformed input; they report failure through ``False`` or ``None``.
"""

from __future__ import annotations

import re

from aidctl.domain.registry import Prefix, describe

SUFFIX_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"
SUFFIX_LENGTH = 6
AID_LENGTH = 2 + SUFFIX_LENGTH

AID_PATTERN: re.Pattern[str] = re.compile(r"[a-z]-[a-z0-9]{6}")


def is_valid_aid(candidate: object) -> bool:
    """Check whether *candidate* is a well-formed AID."""
    if not isinstance(candidate, str):
        return False
    return AID_PATTERN.fullmatch(candidate) is not None


def extract_prefix(candidate: object) -> Prefix | None:
    """Return the uppercased prefix of a valid AID, or None."""
    if not isinstance(candidate, str) or not is_valid_aid(candidate):
        return None
    return Prefix(candidate[0].upper())


def describe_prefix(letter: str) -> str:
    """Describe the entity type behind *letter*.

    Callers are expected to pass letters obtained from :func:`extract_prefix`;
    an :class:`~aidctl.domain.errors.UnknownPrefixError` here means the caller
    and registry disagree.
    """
    return describe(letter)
