"""Prefix registry — the closed set of entity-type letters.

Every uppercase ASCII letter is registered with a distinct description.
The mapping is built once at import time and is read-only thereafter,
so concurrent readers need no synchronization.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType

from aidctl.domain.errors import UnknownPrefixError


class Prefix(StrEnum):
    """Entity-type prefix letters."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"  # noqa: E741
    J = "J"
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    O = "O"  # noqa: E741
    P = "P"
    Q = "Q"
    R = "R"
    S = "S"
    T = "T"
    U = "U"
    V = "V"
    W = "W"
    X = "X"
    Y = "Y"
    Z = "Z"


PREFIX_REGISTRY: Mapping[Prefix, str] = MappingProxyType(
    {
        Prefix.A: "Archive (Documents)",
        Prefix.B: "Base (Logistics, Inventory)",
        Prefix.C: "Contractor (Legal entities)",
        Prefix.D: "Deal (Sales deals)",
        Prefix.E: "Employee (Staff)",
        Prefix.F: "Finance (Transactions)",
        Prefix.G: "Goal",
        Prefix.H: "Human (Natural persons)",
        Prefix.I: "Invoice (Bills)",
        Prefix.J: "Journal (System logs)",
        Prefix.K: "Key (API keys, tokens)",
        Prefix.L: "Location (Geo points)",
        Prefix.M: "Message (Messages)",
        Prefix.N: "Notice (Notifications)",
        Prefix.O: "Outreach (Marketing)",
        Prefix.P: "Product (Products)",
        Prefix.Q: "Qualification (Assessments)",
        Prefix.R: "Routine (Automation)",
        Prefix.S: "Segment (Segments)",
        Prefix.T: "Text (Content)",
        Prefix.U: "University (LMS / Education)",
        Prefix.V: "Vote (Surveys)",
        Prefix.W: "Wallet (Wallets)",
        Prefix.X: "Xpanse (Spaces)",
        Prefix.Y: "Yard (Gamification)",
        Prefix.Z: "Zoo (Animals)",
    }
)


def is_registered_prefix(letter: object) -> bool:
    """Return True if *letter* is one of the registered uppercase letters."""
    return isinstance(letter, str) and letter in PREFIX_REGISTRY


def describe(letter: str) -> str:
    """Return the entity-type description for *letter*.

    Raises:
        UnknownPrefixError: If *letter* is not registered.
    """
    if not is_registered_prefix(letter):
        raise UnknownPrefixError(letter)
    return PREFIX_REGISTRY[Prefix(letter)]


def registered_prefixes() -> list[str]:
    """All registered letters in alphabetical order."""
    return [p.value for p in Prefix]
