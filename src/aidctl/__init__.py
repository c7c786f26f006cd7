"""aidctl — typed, human-typable entity identifiers."""

__version__ = "0.1.0"
