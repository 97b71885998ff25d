"""Custom exceptions for pwsieve."""
from __future__ import annotations

from enum import Enum


class RejectReason(str, Enum):
    EMPTY = "empty"
    TOO_SHORT = "too-short"
    TOO_FEW_CHARS = "too-few-chars"
    TOO_SYSTEMATIC = "too-systematic"
    DICTIONARY = "dictionary"
    MANGLED_DICTIONARY = "mangled-dictionary"
    HASHED_DICTIONARY = "hashed-dictionary"
    BREACHED = "breached"


class PwSieveError(Exception):
    """Base exception for pwsieve."""


class WeakPasswordError(PwSieveError, ValueError):
    """Raised when a password fails one of the weakness checks."""

    reason: RejectReason
    default_message = "Password is weak"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class EmptyPasswordError(WeakPasswordError):
    reason = RejectReason.EMPTY
    default_message = "Password is empty or all whitespace"


class TooShortError(WeakPasswordError):
    reason = RejectReason.TOO_SHORT
    default_message = "Password is too short"


class TooFewCharsError(WeakPasswordError):
    reason = RejectReason.TOO_FEW_CHARS
    default_message = "Password does not contain enough different/unique characters"


class TooSystematicError(WeakPasswordError):
    reason = RejectReason.TOO_SYSTEMATIC
    default_message = "Password is too systematic"


class DictionaryError(WeakPasswordError):
    """Password is a dictionary word.

    ``word`` is the matched dictionary entry (normalized form).
    """

    reason = RejectReason.DICTIONARY
    default_message = "Password is too common / from a dictionary"

    def __init__(self, word: str, message: str | None = None) -> None:
        self.word = word
        super().__init__(message)


class MangledDictionaryError(DictionaryError):
    """Password is a case-changed, reversed or lightly edited dictionary word."""

    reason = RejectReason.MANGLED_DICTIONARY
    default_message = "Password is mangled, but too common / from a dictionary"

    def __init__(self, word: str, distance: int, message: str | None = None) -> None:
        self.distance = distance
        super().__init__(word, message)


class HashedDictionaryError(DictionaryError):
    """Password is the hex digest of a dictionary word."""

    reason = RejectReason.HASHED_DICTIONARY
    default_message = "Password is hashed, but too common / from a dictionary"

    def __init__(self, word: str, algorithm: str, message: str | None = None) -> None:
        self.algorithm = algorithm
        super().__init__(word, message)


class BreachedPasswordError(WeakPasswordError):
    reason = RejectReason.BREACHED
    default_message = "Password was found in a database of breached passwords"


class BreachLookupError(PwSieveError):
    """The breach database could not be queried.

    This is not a verdict on the password: the check did not run.
    """
