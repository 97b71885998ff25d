"""Validator configuration."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Callable

from pwsieve.dictionary.loader import system_dictionary_path
from pwsieve.hashing import COMMON_ALGORITHMS, HashAlgorithm

DEFAULT_MIN_LENGTH = 6
DEFAULT_MIN_UNIQUE_CHARS = 5
DEFAULT_MIN_EDIT_DISTANCE = 3

PWNED_PASSWORDS_RANGE_ENDPOINT = "https://api.pwnedpasswords.com/range/"
DEFAULT_CONNECT_TIMEOUT = 30.0
DEFAULT_READ_TIMEOUT = 10.0


def default_max_systematic(length: int) -> float:
    """Systematic pairs tolerated for a password of *length* (cracklib rule)."""

    return 3.0 + 0.09 * length


@dataclass(frozen=True)
class ValidatorOptions:
    min_length: int = DEFAULT_MIN_LENGTH
    min_unique_chars: int = DEFAULT_MIN_UNIQUE_CHARS
    max_systematic: Callable[[int], float] = default_max_systematic
    # Upper bound for the fuzzy-match threshold; negative disables fuzzy matching.
    min_edit_distance: int = DEFAULT_MIN_EDIT_DISTANCE
    hash_algorithms: tuple[HashAlgorithm, ...] = ()
    check_breach_db: bool = False
    # Raw word lists, one word per line.
    dictionary_words: tuple[str, ...] = ()
    dictionary_path: Path | None = None
    breach_endpoint: str = PWNED_PASSWORDS_RANGE_ENDPOINT
    breach_timeout: tuple[float, float] = field(default=(DEFAULT_CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT))

    def __post_init__(self) -> None:
        if self.min_length < 0:
            raise ValueError(f"min_length must be >= 0, got {self.min_length}")
        if self.min_unique_chars < 0:
            raise ValueError(f"min_unique_chars must be >= 0, got {self.min_unique_chars}")
        if not isinstance(self.hash_algorithms, tuple):
            object.__setattr__(self, "hash_algorithms", tuple(self.hash_algorithms))
        if isinstance(self.dictionary_words, str):
            object.__setattr__(self, "dictionary_words", (self.dictionary_words,))
        elif not isinstance(self.dictionary_words, tuple):
            object.__setattr__(self, "dictionary_words", tuple(self.dictionary_words))

    def with_overrides(self, **changes: Any) -> ValidatorOptions:
        return replace(self, **changes)


def recommended_options() -> ValidatorOptions:
    """Defaults plus the system dictionary and the common digest algorithms."""

    return ValidatorOptions(
        hash_algorithms=COMMON_ALGORITHMS,
        dictionary_path=system_dictionary_path(),
    )
