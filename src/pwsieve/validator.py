"""Password validation pipeline.

Checks run in a fixed order and stop at the first failure:

1. empty or whitespace-only
2. shorter than ``min_length`` (raw characters, before normalization)
3. fewer than ``min_unique_chars`` distinct characters
4. too many systematic pairs (``abc``, ``654``)
5. dictionary: exact, reversed, fuzzy, hash-encoded
6. optional breach database lookup

A :class:`Validator` is cheap to build and safe to share between threads;
its dictionary index is loaded once, on first use.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from pwsieve.breach import BreachClient
from pwsieve.config import ValidatorOptions
from pwsieve.dictionary.index import DictionaryIndex, LazyDictionaryIndex
from pwsieve.dictionary.loader import read_dictionary_files
from pwsieve.dictionary.matcher import MatchKind, MatchResult, match
from pwsieve.errors import (
    BreachedPasswordError,
    DictionaryError,
    EmptyPasswordError,
    HashedDictionaryError,
    MangledDictionaryError,
    RejectReason,
    TooFewCharsError,
    TooShortError,
    TooSystematicError,
    WeakPasswordError,
)
from pwsieve.metrics import systematic_run_count, unique_char_count
from pwsieve.strength import PasswordStrength, evaluate_password, rejected

logger = logging.getLogger(__name__)

BreachLookup = Callable[[str], bool]


@dataclass(frozen=True)
class Verdict:
    error: WeakPasswordError | None = None

    @property
    def accepted(self) -> bool:
        return self.error is None

    @property
    def reason(self) -> RejectReason | None:
        return self.error.reason if self.error is not None else None


ACCEPT = Verdict()


def check_structure(password: str, options: ValidatorOptions) -> None:
    """Raise the first structural weakness found in *password*."""

    if not password.strip():
        raise EmptyPasswordError()
    if len(password) < options.min_length:
        raise TooShortError()
    if unique_char_count(password) < options.min_unique_chars:
        raise TooFewCharsError()
    if systematic_run_count(password) > int(options.max_systematic(len(password))):
        raise TooSystematicError()


def match_error(result: MatchResult) -> DictionaryError | None:
    """Translate a dictionary match into the error reported to callers."""

    if result.kind is MatchKind.NONE:
        return None
    if result.word is None:
        raise ValueError(f"{result.kind.value} match carries no dictionary word")
    if result.kind is MatchKind.HASHED:
        if result.algorithm is None:
            raise ValueError("hashed match carries no algorithm name")
        return HashedDictionaryError(result.word, result.algorithm)
    if result.kind is MatchKind.EXACT and not result.mangled:
        return DictionaryError(result.word)
    return MangledDictionaryError(result.word, result.distance or 0)


class Validator:
    def __init__(
        self,
        options: ValidatorOptions | None = None,
        *,
        dictionary: DictionaryIndex | LazyDictionaryIndex | None = None,
        breach_lookup: BreachLookup | None = None,
    ) -> None:
        self.options = options or ValidatorOptions()
        if isinstance(dictionary, DictionaryIndex):
            dictionary = LazyDictionaryIndex.of(dictionary)
        self._dictionary = dictionary or LazyDictionaryIndex(self._load_words)
        self._breach_lookup = breach_lookup or self._query_breach_db

    def _load_words(self) -> list[str]:
        blocks = list(self.options.dictionary_words)
        if self.options.dictionary_path is not None:
            blocks.extend(read_dictionary_files(self.options.dictionary_path))
        return blocks

    def _query_breach_db(self, password: str) -> bool:
        # A fresh client per lookup: no requests.Session is shared between
        # threads and none outlives the call.
        with BreachClient(self.options.breach_endpoint, timeout=self.options.breach_timeout) as client:
            return client.query(password)

    @property
    def dictionary(self) -> DictionaryIndex:
        return self._dictionary.get()

    def validate(self, password: str) -> None:
        """Raise :class:`WeakPasswordError` if *password* is weak.

        :class:`~pwsieve.errors.BreachLookupError` propagates when the breach
        check is enabled and the service cannot be reached.
        """
        check_structure(password, self.options)

        error = match_error(
            match(
                password,
                self.dictionary,
                min_edit_distance=self.options.min_edit_distance,
                hash_algorithms=self.options.hash_algorithms,
            )
        )
        if error is not None:
            raise error

        if self.options.check_breach_db and self._breach_lookup(password):
            raise BreachedPasswordError()

    def check(self, password: str) -> Verdict:
        try:
            self.validate(password)
        except WeakPasswordError as exc:
            logger.debug("Password rejected: %s", exc.reason.value)
            return Verdict(exc)
        return ACCEPT

    def rate(self, password: str) -> PasswordStrength:
        """Run :meth:`check` and score accepted passwords from 0 to 100."""

        verdict = self.check(password)
        if verdict.error is not None:
            return rejected(password, verdict.error)
        return evaluate_password(password)
