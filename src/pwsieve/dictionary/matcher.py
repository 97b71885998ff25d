"""Dictionary matching: exact, reversed, fuzzy and hash-encoded words.

Each phase is a standalone function returning a :class:`MatchResult` or
``None``. :func:`match` composes them in the fixed order
exact -> reversed -> fuzzy -> hashed and stops at the first hit, so the
order decides which kind of match a caller sees for ambiguous input.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from pwsieve.dictionary.index import DictionaryIndex
from pwsieve.hashing import HashAlgorithm
from pwsieve.metrics import edit_distance, normalize, reverse

logger = logging.getLogger(__name__)

MAX_FUZZY_DISTANCE = 3


class MatchKind(str, Enum):
    NONE = "none"
    EXACT = "exact"
    REVERSED = "reversed"
    FUZZY = "fuzzy"
    HASHED = "hashed"


@dataclass(frozen=True)
class MatchResult:
    kind: MatchKind
    word: str | None = None
    distance: int | None = None
    algorithm: str | None = None
    # True when the password differs from the dictionary word in any way
    # (case, surrounding whitespace, reversal, edits).
    mangled: bool = False

    def __bool__(self) -> bool:
        return self.kind is not MatchKind.NONE


NO_MATCH = MatchResult(MatchKind.NONE)


def fuzzy_threshold(normalized_password: str, min_edit_distance: int = MAX_FUZZY_DISTANCE) -> int:
    """Largest edit distance still treated as a mangled dictionary word."""

    return min(len(normalized_password) // 2, min_edit_distance)


def match_exact(password: str, index: DictionaryIndex) -> MatchResult | None:
    normalized = normalize(password)
    if normalized not in index:
        return None
    return MatchResult(MatchKind.EXACT, word=normalized, distance=0, mangled=password != normalized)


def match_reversed(password: str, index: DictionaryIndex) -> MatchResult | None:
    reversed_password = reverse(normalize(password))
    if reversed_password not in index:
        return None
    return MatchResult(MatchKind.REVERSED, word=reversed_password, distance=0, mangled=True)


def match_fuzzy(password: str, index: DictionaryIndex, min_edit_distance: int = MAX_FUZZY_DISTANCE) -> MatchResult | None:
    """Return the first word within the fuzzy threshold of the password or its reverse.

    A negative *min_edit_distance* disables the scan. The first qualifying
    word in iteration order wins; this is not a nearest-neighbour search.
    """
    if min_edit_distance < 0:
        return None

    normalized = normalize(password)
    reversed_password = reverse(normalized)
    threshold = fuzzy_threshold(normalized, min_edit_distance)

    for word in index:
        distance = edit_distance(word, normalized, threshold)
        if distance > threshold:
            distance = edit_distance(word, reversed_password, threshold)
        if distance <= threshold:
            return MatchResult(MatchKind.FUZZY, word=word, distance=distance, mangled=True)
    return None


def match_hashed(password: str, index: DictionaryIndex, algorithms: Sequence[HashAlgorithm]) -> MatchResult | None:
    """Return a match when the password is the hex digest of a dictionary word."""

    if not algorithms:
        return None

    candidate = password.lower()
    for algorithm in algorithms:
        word = index.digest_table(algorithm).get(candidate)
        if word is not None:
            return MatchResult(MatchKind.HASHED, word=word, algorithm=algorithm.name, mangled=True)
    return None


def match(
    password: str,
    index: DictionaryIndex,
    *,
    min_edit_distance: int = MAX_FUZZY_DISTANCE,
    hash_algorithms: Sequence[HashAlgorithm] = (),
) -> MatchResult:
    result = (
        match_exact(password, index)
        or match_reversed(password, index)
        or match_fuzzy(password, index, min_edit_distance)
        or match_hashed(password, index, hash_algorithms)
    )
    if result is None:
        return NO_MATCH
    logger.debug("Dictionary check matched (%s)", result.kind.value)
    return result
