"""Dictionary indexing and matching."""
from __future__ import annotations

from pwsieve.dictionary.index import DictionaryIndex, LazyDictionaryIndex
from pwsieve.dictionary.loader import read_dictionary_files, system_dictionary_path
from pwsieve.dictionary.matcher import (
    NO_MATCH,
    MatchKind,
    MatchResult,
    fuzzy_threshold,
    match,
    match_exact,
    match_fuzzy,
    match_hashed,
    match_reversed,
)

__all__ = [
    "DictionaryIndex",
    "LazyDictionaryIndex",
    "MatchKind",
    "MatchResult",
    "NO_MATCH",
    "fuzzy_threshold",
    "match",
    "match_exact",
    "match_fuzzy",
    "match_hashed",
    "match_reversed",
    "read_dictionary_files",
    "system_dictionary_path",
]
