"""In-memory index of normalized dictionary words."""
from __future__ import annotations

import logging
import threading
from typing import Callable, Iterable, Iterator

from pwsieve.hashing import HashAlgorithm
from pwsieve.metrics import normalize

logger = logging.getLogger(__name__)

WordSource = Callable[[], Iterable[str]]


class DictionaryIndex:
    """A read-only set of normalized words.

    Built from raw text blocks (file contents); every line becomes one
    candidate word. Empty lines are ignored and duplicates collapse.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: frozenset[str] = frozenset(w for w in (normalize(word) for word in words) if w)
        self._digest_tables: dict[HashAlgorithm, dict[str, str]] = {}
        self._digest_lock = threading.Lock()

    @classmethod
    def from_text_blocks(cls, blocks: Iterable[str]) -> DictionaryIndex:
        return cls(line for block in blocks for line in block.splitlines())

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def contains(self, normalized_word: str) -> bool:
        return normalized_word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def digest_table(self, algorithm: HashAlgorithm) -> dict[str, str]:
        """Return a ``hexdigest -> word`` map for *algorithm*, computed once."""

        table = self._digest_tables.get(algorithm)
        if table is not None:
            return table
        with self._digest_lock:
            table = self._digest_tables.get(algorithm)
            if table is None:
                table = {}
                for word in self._words:
                    table.setdefault(algorithm.hexdigest(word), word)
                self._digest_tables[algorithm] = table
                logger.debug("Computed %s digests for %d dictionary words", algorithm.name, len(table))
        return table


class LazyDictionaryIndex:
    """Build a :class:`DictionaryIndex` on first use, exactly once.

    Concurrent first callers block on a lock until the build finishes; every
    caller then shares the same immutable index. A failed build is not cached
    and is retried by the next caller.
    """

    def __init__(self, source: WordSource) -> None:
        self._source = source
        self._index: DictionaryIndex | None = None
        self._lock = threading.Lock()

    @classmethod
    def of(cls, index: DictionaryIndex) -> LazyDictionaryIndex:
        """Wrap an index that is already built."""

        lazy = cls(lambda: ())
        lazy._index = index
        return lazy

    @property
    def loaded(self) -> bool:
        return self._index is not None

    def get(self) -> DictionaryIndex:
        index = self._index
        if index is not None:
            return index
        with self._lock:
            if self._index is None:
                self._index = DictionaryIndex.from_text_blocks(self._source())
                logger.debug("Dictionary index built with %d words", len(self._index))
            return self._index
