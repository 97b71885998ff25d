"""String metrics used by the structural and dictionary checks.

All helpers operate on code points, never on encoded bytes, so multi-byte
characters count as one character each.
"""
from __future__ import annotations


def unique_char_count(value: str) -> int:
    """Return the number of distinct characters, ignoring case."""

    return len(set(value.casefold()))


def systematic_run_count(value: str) -> int:
    """Count adjacent pairs whose code points differ by exactly one.

    ``"abcdef"`` and ``"654321"`` each score 5; ``"a1b2"`` scores 0.
    """

    count = 0
    for previous, current in zip(value, value[1:]):
        if abs(ord(current) - ord(previous)) == 1:
            count += 1
    return count


def reverse(value: str) -> str:
    return value[::-1]


def normalize(value: str) -> str:
    """Return the trimmed, case-folded form used for dictionary comparisons."""

    return value.strip().casefold()


def edit_distance(first: str, second: str, max_distance: int | None = None) -> int:
    """Levenshtein distance with unit insert/delete/substitute costs.

    When *max_distance* is given the computation stops as soon as the
    distance is known to exceed it and ``max_distance + 1`` is returned.
    """

    if max_distance is not None and abs(len(first) - len(second)) > max_distance:
        return max_distance + 1

    if len(first) < len(second):
        first, second = second, first
    if not second:
        return len(first)

    previous_row = list(range(len(second) + 1))
    for i, c1 in enumerate(first):
        current_row = [i + 1]
        row_min = current_row[0]
        for j, c2 in enumerate(second):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            cell = min(insertions, deletions, substitutions)
            current_row.append(cell)
            if cell < row_min:
                row_min = cell

        if max_distance is not None and row_min > max_distance:
            return max_distance + 1
        previous_row = current_row

    distance = previous_row[-1]
    if max_distance is not None and distance > max_distance:
        return max_distance + 1
    return distance
