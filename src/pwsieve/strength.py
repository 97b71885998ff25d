"""Password strength scoring."""
from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Literal

from pwsieve.errors import WeakPasswordError
from pwsieve.metrics import unique_char_count

StrengthLevel = Literal["weak", "fair", "good", "strong"]


@dataclass(frozen=True)
class PasswordStrength:
    score: int  # 0-100
    level: StrengthLevel
    entropy_bits: float
    feedback: list[str] = field(default_factory=list)
    # Set when the password was rejected; the score is then 0.
    error: WeakPasswordError | None = None

    @property
    def accepted(self) -> bool:
        return self.error is None


def character_classes(password: str) -> int:
    """Number of classes present among lowercase, uppercase, digits and symbols."""

    return sum(
        [
            bool(re.search(r"[a-z]", password)),
            bool(re.search(r"[A-Z]", password)),
            bool(re.search(r"[0-9]", password)),
            bool(re.search(r"[^a-zA-Z0-9]", password)),
        ]
    )


def estimate_entropy(password: str) -> float:
    """Estimate password entropy in bits based on character-set size."""
    if not password:
        return 0.0

    charset_size = 0
    if re.search(r"[a-z]", password):
        charset_size += 26
    if re.search(r"[A-Z]", password):
        charset_size += 26
    if re.search(r"[0-9]", password):
        charset_size += 10
    if re.search(r"[^a-zA-Z0-9]", password):
        charset_size += 32

    return len(password) * math.log2(charset_size)


def score_password(password: str) -> int:
    """Score a password that already passed validation, 0-100.

    Non-decreasing in length and in the number of character classes. A
    password of 32 or more characters with at least two classes earns extra
    diversity credit, so long hex digests can saturate; single-class
    passwords never reach 100.
    """
    length = len(password)
    classes = character_classes(password)
    # Long multi-class strings (hex digests) count as two extra classes.
    long_bonus = 10 if classes >= 2 and length >= 32 else 0

    score = 0
    score += min(30, int(length * 1.5))                 # full at 20 chars
    score += min(20, classes * 5 + long_bonus)          # 4 classes, or 2 at 32 chars
    score += min(20, unique_char_count(password) * 2)   # 10 distinct chars
    score += min(30, int(estimate_entropy(password) / 4))
    return min(100, max(0, score))


def strength_level(score: int) -> StrengthLevel:
    if score < 30:
        return "weak"
    if score < 55:
        return "fair"
    if score < 80:
        return "good"
    return "strong"


def _feedback(password: str) -> list[str]:
    feedback: list[str] = []
    if len(password) < 12:
        feedback.append("Use at least 12 characters")
    if character_classes(password) < 4:
        feedback.append("Use a mix of uppercase, lowercase, digits, and symbols")
    if unique_char_count(password) < 10:
        feedback.append("Use more distinct characters")
    return feedback


def evaluate_password(password: str) -> PasswordStrength:
    """Score a password without running the weakness checks."""

    score = score_password(password)
    return PasswordStrength(
        score=score,
        level=strength_level(score),
        entropy_bits=estimate_entropy(password),
        feedback=_feedback(password),
    )


def rejected(password: str, error: WeakPasswordError) -> PasswordStrength:
    return PasswordStrength(
        score=0,
        level="weak",
        entropy_bits=estimate_entropy(password),
        feedback=[str(error)],
        error=error,
    )
