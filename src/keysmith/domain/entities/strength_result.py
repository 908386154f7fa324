"""Strength evaluation result entity.

A StrengthResult is produced fresh for every evaluation and never mutated.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class StrengthLevel(str, Enum):
    """Human-facing strength tiers, weakest first."""

    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    VERY_STRONG = "very-strong"


class RiskLabel(str, Enum):
    """Weaknesses found in a password."""

    TOO_SHORT = "too_short"
    KEYBOARD_SEQUENCE = "keyboard_sequence"
    REPEATED_CHARACTERS = "repeated_characters"
    WEAK_PATTERN = "weak_pattern"
    DATE_FORMAT = "date_format"
    LEET_SPEAK = "leet_speak"
    SEASONAL_WORD = "seasonal_word"
    CONTAINS_USERNAME = "contains_username"
    CONTAINS_BIRTH_YEAR = "contains_birth_year"


class AdvantageLabel(str, Enum):
    """Strengths found in a password."""

    SUFFICIENT_LENGTH = "sufficient_length"
    EXTRA_LONG = "extra_long"
    MIXED_CASE = "mixed_case"
    CONTAINS_DIGITS = "contains_digits"
    CONTAINS_SYMBOLS = "contains_symbols"
    NON_LATIN_CHARACTERS = "non_latin_characters"
    HIGH_ENTROPY = "high_entropy"


@dataclass(frozen=True)
class EvaluationContext:
    """Personal data a password should not contain.

    Attributes:
        username: The account's username, matched case-insensitively.
        birth_year: Four-digit birth year, matched literally.
    """

    username: str | None = None
    birth_year: str | None = None


@dataclass(frozen=True)
class StrengthResult:
    """Outcome of a strength evaluation.

    Attributes:
        score: Composite score in [0, 100].
        level: Tier derived from the score.
        entropy: Estimated entropy in bits.
        risks: Weaknesses found (diagnosis only, not a scoring input).
        advantages: Strengths found (diagnosis only, not a scoring input).
        suggestions: Ordered advisory messages.
        diversity_score: Character diversity sub-score.
        length_score: Effective length sub-score.
        pattern_score: Pattern security sub-score.
        weakness_score: Weakness match sub-score.
    """

    score: int
    level: StrengthLevel
    entropy: float
    risks: frozenset[RiskLabel] = field(default_factory=frozenset)
    advantages: frozenset[AdvantageLabel] = field(default_factory=frozenset)
    suggestions: tuple[str, ...] = ()
    diversity_score: float = 0.0
    length_score: float = 0.0
    pattern_score: float = 0.0
    weakness_score: float = 0.0

    def __post_init__(self) -> None:
        """Validate score and entropy ranges."""
        if not 0 <= self.score <= 100:
            raise ValueError(f"Score must be between 0 and 100, got {self.score}")
        if self.entropy < 0:
            raise ValueError("Entropy cannot be negative")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to plain JSON-compatible types.

        Risks and advantages are sorted by their enum declaration order.
        """
        return {
            "score": self.score,
            "level": self.level.value,
            "entropy": round(self.entropy, 2),
            "risks": [label.value for label in RiskLabel if label in self.risks],
            "advantages": [label.value for label in AdvantageLabel if label in self.advantages],
            "suggestions": list(self.suggestions),
            "sub_scores": {
                "diversity": round(self.diversity_score, 2),
                "length": round(self.length_score, 2),
                "pattern": round(self.pattern_score, 2),
                "weakness": round(self.weakness_score, 2),
            },
        }
