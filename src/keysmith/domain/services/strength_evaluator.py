"""Password strength evaluator.

Scores any password on four independent dimensions and combines them with a
single versioned weight set:

- Character diversity: which classes are present and how evenly they are used
- Effective length: linear between 8 and 15 characters
- Pattern security: keyboard runs, dates, leet-speak, seasonal words and
  personal data
- Weakness match: common weak words and long digit runs

The diagnosis (risks, advantages) is computed separately from direct
predicate checks and never feeds back into the score.
"""

import math
import re
import string
import unicodedata
from dataclasses import dataclass

from keysmith.core.logging import get_logger
from keysmith.domain.entities.strength_result import (
    AdvantageLabel,
    EvaluationContext,
    RiskLabel,
    StrengthLevel,
    StrengthResult,
)
from keysmith.domain.services.charset import DEFAULT_ANTI_PATTERNS, AntiPatternSet
from keysmith.domain.services.password_checks import (
    alphabet_entropy,
    has_keyboard_sequence,
    has_repeating_chars,
    matches_weak_pattern,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class ScoringProfile:
    """Versioned weight set for the composite score.

    Attributes:
        version: Identifier of this weight set.
        diversity: Weight of the character diversity sub-score.
        length: Weight of the effective length sub-score.
        pattern: Weight of the pattern security sub-score.
        weakness: Weight of the weakness match sub-score.
    """

    version: str = "1.1"
    diversity: float = 0.30
    length: float = 0.35
    pattern: float = 0.25
    weakness: float = 0.10

    def __post_init__(self) -> None:
        """Validate that the weights form a convex combination."""
        weights = (self.diversity, self.length, self.pattern, self.weakness)
        if any(w < 0 for w in weights):
            raise ValueError("Scoring weights must not be negative")
        if not math.isclose(sum(weights), 1.0):
            raise ValueError(f"Scoring weights must sum to 1.0, got {sum(weights)}")


DEFAULT_SCORING_PROFILE = ScoringProfile()

# Upper bound of each tier, inclusive; anything above the last is VERY_STRONG
STRENGTH_THRESHOLDS: tuple[tuple[int, StrengthLevel], ...] = (
    (40, StrengthLevel.WEAK),
    (60, StrengthLevel.MEDIUM),
    (80, StrengthLevel.STRONG),
)

SYMBOL_CHARS = frozenset(string.punctuation)

# Alphabet size credited per character class present
LOWERCASE_POOL = 26
UPPERCASE_POOL = 26
DIGIT_POOL = 10
SYMBOL_POOL = 12
MIN_ALPHABET_SIZE = 26

MIN_LENGTH = 8
FULL_LENGTH = 15
DISTRIBUTION_SHARE = 0.15

PATTERN_PENALTY = 25
CONTEXT_PENALTY = 20

PATTERN_CATALOG: tuple[tuple[RiskLabel, re.Pattern[str]], ...] = (
    (RiskLabel.KEYBOARD_SEQUENCE, re.compile(r"qwerty|asdfgh|zxcvbn", re.IGNORECASE)),
    (
        RiskLabel.DATE_FORMAT,
        re.compile(r"(19|20)\d{2}[-/](0[1-9]|1[0-2])[-/](0[1-9]|[12][0-9]|3[01])"),
    ),
    (RiskLabel.LEET_SPEAK, re.compile(r"[4@3€0○]")),
    (RiskLabel.SEASONAL_WORD, re.compile(r"spring|summer|autumn|winter|春|夏|秋|冬", re.IGNORECASE)),
)

COMMON_WEAK_WORDS = re.compile(r"password|admin|user|login", re.IGNORECASE)
LONG_DIGIT_RUN = re.compile(r"\d{4,}")

HIGH_ENTROPY_BITS = 120

SUGGEST_ENTER_PASSWORD = "Enter a password"
SUGGEST_LENGTH = "Increase the password length to at least 12 characters"
SUGGEST_DIVERSITY = "Mix uppercase and lowercase letters, digits and symbols"
SUGGEST_KEYBOARD = "Replace keyboard sequences such as 'qwe' with unrelated characters"
SUGGEST_PERSONAL = "Avoid personal information such as your username or birth year"
SUGGEST_AVOID_PATTERNS = "Avoid keyboard sequences, repeated characters and common password patterns"

LENGTH_GOOD_ENOUGH = 70
DIVERSITY_GOOD_ENOUGH = 60


def strength_level(score: float) -> StrengthLevel:
    """Map a score to its tier.

    Bands are inclusive on their upper end: 40 is weak, 41 is medium.
    """
    for threshold, level in STRENGTH_THRESHOLDS:
        if score <= threshold:
            return level
    return StrengthLevel.VERY_STRONG


def _class_counts(password: str) -> dict[str, int]:
    return {
        "upper": sum(1 for c in password if "A" <= c <= "Z"),
        "lower": sum(1 for c in password if "a" <= c <= "z"),
        "digit": sum(1 for c in password if "0" <= c <= "9"),
        "symbol": sum(1 for c in password if c in SYMBOL_CHARS),
    }


def effective_alphabet_size(password: str) -> int:
    """Alphabet size implied by the character classes actually present.

    Floored at 26 so non-empty strings never get a degenerate estimate.
    """
    counts = _class_counts(password)
    size = 0
    if counts["lower"]:
        size += LOWERCASE_POOL
    if counts["upper"]:
        size += UPPERCASE_POOL
    if counts["digit"]:
        size += DIGIT_POOL
    if counts["symbol"]:
        size += SYMBOL_POOL
    return max(MIN_ALPHABET_SIZE, size)


def calculate_entropy(password: str) -> float:
    """Entropy in bits: log2(alphabet_size ** length); 0.0 for an empty string."""
    if not password:
        return 0.0
    return alphabet_entropy(len(password), effective_alphabet_size(password))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class StrengthEvaluator:
    """Scores passwords and explains the result.

    Example:
        >>> evaluator = StrengthEvaluator()
        >>> evaluator.evaluate_strength("").score
        0
    """

    def __init__(
        self,
        profile: ScoringProfile = DEFAULT_SCORING_PROFILE,
        anti_patterns: AntiPatternSet = DEFAULT_ANTI_PATTERNS,
    ) -> None:
        self.profile = profile
        self.anti_patterns = anti_patterns

    def evaluate_strength(
        self, password: str, context: EvaluationContext | None = None
    ) -> StrengthResult:
        """Evaluate a password.

        Args:
            password: Any string, including empty.
            context: Optional username and birth year to look for.

        Returns:
            A new StrengthResult.
        """
        if not password:
            return StrengthResult(
                score=0,
                level=StrengthLevel.WEAK,
                entropy=0.0,
                suggestions=(SUGGEST_ENTER_PASSWORD,),
            )

        context = context or EvaluationContext()

        diversity = self.character_diversity_score(password)
        length = self.effective_length_score(password)
        pattern, pattern_risks = self.pattern_security(password, context)
        weakness = self.weakness_match_score(password)

        composite = (
            diversity * self.profile.diversity
            + length * self.profile.length
            + pattern * self.profile.pattern
            + weakness * self.profile.weakness
        )
        score = _round_half_up(min(100.0, composite))
        entropy = calculate_entropy(password)

        risks = self.diagnose_risks(password) | pattern_risks
        advantages = self.diagnose_advantages(password, entropy)
        suggestions = self.build_suggestions(length, diversity, risks)

        logger.debug(
            "Password strength evaluated",
            length=len(password),
            score=score,
            profile_version=self.profile.version,
        )

        return StrengthResult(
            score=score,
            level=strength_level(score),
            entropy=entropy,
            risks=frozenset(risks),
            advantages=frozenset(advantages),
            suggestions=suggestions,
            diversity_score=diversity,
            length_score=length,
            pattern_score=pattern,
            weakness_score=weakness,
        )

    def character_diversity_score(self, password: str) -> float:
        """10 points per class present plus 15 per class with at least a 15% share."""
        counts = _class_counts(password)
        total = len(password)
        existence = 10 * sum(1 for count in counts.values() if count > 0)
        distribution = 15 * sum(
            1 for count in counts.values() if count / total >= DISTRIBUTION_SHARE
        )
        return float(min(100, existence + distribution))

    def effective_length_score(self, password: str) -> float:
        """0 at 8 characters or fewer, 100 at 15 or more, linear between."""
        length = len(password)
        if length >= FULL_LENGTH:
            return 100.0
        if length <= MIN_LENGTH:
            return 0.0
        return (length - MIN_LENGTH) / (FULL_LENGTH - MIN_LENGTH) * 100

    def pattern_security(
        self, password: str, context: EvaluationContext
    ) -> tuple[float, set[RiskLabel]]:
        """Penalize catalog patterns and personal data.

        Returns:
            The sub-score (floored at 0) and the matched risk labels.
        """
        score = 100
        risks: set[RiskLabel] = set()

        for label, pattern in PATTERN_CATALOG:
            if pattern.search(password):
                score -= PATTERN_PENALTY
                risks.add(label)

        if context.username and context.username.lower() in password.lower():
            score -= CONTEXT_PENALTY
            risks.add(RiskLabel.CONTAINS_USERNAME)
        if context.birth_year and str(context.birth_year) in password:
            score -= CONTEXT_PENALTY
            risks.add(RiskLabel.CONTAINS_BIRTH_YEAR)

        return float(max(0, score)), risks

    def weakness_match_score(self, password: str) -> float:
        """Penalize common weak words (40) and runs of four or more digits (20)."""
        score = 100
        if COMMON_WEAK_WORDS.search(password):
            score -= 40
        if LONG_DIGIT_RUN.search(password):
            score -= 20
        return float(max(0, score))

    def diagnose_risks(self, password: str) -> set[RiskLabel]:
        """Direct predicate checks for weaknesses."""
        risks: set[RiskLabel] = set()
        if len(password) < MIN_LENGTH:
            risks.add(RiskLabel.TOO_SHORT)
        if has_keyboard_sequence(password, self.anti_patterns.keyboard_sequences):
            risks.add(RiskLabel.KEYBOARD_SEQUENCE)
        if has_repeating_chars(password):
            risks.add(RiskLabel.REPEATED_CHARACTERS)
        if matches_weak_pattern(password, self.anti_patterns.weak_patterns):
            risks.add(RiskLabel.WEAK_PATTERN)
        return risks

    def diagnose_advantages(self, password: str, entropy: float) -> set[AdvantageLabel]:
        """Direct predicate checks for strengths."""
        counts = _class_counts(password)
        advantages: set[AdvantageLabel] = set()
        if len(password) >= 12:
            advantages.add(AdvantageLabel.SUFFICIENT_LENGTH)
        if len(password) >= 16:
            advantages.add(AdvantageLabel.EXTRA_LONG)
        if counts["upper"] and counts["lower"]:
            advantages.add(AdvantageLabel.MIXED_CASE)
        if counts["digit"]:
            advantages.add(AdvantageLabel.CONTAINS_DIGITS)
        if counts["symbol"]:
            advantages.add(AdvantageLabel.CONTAINS_SYMBOLS)
        if any(c.isalpha() and "LATIN" not in unicodedata.name(c, "") for c in password):
            advantages.add(AdvantageLabel.NON_LATIN_CHARACTERS)
        if entropy > HIGH_ENTROPY_BITS:
            advantages.add(AdvantageLabel.HIGH_ENTROPY)
        return advantages

    def build_suggestions(
        self, length_score: float, diversity_score: float, risks: set[RiskLabel]
    ) -> tuple[str, ...]:
        """Advisory messages, always in the same order."""
        suggestions = []
        if length_score < LENGTH_GOOD_ENOUGH:
            suggestions.append(SUGGEST_LENGTH)
        if diversity_score < DIVERSITY_GOOD_ENOUGH:
            suggestions.append(SUGGEST_DIVERSITY)
        if RiskLabel.KEYBOARD_SEQUENCE in risks:
            suggestions.append(SUGGEST_KEYBOARD)
        if risks & {RiskLabel.CONTAINS_USERNAME, RiskLabel.CONTAINS_BIRTH_YEAR}:
            suggestions.append(SUGGEST_PERSONAL)
        if risks:
            suggestions.append(SUGGEST_AVOID_PATTERNS)
        return tuple(suggestions)


default_strength_evaluator = StrengthEvaluator()


def evaluate_strength(password: str, context: EvaluationContext | None = None) -> StrengthResult:
    """Evaluate a password with the default evaluator."""
    return default_strength_evaluator.evaluate_strength(password, context)
