"""Password generator service.

Generates random passwords by constrained rejection sampling and memorable
passwords from a word list.

Random passwords:
- One mandatory character from each enabled class
- Remaining positions drawn from the working alphabet
- Fisher-Yates shuffle
- Candidates with keyboard runs, repeated characters, weak patterns,
  missing classes or too little entropy are rejected and regenerated
"""

import math
from collections import Counter

from keysmith.core.exceptions import (
    EmptyWordListError,
    GenerationExhaustedError,
    InvalidConfigError,
)
from keysmith.core.logging import get_logger
from keysmith.domain.entities.generation_config import (
    MemorablePasswordConfig,
    RandomPasswordConfig,
)
from keysmith.domain.services.charset import (
    DEFAULT_ANTI_PATTERNS,
    DEFAULT_CATALOG,
    AntiPatternSet,
    CharacterCatalog,
)
from keysmith.domain.services.password_checks import (
    alphabet_entropy,
    check_complexity,
    has_keyboard_sequence,
    has_repeating_chars,
    matches_weak_pattern,
)
from keysmith.domain.services.secure_random import (
    RandomSource,
    SecureRandom,
    fisher_yates_shuffle,
    random_choice,
)
from keysmith.domain.services.word_list import DEFAULT_WORD_LIST, WordList

logger = get_logger(__name__)

DEFAULT_MAX_ATTEMPTS = 1000

# Entropy floors in bits; short passwords get the laxer floor
SHORT_PASSWORD_THRESHOLD = 12
SHORT_PASSWORD_MIN_ENTROPY = 25.0
LONG_PASSWORD_MIN_ENTROPY = 50.0


def minimum_entropy(length: int) -> float:
    """Return the entropy floor for a password of the given length."""
    if length < SHORT_PASSWORD_THRESHOLD:
        return SHORT_PASSWORD_MIN_ENTROPY
    return LONG_PASSWORD_MIN_ENTROPY


class PasswordGenerator:
    """Generates random and memorable passwords.

    All static data is injected at construction and never mutated, so one
    instance can serve concurrent callers.

    Example:
        >>> generator = PasswordGenerator()
        >>> len(generator.generate_random_password(RandomPasswordConfig(length=12)))
        12
    """

    def __init__(
        self,
        rng: RandomSource | None = None,
        catalog: CharacterCatalog = DEFAULT_CATALOG,
        anti_patterns: AntiPatternSet = DEFAULT_ANTI_PATTERNS,
        word_list: WordList = DEFAULT_WORD_LIST,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        """Initialize the generator.

        Args:
            rng: Random source; defaults to SecureRandom.
            catalog: Character classes.
            anti_patterns: Keyboard runs and weak patterns to reject.
            word_list: Words for memorable passwords.
            max_attempts: Rejection loop bound for random passwords.
        """
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        self.rng = rng or SecureRandom()
        self.catalog = catalog
        self.anti_patterns = anti_patterns
        self.word_list = word_list
        self.max_attempts = max_attempts

    def generate_random_password(self, config: RandomPasswordConfig) -> str:
        """Generate a random password satisfying the config.

        Args:
            config: Length and enabled character classes.

        Returns:
            A password of exactly config.length characters.

        Raises:
            GenerationExhaustedError: If no candidate passes the filter
                within max_attempts.
        """
        alphabet = self.catalog.working_alphabet(config.include_numbers, config.include_symbols)
        rejections: Counter[str] = Counter()

        for attempt in range(1, self.max_attempts + 1):
            candidate = self._build_candidate(config, alphabet)
            reason = self._rejection_reason(candidate, config, len(alphabet))
            if reason is None:
                logger.debug(
                    "Random password generated",
                    length=config.length,
                    attempts=attempt,
                    rejections=dict(rejections),
                )
                return candidate
            rejections[reason] += 1

        logger.warning(
            "Random password generation exhausted",
            length=config.length,
            include_numbers=config.include_numbers,
            include_symbols=config.include_symbols,
            attempts=self.max_attempts,
            rejections=dict(rejections),
        )
        raise GenerationExhaustedError(self.max_attempts)

    def _build_candidate(self, config: RandomPasswordConfig, alphabet: str) -> str:
        """Draw mandatory and filler characters, then shuffle them."""
        chars = [
            random_choice(self.rng, self.catalog.uppercase),
            random_choice(self.rng, self.catalog.lowercase),
        ]
        if config.include_numbers:
            chars.append(random_choice(self.rng, self.catalog.digits))
        if config.include_symbols:
            chars.append(random_choice(self.rng, self.catalog.symbols))

        for _ in range(config.length - len(chars)):
            chars.append(random_choice(self.rng, alphabet))

        fisher_yates_shuffle(self.rng, chars)
        return "".join(chars)

    def _rejection_reason(
        self, candidate: str, config: RandomPasswordConfig, alphabet_size: int
    ) -> str | None:
        """Return why a candidate is rejected, or None if it is acceptable."""
        if has_keyboard_sequence(candidate, self.anti_patterns.keyboard_sequences):
            return "keyboard_sequence"
        if has_repeating_chars(candidate):
            return "repeated_characters"
        if matches_weak_pattern(candidate, self.anti_patterns.weak_patterns):
            return "weak_pattern"
        if not check_complexity(
            candidate, config.include_numbers, config.include_symbols, self.catalog
        ):
            return "complexity"
        if alphabet_entropy(len(candidate), alphabet_size) < minimum_entropy(config.length):
            return "entropy"
        return None

    def generate_memorable_password(self, config: MemorablePasswordConfig) -> str:
        """Generate a password of distinct dictionary words.

        Args:
            config: Word count, separator and capitalization.

        Returns:
            The selected words joined by the separator.

        Raises:
            EmptyWordListError: If the word list is empty.
            InvalidConfigError: If more words are requested than the list holds.
        """
        total = len(self.word_list)
        if total == 0:
            raise EmptyWordListError()
        if config.word_count > total:
            raise InvalidConfigError(
                f"Word count {config.word_count} exceeds the {total} available words"
            )

        used: set[int] = set()
        words = []
        for _ in range(config.word_count):
            index = self.rng.uniform(0, total - 1)
            while index in used:
                index = self.rng.uniform(0, total - 1)
            used.add(index)

            word = self.word_list[index]
            if config.capitalize_first:
                word = word[:1].upper() + word[1:].lower()
            else:
                word = word.lower()
            words.append(word)

        logger.debug("Memorable password generated", word_count=config.word_count)
        return config.separator.join(words)

    def memorable_entropy(self, config: MemorablePasswordConfig) -> float:
        """Entropy in bits of a memorable password drawn from this word list.

        Counts ordered selections of distinct words: log2(n! / (n - k)!).
        """
        total = len(self.word_list)
        if total == 0 or config.word_count > total:
            return 0.0
        return math.log2(math.perm(total, config.word_count))
