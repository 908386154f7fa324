"""Generation configs for random and memorable passwords.

Both configs validate themselves on construction, so an out-of-bounds
request is rejected before the generator draws a single random number.
"""

from dataclasses import dataclass
from enum import Enum

from keysmith.core.config import MAX_PASSWORD_LENGTH, MIN_PASSWORD_LENGTH
from keysmith.core.exceptions import InvalidConfigError


class GenerationMode(str, Enum):
    """Password generation modes."""

    RANDOM = "random"
    MEMORABLE = "memorable"


@dataclass(frozen=True)
class RandomPasswordConfig:
    """Options for a random password.

    Attributes:
        length: Password length, between 8 and 26 inclusive.
        include_numbers: Require and allow digits.
        include_symbols: Require and allow symbols.
    """

    length: int = 16
    include_numbers: bool = True
    include_symbols: bool = True

    def __post_init__(self) -> None:
        """Validate the length bounds."""
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise InvalidConfigError(f"Password length must be an integer, got {self.length!r}")
        if not MIN_PASSWORD_LENGTH <= self.length <= MAX_PASSWORD_LENGTH:
            raise InvalidConfigError(
                f"Password length must be between {MIN_PASSWORD_LENGTH} and "
                f"{MAX_PASSWORD_LENGTH}, got {self.length}"
            )

    @property
    def mandatory_count(self) -> int:
        """Number of characters reserved for class coverage."""
        return 2 + int(self.include_numbers) + int(self.include_symbols)


@dataclass(frozen=True)
class MemorablePasswordConfig:
    """Options for a memorable (word-based) password.

    Attributes:
        word_count: Number of distinct words, at least 1.
        separator: String placed between words.
        capitalize_first: Capitalize each word's first letter; otherwise all lowercase.
    """

    word_count: int = 3
    separator: str = "-"
    capitalize_first: bool = True

    def __post_init__(self) -> None:
        """Validate the word count."""
        if isinstance(self.word_count, bool) or not isinstance(self.word_count, int):
            raise InvalidConfigError(f"Word count must be an integer, got {self.word_count!r}")
        if self.word_count < 1:
            raise InvalidConfigError(f"Word count must be at least 1, got {self.word_count}")
