"""Character catalog and anti-pattern set.

The character classes leave out glyphs that are easy to confuse when a
password is read aloud or retyped (I/l/1, O/o/0). The anti-pattern set lists
keyboard runs and weak-password patterns a generated password must avoid.
"""

import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class CharacterCatalog:
    """Four disjoint character classes used by the generator.

    Attributes:
        uppercase: Uppercase letters without I and O.
        lowercase: Lowercase letters without l and o.
        digits: Digits without 0 and 1.
        symbols: A small set of symbols that are easy to type.
    """

    uppercase: str = "ABCDEFGHJKLMNPQRSTUVWXYZ"
    lowercase: str = "abcdefghijkmnpqrstuvwxyz"
    digits: str = "23456789"
    symbols: str = "!@#$%^&*_+-=?"

    def __post_init__(self) -> None:
        """Validate that every class is non-empty and the classes are disjoint."""
        classes = self.classes()
        for name, chars in classes.items():
            if not chars:
                raise ValueError(f"Character class '{name}' must not be empty")
            if len(set(chars)) != len(chars):
                raise ValueError(f"Character class '{name}' contains duplicates")

        seen: set[str] = set()
        for name, chars in classes.items():
            overlap = seen & set(chars)
            if overlap:
                raise ValueError(
                    f"Character class '{name}' overlaps other classes: {''.join(sorted(overlap))}"
                )
            seen |= set(chars)

    def classes(self) -> dict[str, str]:
        """Return the classes keyed by name, in catalog order."""
        return {
            "uppercase": self.uppercase,
            "lowercase": self.lowercase,
            "digits": self.digits,
            "symbols": self.symbols,
        }

    @property
    def alphabet(self) -> str:
        """The union of all four classes."""
        return self.uppercase + self.lowercase + self.digits + self.symbols

    def working_alphabet(self, include_numbers: bool, include_symbols: bool) -> str:
        """Build the alphabet for a generation request.

        Args:
            include_numbers: Whether digits are enabled.
            include_symbols: Whether symbols are enabled.

        Returns:
            Uppercase and lowercase letters plus the enabled optional classes.
        """
        alphabet = self.uppercase + self.lowercase
        if include_numbers:
            alphabet += self.digits
        if include_symbols:
            alphabet += self.symbols
        return alphabet


KEYBOARD_SEQUENCES: tuple[str, ...] = (
    "qwe", "wer", "ert", "rty", "tyu", "yui", "uio", "iop",
    "asd", "sdf", "dfg", "fgh", "ghj", "hjk", "jkl",
    "zxc", "xcv", "cvb", "vbn", "bnm",
)

WEAK_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^123"),
    re.compile(r"^abc"),
    re.compile(r"password", re.IGNORECASE),
    re.compile(r"admin", re.IGNORECASE),
    re.compile(r"user", re.IGNORECASE),
    re.compile(r"login", re.IGNORECASE),
)


@dataclass(frozen=True)
class AntiPatternSet:
    """Substrings and patterns that mark a password as weak.

    Attributes:
        keyboard_sequences: Lowercase keyboard-adjacency runs, matched
            case-insensitively.
        weak_patterns: Compiled regular expressions for weak passwords.
    """

    keyboard_sequences: tuple[str, ...] = KEYBOARD_SEQUENCES
    weak_patterns: tuple[re.Pattern[str], ...] = field(default=WEAK_PATTERNS)


DEFAULT_CATALOG = CharacterCatalog()
DEFAULT_ANTI_PATTERNS = AntiPatternSet()
