"""Predicates shared by the generator's rejection filter and the diagnosis layer."""

import math
import re
from typing import Iterable

from keysmith.domain.services.charset import DEFAULT_CATALOG, CharacterCatalog

REPEATED_CHARS_PATTERN = re.compile(r"(.)\1{2,}", re.DOTALL)


def has_keyboard_sequence(password: str, sequences: Iterable[str]) -> bool:
    """Check whether the password contains a keyboard run, ignoring case."""
    lowered = password.lower()
    return any(seq in lowered for seq in sequences)


def has_repeating_chars(password: str) -> bool:
    """Check for three or more identical consecutive characters."""
    return REPEATED_CHARS_PATTERN.search(password) is not None


def matches_weak_pattern(password: str, patterns: Iterable[re.Pattern[str]]) -> bool:
    """Check whether any weak-password pattern matches."""
    return any(pattern.search(password) for pattern in patterns)


def check_complexity(
    password: str,
    include_numbers: bool = True,
    include_symbols: bool = True,
    catalog: CharacterCatalog = DEFAULT_CATALOG,
) -> bool:
    """Check that every required character class is represented.

    Uppercase and lowercase are always required; digits and symbols only
    when enabled.

    Args:
        password: Candidate password.
        include_numbers: Require at least one digit.
        include_symbols: Require at least one symbol.
        catalog: Catalog defining the classes.

    Returns:
        True if the password contains all required classes.
    """
    chars = set(password)
    if not chars & set(catalog.uppercase) or not chars & set(catalog.lowercase):
        return False
    if include_numbers and not chars & set(catalog.digits):
        return False
    if include_symbols and not chars & set(catalog.symbols):
        return False
    return True


def alphabet_entropy(length: int, alphabet_size: int) -> float:
    """Entropy in bits of a uniformly random string over an alphabet.

    Computes log2(alphabet_size ** length) without building the power.
    """
    if length <= 0 or alphabet_size <= 1:
        return 0.0
    return length * math.log2(alphabet_size)
