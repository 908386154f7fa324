"""Domain services for KeySmith.

Services contain the generation and scoring logic.
They have no dependencies on infrastructure or external frameworks.
"""

from keysmith.domain.services.charset import (
    DEFAULT_ANTI_PATTERNS,
    DEFAULT_CATALOG,
    AntiPatternSet,
    CharacterCatalog,
)
from keysmith.domain.services.password_generator import PasswordGenerator
from keysmith.domain.services.secure_random import SecureRandom
from keysmith.domain.services.strength_evaluator import (
    DEFAULT_SCORING_PROFILE,
    ScoringProfile,
    StrengthEvaluator,
    calculate_entropy,
    evaluate_strength,
    strength_level,
)
from keysmith.domain.services.word_list import DEFAULT_WORD_LIST, WordList

__all__ = [
    "AntiPatternSet",
    "CharacterCatalog",
    "DEFAULT_ANTI_PATTERNS",
    "DEFAULT_CATALOG",
    "DEFAULT_SCORING_PROFILE",
    "DEFAULT_WORD_LIST",
    "PasswordGenerator",
    "ScoringProfile",
    "SecureRandom",
    "StrengthEvaluator",
    "WordList",
    "calculate_entropy",
    "evaluate_strength",
    "strength_level",
]
