"""Domain entities for KeySmith.

Entities are pure Python dataclasses that represent core concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from keysmith.domain.entities.generation_config import (
    GenerationMode,
    MemorablePasswordConfig,
    RandomPasswordConfig,
)
from keysmith.domain.entities.strength_result import (
    AdvantageLabel,
    EvaluationContext,
    RiskLabel,
    StrengthLevel,
    StrengthResult,
)

__all__ = [
    "AdvantageLabel",
    "EvaluationContext",
    "GenerationMode",
    "MemorablePasswordConfig",
    "RandomPasswordConfig",
    "RiskLabel",
    "StrengthLevel",
    "StrengthResult",
]
