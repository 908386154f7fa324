"""Password service - single entry point for generation and evaluation.

Outer layers (CLI, UI bridges) call this service instead of the domain
services directly. It:
- Dispatches generation by mode and evaluates every generated password
- Emits password events to registered callbacks
- Offers awaitable variants that run the work in a thread
- Answers dict-based request messages without raising
"""

import asyncio
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from pydantic import ValidationError

from keysmith.application.schemas.password_schemas import (
    ErrorResponse,
    EvaluateRequest,
    GenerateMemorableRequest,
    GenerateRequest,
    SuccessResponse,
    password_request_adapter,
)
from keysmith.core.config import Settings, get_settings
from keysmith.core.events import PasswordEvent, PasswordEventRegistry
from keysmith.core.exceptions import InvalidConfigError, PasswordGenerationError
from keysmith.core.logging import get_logger, request_context
from keysmith.domain.entities.generation_config import (
    GenerationMode,
    MemorablePasswordConfig,
    RandomPasswordConfig,
)
from keysmith.domain.entities.strength_result import EvaluationContext, StrengthResult
from keysmith.domain.services.password_generator import PasswordGenerator
from keysmith.domain.services.strength_evaluator import StrengthEvaluator
from keysmith.domain.services.word_list import DEFAULT_WORD_LIST, WordList

logger = get_logger(__name__)

GenerationConfig = RandomPasswordConfig | MemorablePasswordConfig


@dataclass(frozen=True)
class GenerationOutcome:
    """A generated password together with its evaluation.

    Attributes:
        mode: The mode that produced the password.
        password: The generated password.
        strength: Evaluation of the password.
    """

    mode: GenerationMode
    password: str
    strength: StrengthResult


class PasswordService:
    """Facade over the generator and the evaluator.

    Example:
        service = PasswordService()
        outcome = service.generate("random", RandomPasswordConfig(length=16))
        print(outcome.password, outcome.strength.level)
    """

    def __init__(
        self,
        generator: PasswordGenerator | None = None,
        evaluator: StrengthEvaluator | None = None,
        events: PasswordEventRegistry | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            generator: Password generator; defaults to one with a secure source.
            evaluator: Strength evaluator; defaults to the canonical profile.
            events: Event registry; a private one is created if omitted.
            settings: Settings supplying request defaults.
        """
        self.settings = settings or get_settings()
        self.generator = generator or PasswordGenerator(
            max_attempts=self.settings.max_generation_attempts
        )
        self.evaluator = evaluator or StrengthEvaluator()
        self.events = events or PasswordEventRegistry()

    def generate(self, mode: GenerationMode | str, config: GenerationConfig) -> GenerationOutcome:
        """Generate a password and evaluate it.

        Args:
            mode: "random" or "memorable".
            config: RandomPasswordConfig for random mode,
                MemorablePasswordConfig for memorable mode.

        Returns:
            GenerationOutcome with the password and its strength.

        Raises:
            InvalidConfigError: If the mode is unknown or does not match the config.
            EmptyWordListError: If memorable mode has no words.
            GenerationExhaustedError: If the rejection loop runs out of attempts.
        """
        mode_name = getattr(mode, "value", mode)
        with request_context(operation="generate", mode=str(mode_name)):
            try:
                generation_mode = self._resolve_mode(mode, config)
                if generation_mode is GenerationMode.RANDOM:
                    password = self.generator.generate_random_password(config)
                else:
                    password = self.generator.generate_memorable_password(config)
            except PasswordGenerationError as e:
                logger.warning("Password generation failed", code=e.code, error=e.message)
                self.events.trigger(
                    PasswordEvent.ON_PASSWORD_ERROR,
                    {"mode": mode_name, "code": e.code, "message": e.message},
                )
                raise

            strength = self.evaluator.evaluate_strength(password)
            self.events.trigger(
                PasswordEvent.ON_PASSWORD_GENERATED,
                {"mode": generation_mode.value, "password": password, "strength": strength},
            )
            return GenerationOutcome(mode=generation_mode, password=password, strength=strength)

    def evaluate(self, password: str, context: EvaluationContext | None = None) -> StrengthResult:
        """Evaluate a password and emit ON_STRENGTH_EVALUATED."""
        with request_context(operation="evaluate"):
            result = self.evaluator.evaluate_strength(password, context)
            self.events.trigger(PasswordEvent.ON_STRENGTH_EVALUATED, {"strength": result})
            return result

    async def generate_async(
        self, mode: GenerationMode | str, config: GenerationConfig
    ) -> GenerationOutcome:
        """Run generate() in a worker thread."""
        return await asyncio.to_thread(self.generate, mode, config)

    async def evaluate_async(
        self, password: str, context: EvaluationContext | None = None
    ) -> StrengthResult:
        """Run evaluate() in a worker thread."""
        return await asyncio.to_thread(self.evaluate, password, context)

    def default_random_config(self, **overrides: Any) -> RandomPasswordConfig:
        """Build a random config from settings, with non-None overrides applied."""
        values: dict[str, Any] = {
            "length": self.settings.default_length,
            "include_numbers": self.settings.include_numbers,
            "include_symbols": self.settings.include_symbols,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return RandomPasswordConfig(**values)

    def default_memorable_config(self, **overrides: Any) -> MemorablePasswordConfig:
        """Build a memorable config from settings, with non-None overrides applied."""
        values: dict[str, Any] = {
            "word_count": self.settings.default_word_count,
            "separator": self.settings.default_separator,
            "capitalize_first": self.settings.capitalize_first,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return MemorablePasswordConfig(**values)

    def handle_request(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Answer a request message.

        Args:
            payload: {"type": ..., "options": {...}} (and "password" for evaluate).

        Returns:
            A SuccessResponse or ErrorResponse dumped to a dict. Validation
            and generation errors are reported, never raised.
        """
        with request_context(operation="handle_request"):
            return self._answer(payload)

    def _answer(self, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            request = password_request_adapter.validate_python(payload)
        except ValidationError as e:
            logger.info("Rejected malformed password request", errors=e.error_count())
            return ErrorResponse(code="validation_error", message=_first_error(e)).model_dump()

        try:
            if isinstance(request, GenerateRequest):
                config = self.default_random_config(**request.options.model_dump())
                outcome = self.generate(GenerationMode.RANDOM, config)
                password, strength = outcome.password, outcome.strength
            elif isinstance(request, GenerateMemorableRequest):
                config = self.default_memorable_config(**request.options.model_dump())
                outcome = self.generate(GenerationMode.MEMORABLE, config)
                password, strength = outcome.password, outcome.strength
            elif isinstance(request, EvaluateRequest):
                context = EvaluationContext(
                    username=request.options.username,
                    birth_year=request.options.birth_year,
                )
                password, strength = None, self.evaluate(request.password, context)
        except PasswordGenerationError as e:
            return ErrorResponse(code=e.code, message=e.message).model_dump()

        return SuccessResponse.model_validate(
            {"password": password, "strength": strength.to_dict()}
        ).model_dump()

    @staticmethod
    def _resolve_mode(mode: GenerationMode | str, config: GenerationConfig) -> GenerationMode:
        try:
            generation_mode = GenerationMode(mode)
        except ValueError:
            raise InvalidConfigError(f"Unknown generation mode: {mode}") from None

        expected = (
            RandomPasswordConfig
            if generation_mode is GenerationMode.RANDOM
            else MemorablePasswordConfig
        )
        if not isinstance(config, expected):
            raise InvalidConfigError(
                f"Mode '{generation_mode.value}' requires {expected.__name__}, "
                f"got {type(config).__name__}"
            )
        return generation_mode


def _first_error(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"{location}: {first['msg']}" if location else first["msg"]


def load_word_list(settings: Settings) -> WordList:
    """Return the configured word list, or the built-in one.

    Raises:
        InvalidConfigError: If the configured file cannot be read.
    """
    if settings.word_list_path:
        try:
            return WordList.from_file(settings.word_list_path)
        except (OSError, UnicodeDecodeError) as e:
            raise InvalidConfigError(
                f"Cannot read word list {settings.word_list_path}: {e}"
            ) from e
    return DEFAULT_WORD_LIST


@lru_cache
def get_password_service() -> PasswordService:
    """Get the cached service built from settings."""
    settings = get_settings()
    generator = PasswordGenerator(
        word_list=load_word_list(settings),
        max_attempts=settings.max_generation_attempts,
    )
    return PasswordService(generator=generator, settings=settings)
