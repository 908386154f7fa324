"""Exceptions for password generation."""


class PasswordGenerationError(Exception):
    """Base class for all password generation errors."""

    code = "generation_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidConfigError(PasswordGenerationError):
    """Raised when a generation config is out of bounds.

    Always raised before any random draw is made.
    """

    code = "invalid_config"


class EmptyWordListError(PasswordGenerationError):
    """Raised when memorable generation has no words to draw from."""

    code = "empty_word_list"

    def __init__(self) -> None:
        super().__init__("Word list is empty; cannot generate a memorable password")


class GenerationExhaustedError(PasswordGenerationError):
    """Raised when the rejection loop exceeds its attempt bound."""

    code = "generation_exhausted"

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(
            f"No acceptable password found after {attempts} attempts. "
            "Relax the constraints or increase the length."
        )
