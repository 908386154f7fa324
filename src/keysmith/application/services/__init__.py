"""Application services for KeySmith."""

from keysmith.application.services.password_service import (
    GenerationOutcome,
    PasswordService,
    get_password_service,
    load_word_list,
)

__all__ = [
    "GenerationOutcome",
    "PasswordService",
    "get_password_service",
    "load_word_list",
]
