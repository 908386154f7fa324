"""Schemas for request/response validation."""

from keysmith.application.schemas.password_schemas import (
    ErrorResponse,
    EvaluateOptions,
    EvaluateRequest,
    GenerateMemorableRequest,
    GenerateRequest,
    MemorableOptions,
    PasswordRequest,
    RandomOptions,
    StrengthResponse,
    SubScoresResponse,
    SuccessResponse,
    password_request_adapter,
)

__all__ = [
    "ErrorResponse",
    "EvaluateOptions",
    "EvaluateRequest",
    "GenerateMemorableRequest",
    "GenerateRequest",
    "MemorableOptions",
    "PasswordRequest",
    "RandomOptions",
    "StrengthResponse",
    "SubScoresResponse",
    "SuccessResponse",
    "password_request_adapter",
]
