"""Pydantic schemas for the password request/response contract.

Requests mirror the messages a UI posts to a background worker:
{"type": "generate" | "generate_memorable" | "evaluate", "options": {...}}.
Field names accept both snake_case and camelCase (e.g. includeNumbers).
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel


class _ContractModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class RandomOptions(_ContractModel):
    """Options for a random password; unset fields fall back to settings."""

    length: int | None = Field(None, description="Password length (8-26)")
    include_numbers: bool | None = Field(None, description="Include digits")
    include_symbols: bool | None = Field(None, description="Include symbols")


class MemorableOptions(_ContractModel):
    """Options for a memorable password; unset fields fall back to settings."""

    word_count: int | None = Field(None, description="Number of words (at least 1)")
    separator: str | None = Field(None, description="String placed between words")
    capitalize_first: bool | None = Field(None, description="Capitalize each word")


class EvaluateOptions(_ContractModel):
    """Personal data the password should not contain."""

    username: str | None = Field(None, description="Account username")
    birth_year: str | None = Field(None, description="Four-digit birth year")


class GenerateRequest(_ContractModel):
    """Request a random password."""

    type: Literal["generate"]
    options: RandomOptions = Field(default_factory=RandomOptions)


class GenerateMemorableRequest(_ContractModel):
    """Request a memorable password."""

    type: Literal["generate_memorable"]
    options: MemorableOptions = Field(default_factory=MemorableOptions)


class EvaluateRequest(_ContractModel):
    """Request a strength evaluation."""

    type: Literal["evaluate"]
    password: str = Field(..., description="Password to evaluate (may be empty)")
    options: EvaluateOptions = Field(default_factory=EvaluateOptions)


PasswordRequest = Annotated[
    Union[GenerateRequest, GenerateMemorableRequest, EvaluateRequest],
    Field(discriminator="type"),
]

password_request_adapter: TypeAdapter[PasswordRequest] = TypeAdapter(PasswordRequest)


class SubScoresResponse(BaseModel):
    """Individual sub-scores of an evaluation."""

    diversity: float
    length: float
    pattern: float
    weakness: float


class StrengthResponse(BaseModel):
    """Serialized StrengthResult."""

    score: int = Field(..., ge=0, le=100)
    level: str
    entropy: float
    risks: list[str]
    advantages: list[str]
    suggestions: list[str]
    sub_scores: SubScoresResponse


class SuccessResponse(BaseModel):
    """Successful generation or evaluation."""

    type: Literal["success"] = "success"
    password: str | None = Field(None, description="Generated password; absent for evaluations")
    strength: StrengthResponse


class ErrorResponse(BaseModel):
    """Failed request."""

    type: Literal["error"] = "error"
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
