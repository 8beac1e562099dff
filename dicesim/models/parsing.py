"""Console input parsing models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ParseResult(BaseModel):
    """Outcome of parsing one line of console input."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    ok: bool = Field(description="Whether parsing succeeded")
    value: Optional[int] = Field(default=None, description="Parsed value when ok")
    error: Optional[str] = Field(default=None, description="Reason for failure when not ok")

    @classmethod
    def success(cls, value: int) -> "ParseResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "ParseResult":
        return cls(ok=False, error=error)
