"""Data models for word validation."""

from typing import Optional, Literal
from pydantic import BaseModel


RejectionCode = Literal["ALREADY_USED", "NOT_POSSIBLE", "NOT_REAL", "TOO_SHORT"]


class ValidationError(BaseModel):
    """A single rejection, shown to the player as a (title, message) pair."""
    code: RejectionCode
    title: str
    message: str
    word: Optional[str] = None


class ValidationResult(BaseModel):
    """Result of validating one candidate word."""
    valid: bool
    word: str = ""
    error: Optional[ValidationError] = None
    skipped: bool = False  # empty input: no error, no state change
