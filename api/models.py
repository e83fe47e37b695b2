"""Pydantic models for API request/response validation.

Defines data structures for all API endpoints.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from core import (
    CharClass,
    DEFAULT_PASSWORD_LENGTH,
    MAX_PASSWORD_LENGTH,
    MIN_PASSWORD_LENGTH,
    parse_classes,
)

Locale = Literal["en", "ru"]


class ClassFlags(BaseModel):
    """The four character class toggles shared by generate and score."""
    use_upper: bool = Field(default=True, description="Include uppercase letters")
    use_lower: bool = Field(default=True, description="Include lowercase letters")
    use_digits: bool = Field(default=True, description="Include digits")
    use_special: bool = Field(default=True, description="Include symbols")

    def to_classes(self) -> frozenset[CharClass]:
        """Convert the toggles into a class set."""
        return parse_classes(
            uppercase=self.use_upper,
            lowercase=self.use_lower,
            digits=self.use_digits,
            symbols=self.use_special,
        )


class PasswordGenerateRequest(ClassFlags):
    """Request model for password generation."""
    length: int = Field(
        default=DEFAULT_PASSWORD_LENGTH,
        ge=MIN_PASSWORD_LENGTH,
        le=MAX_PASSWORD_LENGTH,
        description="Password length",
    )
    locale: Optional[Locale] = Field(default=None, description="Strength label language")


class PasswordScoreRequest(ClassFlags):
    """Request model for scoring a password.

    ``length`` defaults to the length of the password itself.
    """
    password: str = Field(default="", description="Password to score (may be empty)")
    length: Optional[int] = Field(default=None, ge=0, description="Configured length")
    locale: Optional[Locale] = Field(default=None, description="Strength label language")


class StrengthResponse(BaseModel):
    """Score plus its presentation tier."""
    score: int
    max_score: int
    label: str
    color: str
    accent: str


class PasswordGenerateResponse(StrengthResponse):
    """Response model for generated password."""
    password: str
    length: int
    classes: list[str]


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    version: str
