"""Password tools endpoints.

Public endpoints for password generation and strength scoring.
"""

from fastapi import APIRouter, HTTPException

from api.models import (
    PasswordGenerateRequest,
    PasswordGenerateResponse,
    PasswordScoreRequest,
    StrengthResponse,
)
from cli.generator import generate_and_score
from core import DEFAULT_LOCALE, GenerationConfig, StorageError, describe_classes, log_event
from password_checker import MAX_SCORE, get_label_accent, get_strength_tier, score


router = APIRouter(tags=["Password Tools"])


def _strength_fields(value: int, locale: str) -> dict:
    tier = get_strength_tier(value, locale)
    return {
        "score": value,
        "max_score": MAX_SCORE,
        "label": tier.label,
        "color": tier.color,
        "accent": get_label_accent(value),
    }


@router.post("/generate", response_model=PasswordGenerateResponse)
async def generate_new_password(request: PasswordGenerateRequest):
    """Generate a random password and score it."""
    config = GenerationConfig(length=request.length, classes=request.to_classes())

    try:
        password, value = generate_and_score(config)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=f"Event log unavailable: {e}")

    return PasswordGenerateResponse(
        password=password,
        length=config.length,
        classes=describe_classes(config.classes),
        **_strength_fields(value, request.locale or DEFAULT_LOCALE),
    )


@router.post("/score", response_model=StrengthResponse)
async def score_password(request: PasswordScoreRequest):
    """Score a password against its configured length and classes."""
    length = request.length if request.length is not None else len(request.password)
    value = score(request.password, length, request.to_classes())

    try:
        log_event("password_scored", "SUCCESS", details={"length": length, "score": value})
    except StorageError as e:
        raise HTTPException(status_code=500, detail=f"Event log unavailable: {e}")

    return StrengthResponse(**_strength_fields(value, request.locale or DEFAULT_LOCALE))
