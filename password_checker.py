"""Password strength scoring.

Scores a password on a 0-5 scale from its length and the character classes
it actually contains, and maps the score onto six fixed strength tiers.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional

from core.charsets import ALL_CLASSES, CharClass
from core.config import DEFAULT_LOCALE

MAX_SCORE = 5

# Each threshold crossed adds one point
LENGTH_THRESHOLDS = (8, 12, 16)

_CLASS_PATTERNS = {
    CharClass.UPPERCASE: re.compile(r"[A-Z]"),
    CharClass.LOWERCASE: re.compile(r"[a-z]"),
    CharClass.DIGIT: re.compile(r"[0-9]"),
    # Anything that is not a letter or digit counts as a symbol
    CharClass.SYMBOL: re.compile(r"[^A-Za-z0-9]"),
}

TIER_LABELS = {
    "en": ("Very weak", "Weak", "Fair", "Good", "Strong", "Very strong"),
    "ru": ("Очень слабый", "Слабый", "Средний", "Хороший", "Сильный", "Очень сильный"),
}

# Bar colors, red through green
TIER_COLORS = ("#EF4444", "#F87171", "#EAB308", "#FACC15", "#4ADE80", "#22C55E")


@dataclass(frozen=True)
class StrengthTier:
    """Presentation tier for a score."""
    score: int
    label: str
    color: str


def score(password: str, length: int, classes: Iterable[CharClass]) -> int:
    """Score a password from 0 (empty) to MAX_SCORE.

    Length bonuses are cumulative: one point each for length above 8, 12
    and 16. Each enabled class adds a point only if the password really
    contains a character of that class, so text that did not come from the
    generator is scored correctly too.

    Args:
        password: Password to score
        length: Configured length the password was generated with
        classes: Character classes that were enabled

    Returns:
        Integer score in [0, MAX_SCORE]
    """
    if not password:
        return 0

    enabled = set(classes)
    total = sum(1 for threshold in LENGTH_THRESHOLDS if length > threshold)

    for cls, pattern in _CLASS_PATTERNS.items():
        if cls in enabled and pattern.search(password):
            total += 1

    return min(total, MAX_SCORE)


def get_strength_tier(value: int, locale: str = DEFAULT_LOCALE) -> StrengthTier:
    """Look up the label and bar color for a score.

    Unknown locales fall back to English; scores are clamped into range.
    """
    value = max(0, min(value, MAX_SCORE))
    labels = TIER_LABELS.get(locale, TIER_LABELS["en"])
    return StrengthTier(score=value, label=labels[value], color=TIER_COLORS[value])


def get_label_accent(value: int) -> str:
    """Text color for the tier label: red, amber or green."""
    if value > 3:
        return "#10B981"
    if value > 1:
        return "#F59E0B"
    return "#EF4444"


def format_strength_bar(value: int, width: int = 20) -> str:
    """Render a score as a text meter, e.g. ``[########------------] 2/5``."""
    value = max(0, min(value, MAX_SCORE))
    filled = round(width * value / MAX_SCORE)
    return f"[{'#' * filled}{'-' * (width - filled)}] {value}/{MAX_SCORE}"


def check_password_strength(
    password: str,
    classes: Optional[Iterable[CharClass]] = None,
    locale: str = DEFAULT_LOCALE,
) -> tuple[int, StrengthTier]:
    """Score free-form text, such as a pasted password.

    Uses the password's own length and, unless told otherwise, treats all
    four classes as enabled.

    Returns:
        Tuple of (score, tier)
    """
    enabled = ALL_CLASSES if classes is None else classes
    value = score(password, len(password), enabled)
    return value, get_strength_tier(value, locale)
