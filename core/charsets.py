"""Character classes and charset construction.

The four alphabets are fixed and disjoint. A charset is never stored; it is
rebuilt from the enabled classes in a fixed order so that the same selection
always yields the same draw pool.
"""

import string
from enum import Enum
from typing import Iterable


class CharClass(str, Enum):
    """Character class that can be enabled for generation and scoring."""
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    DIGIT = "digit"
    SYMBOL = "symbol"


LOWERCASE_ALPHABET = string.ascii_lowercase
UPPERCASE_ALPHABET = string.ascii_uppercase
DIGIT_ALPHABET = string.digits
SYMBOL_ALPHABET = "!@#$%^&*()_+~`|}{[]:;?><,./-="

ALPHABETS = {
    CharClass.LOWERCASE: LOWERCASE_ALPHABET,
    CharClass.UPPERCASE: UPPERCASE_ALPHABET,
    CharClass.DIGIT: DIGIT_ALPHABET,
    CharClass.SYMBOL: SYMBOL_ALPHABET,
}

# Concatenation order used by build_charset
CLASS_ORDER = (
    CharClass.LOWERCASE,
    CharClass.UPPERCASE,
    CharClass.DIGIT,
    CharClass.SYMBOL,
)

ALL_CLASSES = frozenset(CLASS_ORDER)


def build_charset(classes: Iterable[CharClass]) -> str:
    """Build the draw pool for a set of enabled classes.

    Args:
        classes: Enabled character classes (any iterable, duplicates ignored)

    Returns:
        Concatenated alphabets in CLASS_ORDER, or "" when nothing is enabled
    """
    enabled = set(classes)
    return "".join(ALPHABETS[cls] for cls in CLASS_ORDER if cls in enabled)


def parse_classes(
    uppercase: bool = True,
    lowercase: bool = True,
    digits: bool = True,
    symbols: bool = True,
) -> frozenset[CharClass]:
    """Convert the four host toggles into a class set."""
    flags = {
        CharClass.UPPERCASE: uppercase,
        CharClass.LOWERCASE: lowercase,
        CharClass.DIGIT: digits,
        CharClass.SYMBOL: symbols,
    }
    return frozenset(cls for cls, enabled in flags.items() if enabled)


def describe_classes(classes: Iterable[CharClass]) -> list[str]:
    """Return enabled class names in CLASS_ORDER, for logs and responses."""
    enabled = set(classes)
    return [cls.value for cls in CLASS_ORDER if cls in enabled]
