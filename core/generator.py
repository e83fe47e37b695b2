"""Random password generation.

Each position is drawn independently and uniformly from the charset of the
enabled classes (draw with replacement). Degenerate input yields an empty
password instead of an error.
"""

import secrets
from dataclasses import dataclass, field
from typing import Optional, Protocol, Sequence

from core.charsets import ALL_CLASSES, CharClass, build_charset
from core.config import DEFAULT_PASSWORD_LENGTH


class RandomSource(Protocol):
    """Anything with a uniform ``choice``, e.g. ``random.Random``."""

    def choice(self, seq: Sequence[str]) -> str:
        ...


@dataclass(frozen=True)
class GenerationConfig:
    """Length and enabled classes for one generation."""
    length: int = DEFAULT_PASSWORD_LENGTH
    classes: frozenset[CharClass] = field(default_factory=lambda: ALL_CLASSES)

    def __post_init__(self):
        # Accept any iterable of classes but store a hashable frozenset
        if not isinstance(self.classes, frozenset):
            object.__setattr__(self, "classes", frozenset(self.classes))


_system_random = secrets.SystemRandom()


def generate(config: GenerationConfig, rng: Optional[RandomSource] = None) -> str:
    """Generate a password for the given configuration.

    Args:
        config: Requested length and enabled classes
        rng: Randomness source with a ``choice`` method. Defaults to
            ``secrets.SystemRandom``; pass a seeded ``random.Random`` for
            reproducible output.

    Returns:
        A string of exactly ``config.length`` characters, or "" when the
        length is not positive or no class is enabled
    """
    if config.length <= 0:
        return ""

    charset = build_charset(config.classes)
    if not charset:
        return ""

    source = rng if rng is not None else _system_random
    return "".join(source.choice(charset) for _ in range(config.length))
