"""Password generation CLI flows.

Handles password generation, preview, regeneration and clipboard copy.
Passwords are masked by default to keep them out of terminal scrollback.
"""

import logging
from typing import Optional

import pyperclip

from core import (
    DEFAULT_LOCALE,
    GenerationConfig,
    StorageError,
    describe_classes,
    generate,
    log_event,
)
from core.generator import RandomSource
from password_checker import format_strength_bar, get_strength_tier, score

from cli.prompts import prompt_for_password_length, prompt_for_character_classes


logger = logging.getLogger("passgen")


def _try_copy_to_clipboard(text: str) -> bool:
    """Attempt to copy text to clipboard.

    Args:
        text: Text to copy to clipboard

    Returns:
        True if successfully copied, False otherwise
    """
    try:
        pyperclip.copy(text)
        return True
    except pyperclip.PyperclipException as e:
        logger.warning(f"Clipboard unavailable: {e}")
        return False


def _mask_password(password: str, show_chars: int = 4) -> str:
    """Create a masked version of password showing only first/last chars.

    Args:
        password: Password to mask
        show_chars: Number of characters to show at start and end

    Returns:
        Masked password string like "Ab12****xy9!"
    """
    if len(password) <= show_chars * 2:
        return "*" * len(password)

    return password[:show_chars] + "*" * (len(password) - show_chars * 2) + password[-show_chars:]


def generate_and_score(
    config: GenerationConfig,
    rng: Optional[RandomSource] = None,
) -> tuple[str, int]:
    """Run one generation cycle: generate, then score the result.

    Args:
        config: Length and enabled classes
        rng: Optional randomness source passed through to the generator

    Returns:
        Tuple of (password, score)

    Raises:
        StorageError: If the event log cannot be written
    """
    password = generate(config, rng)
    value = score(password, config.length, config.classes)

    log_event(
        "password_generated",
        "SUCCESS" if password else "EMPTY",
        details={
            "length": config.length,
            "classes": describe_classes(config.classes),
            "score": value,
        },
    )
    return password, value


def display_result(
    password: str,
    value: int,
    visible: bool = False,
    locale: str = DEFAULT_LOCALE,
) -> None:
    """Print the password (masked unless visible) and its strength meter."""
    if not password:
        print("\nNo password generated. Select at least one character class.")
    elif visible:
        print(f"\nPassword: {password}")
    else:
        print(f"\nPassword (masked): {_mask_password(password)}")

    tier = get_strength_tier(value, locale)
    print(f"Strength: {format_strength_bar(value)} {tier.label}")


def password_actions(
    config: GenerationConfig,
    password: str,
    value: int,
    rng: Optional[RandomSource] = None,
    locale: str = DEFAULT_LOCALE,
) -> str:
    """Interactive loop over one configuration.

    Supports regenerating with the same settings, copying, and toggling
    visibility.

    Returns:
        The last password shown
    """
    visible = False
    display_result(password, value, visible, locale)

    while True:
        action = input(
            "\n(r)egenerate, (c)opy, (s)how/hide, (b)ack: "
        ).strip().lower()

        if action == 'b':
            return password

        elif action == 'r':
            try:
                password, value = generate_and_score(config, rng)
            except StorageError as e:
                print(f"Event log unavailable, keeping the current password: {e}")
                continue
            display_result(password, value, visible, locale)

        elif action == 'c':
            if not password:
                print("Nothing to copy.")
            elif _try_copy_to_clipboard(password):
                print("Password copied to clipboard.")
            else:
                print("Clipboard is not available on this system.")

        elif action == 's':
            visible = not visible
            display_result(password, value, visible, locale)

        else:
            print("Invalid option. Please enter 'r', 'c', 's', or 'b'.")


def generate_password_flow(
    rng: Optional[RandomSource] = None,
    locale: str = DEFAULT_LOCALE,
) -> None:
    """Full interactive flow for generating a password."""
    print("\n--- Password Generation ---")

    length = prompt_for_password_length()
    if length is None:
        print("Canceled password generation.")
        return

    classes = prompt_for_character_classes()
    if classes is None:
        print("Canceled password generation.")
        return

    config = GenerationConfig(length=length, classes=classes)
    try:
        password, value = generate_and_score(config, rng)
    except StorageError as e:
        print(f"Event log unavailable, password generation aborted: {e}")
        return
    password_actions(config, password, value, rng, locale)
