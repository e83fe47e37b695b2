"""Shared CLI prompt utilities.

Common input prompts and validation used across CLI flows.
"""

from typing import Optional

from core import (
    CharClass,
    DEFAULT_PASSWORD_LENGTH,
    MIN_PASSWORD_LENGTH,
    MAX_PASSWORD_LENGTH,
    parse_classes,
)


def prompt_for_password_length() -> Optional[int]:
    """Prompt user for valid password length.

    An empty answer picks the default length.

    Returns:
        Length as integer, or None to cancel
    """
    while True:
        val = input(
            f"Enter password length ({MIN_PASSWORD_LENGTH}-{MAX_PASSWORD_LENGTH}, "
            f"Enter for {DEFAULT_PASSWORD_LENGTH}, or 'q' to cancel): "
        ).strip().lower()

        if val in ['q', 'exit']:
            return None

        if not val:
            return DEFAULT_PASSWORD_LENGTH

        try:
            length = int(val)
            if MIN_PASSWORD_LENGTH <= length <= MAX_PASSWORD_LENGTH:
                return length
            print(f"Please enter a number between {MIN_PASSWORD_LENGTH} and {MAX_PASSWORD_LENGTH}.")
        except ValueError:
            print("Invalid input. Enter a number.")


def prompt_for_character_classes() -> Optional[frozenset[CharClass]]:
    """Prompt user to choose character classes for password generation.

    Selecting no class at all is allowed; the generator then returns an
    empty password.

    Returns:
        Set of enabled classes, or None to cancel
    """
    def ask(part: str) -> Optional[bool]:
        while True:
            ans = input(f"Include {part}? (y/n or q to cancel): ").strip().lower()
            if ans in ['q', 'exit']:
                return None
            if ans in ['y', 'n']:
                return ans == 'y'
            print("Please enter 'y', 'n', or 'q' to cancel.")

    upper = ask("uppercase letters")
    if upper is None:
        return None

    lower = ask("lowercase letters")
    if lower is None:
        return None

    digits = ask("digits")
    if digits is None:
        return None

    symbols = ask("symbols")
    if symbols is None:
        return None

    return parse_classes(uppercase=upper, lowercase=lower, digits=digits, symbols=symbols)
