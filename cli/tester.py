"""Password testing CLI flows.

Lets users score a password they typed or pasted themselves.
"""

from core import DEFAULT_LOCALE, StorageError, log_event
from password_checker import check_password_strength, format_strength_bar


def test_password_flow(locale: str = DEFAULT_LOCALE) -> None:
    """Score a user-entered password and show its strength tier."""
    print("\n--- Test a Password ---")

    user_pwd = input("Enter the password you want to test: ").strip()
    if not user_pwd:
        print("No password entered.")
        return

    value, tier = check_password_strength(user_pwd, locale=locale)
    try:
        log_event("password_scored", "SUCCESS", details={"length": len(user_pwd), "score": value})
    except StorageError as e:
        print(f"Warning: event log unavailable: {e}")

    print(f"Strength: {format_strength_bar(value)} {tier.label}")
