# Password Generator & Strength Meter
# Purpose: generate random passwords from selected character classes and show a 0-5 strength score.
# Terminal host for the generation core; the HTTP host lives in api/.

from core import DEFAULT_LOCALE, SUPPORTED_LOCALES, StorageError, configure_logging
from cli import generate_password_flow, test_password_flow


# main app menu and selection options
def main_menu():
    locale = DEFAULT_LOCALE
    while True:
        print("\n=== Password Generator ===")
        print("1. Generate a password")
        print("2. Test a password")
        print(f"3. Switch label language (current: {locale})")
        print("4. Exit")

        choice = input("Choose an option (1-4): ").strip()
        if choice == '1':
            generate_password_flow(locale=locale)
        elif choice == '2':
            test_password_flow(locale=locale)
        elif choice == '3':
            # cycle through supported label languages
            idx = SUPPORTED_LOCALES.index(locale) if locale in SUPPORTED_LOCALES else -1
            locale = SUPPORTED_LOCALES[(idx + 1) % len(SUPPORTED_LOCALES)]
            print(f"Labels now shown in '{locale}'.")
        elif choice == '4':
            print("Exiting the program. Goodbye.")
            break
        else:
            print("Invalid choice. Please enter a number from 1 to 4.")


def main():
    try:
        configure_logging()
    except StorageError as e:
        print(f"Warning: logging disabled: {e}")
    main_menu()


if __name__ == "__main__":
    main()
