# Password Analyzer
# Purpose: Check password strength offline and look it up in the HaveIBeenPwned breach corpus.
# Only the first 5 characters of the password's SHA-1 hash ever leave this machine.

from cli import analyze_password_flow, review_breach_activity


# main app menu and selection options
def main_menu():
    show_password = False

    while True:
        print("\n=== Password Analyzer Menu ===")
        print("1. Analyze a password")
        print(f"2. {'Hide' if show_password else 'Show'} password while typing")
        print("3. Review recent breach checks")
        print("4. Exit")

        choice = input("Choose an option (1-4): ").strip()
        if choice == '1':
            analyze_password_flow(show_password)  # strength report + breach lookup
        elif choice == '2':
            show_password = not show_password
            print(f"Password input is now {'visible' if show_password else 'hidden'}.")
        elif choice == '3':
            review_breach_activity()
        elif choice == '4':
            print("Exiting the program. Goodbye.")
            break   # exit program
        else:
            print("Invalid choice. Please enter a number from 1 to 4.")


if __name__ == "__main__":
    main_menu()
