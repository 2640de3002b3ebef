"""Shared CLI prompt utilities.

Input prompts used by the CLI flows.
"""

import getpass
from typing import Optional


def prompt_for_password(show_password: bool = False) -> Optional[str]:
    """Prompt user for the password to analyze.

    Args:
        show_password: Echo the typed password instead of hiding it

    Returns:
        Password text, or None if nothing was entered
    """
    prompt = "Enter the password to analyze (blank to cancel): "
    if show_password:
        pwd = input(prompt)
    else:
        pwd = getpass.getpass(prompt)
    return pwd or None
