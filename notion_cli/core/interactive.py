"""Interactive prompts using InquirerPy."""

from __future__ import annotations

import sys

from InquirerPy import inquirer


def _execute(prompt):
    """Execute a prompt and handle ``Ctrl-C`` gracefully."""
    try:
        return prompt.execute()
    except KeyboardInterrupt:
        print("\nCancelled by user", file=sys.stderr)
        sys.exit(1)


def confirm(message: str, default: bool = True) -> bool:
    return bool(_execute(inquirer.confirm(message=message, default=default)))


def prompt_token(message: str = "Enter your Notion API token") -> str:
    """Ask for a token without echoing it; empty input is rejected."""
    return _execute(
        inquirer.secret(
            message=message,
            validate=lambda text: bool(text.strip()),
            invalid_message="Token cannot be empty",
            filter=lambda text: text.strip(),
        )
    )
