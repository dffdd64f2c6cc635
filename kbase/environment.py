"""Access to the environment variables of the current process."""

from __future__ import annotations

import os


class Environment:
    """Static helpers over the process environment."""

    @staticmethod
    def get_var(name: str) -> str:
        """Return the value of ``name``, or an empty string if it is not set."""
        return os.environ.get(name, "")

    @staticmethod
    def has_var(name: str) -> bool:
        """Return True if a variable called ``name`` exists."""
        return name in os.environ

    @staticmethod
    def set_var(name: str, value: str) -> None:
        """Create or overwrite the variable ``name``."""
        os.environ[name] = value

    @staticmethod
    def remove_var(name: str) -> None:
        """Remove ``name``; does nothing if it does not exist."""
        os.environ.pop(name, None)

    @staticmethod
    def current_environment_block() -> dict[str, str]:
        """Return all variables as a dict ordered by name."""
        return dict(sorted(os.environ.items()))