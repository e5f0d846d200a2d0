"""
Configuration module for loading environment variables and settings.

This module handles:
1. Loading overrides from a .env file
2. Setting default configurations
3. Validating the values the CLI depends on
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

_TRUTHY = ('1', 'true', 'yes', 'on')
_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
_THEMES = ('dark', 'light')


class Config:
    """Configuration manager for capability invocation and the demo CLI."""

    # Require capabilities to return a real bool; when off, results are coerced with bool()
    STRICT_BOOL: bool = os.getenv('SETTERKIT_STRICT_BOOL', 'true').strip().lower() in _TRUTHY

    # Logging level applied by the CLI (the library never configures handlers)
    LOG_LEVEL: str = os.getenv('SETTERKIT_LOG_LEVEL', 'WARNING').strip().upper()

    # CLI colour theme: dark | light
    CLI_THEME: str = os.getenv('SETTERKIT_CLI_THEME', 'dark').strip().lower()

    @classmethod
    def validate(cls) -> None:
        """
        Validate settings that have a closed set of values.

        Raises:
            ValueError: If LOG_LEVEL or CLI_THEME is not recognised
        """
        if cls.LOG_LEVEL not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid SETTERKIT_LOG_LEVEL: {cls.LOG_LEVEL!r}. "
                f"Expected one of {', '.join(_LOG_LEVELS)}."
            )
        if cls.CLI_THEME not in _THEMES:
            raise ValueError(
                f"Invalid SETTERKIT_CLI_THEME: {cls.CLI_THEME!r}. "
                f"Expected one of {', '.join(_THEMES)}."
            )
