"""
Console utilities for CLI.
"""

from typing import Optional
from rich.console import Console
from rich.theme import Theme
import os
import sys


def _build_theme(theme_name: str) -> Theme:
    if theme_name == "light":
        return Theme(
            {
                "primary": "white",
                "accent": "dark_green",
                "warning": "dark_orange",
                "error": "red",
                "success": "green",
                "muted": "grey42",
            }
        )
    return Theme(
        {
            "primary": "white",
            "accent": "cyan",
            "warning": "yellow",
            "error": "bold red",
            "success": "green",
            "muted": "grey70",
        }
    )


def _should_enable_color(enable: Optional[bool]):
    """
    Compute effective color enablement, force_terminal, and color_system.

    Rules:
    - Respect NO_COLOR unless SETTERKIT_FORCE_COLOR is set
    - When enable is None: auto-detect via isatty
    - force_terminal only when SETTERKIT_FORCE_COLOR is set
    """
    force_color = (os.getenv("SETTERKIT_FORCE_COLOR") or "").lower() in ("1", "true", "yes", "on")
    no_color_env = os.getenv("NO_COLOR") is not None
    tty = bool(getattr(sys.stdout, "isatty", lambda: False)())

    desired_raw = tty if enable is None else bool(enable)
    desired = desired_raw and (not no_color_env or force_color)

    if enable is False:
        force_terminal = False
    elif force_color:
        force_terminal = True
    else:
        force_terminal = None  # let rich decide

    color_system = "auto" if desired else None
    return desired, force_terminal, color_system


def make_console(theme_name: str, use_color: Optional[bool] = True) -> Console:
    """Create a Rich console with the selected theme and color policy."""
    theme = _build_theme("light" if theme_name == "light" else "dark")
    desired, force_terminal, color_system = _should_enable_color(use_color)

    return Console(
        theme=theme,
        no_color=not desired,
        color_system=color_system,
        force_terminal=force_terminal,
        markup=True,
        highlight=False,
    )


__all__ = ["make_console"]
