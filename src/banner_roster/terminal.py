"""
Terminal output formatting for the roster scripts.

Colours are only emitted when stdout is a tty, so piping a roster into
another tool gives plain text.
"""

import sys
from enum import Enum


class Color(Enum):
    RESET = "\033[0m"
    BOLD = "\033[1m"

    BRIGHT_RED = "\033[91m"
    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_MAGENTA = "\033[95m"
    BRIGHT_CYAN = "\033[96m"


def _supports_color() -> bool:
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def colorize(text: str, *colors: Color) -> str:
    if not _supports_color():
        return text
    prefix = "".join(c.value for c in colors)
    return f"{prefix}{text}{Color.RESET.value}"


def warning(message: str) -> None:
    print(colorize(f"⚠ {message}", Color.BRIGHT_YELLOW))


def error(message: str) -> None:
    print(colorize(f"✗ {message}", Color.BRIGHT_RED), file=sys.stderr)


def link(url: str, label: str | None = None) -> str:
    display = label or url
    if _supports_color():
        colored_text = colorize(display, Color.BRIGHT_CYAN, Color.BOLD)
        return f"\033]8;;{url}\033\\{colored_text}\033]8;;\033\\"
    return f"{display} ({url})"


def roster(title: str, names: list[str], url: str | None = None) -> None:
    heading = colorize(title, Color.BOLD, Color.BRIGHT_MAGENTA)
    if url:
        heading = f"{heading}  {link(url, 'source')}"
    print(f"\n{heading}")
    if not names:
        warning("no current rate-up characters found")
        return
    star = colorize("★", Color.BRIGHT_YELLOW)
    for name in names:
        print(f"  {star} {name}")
