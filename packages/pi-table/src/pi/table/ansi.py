"""SGR styling for already padded cell lines."""

from __future__ import annotations

from typing import Iterable

from pi.table.style import Attribute, Color

_RESET = "\x1b[0m"


def sgr(params: Iterable[str]) -> str:
    """Build a single SGR sequence, e.g. ``sgr(["1", "31"]) -> "\\x1b[1;31m"``."""
    joined = ";".join(params)
    if not joined:
        return ""
    return f"\x1b[{joined}m"


def stylize(
    text: str,
    fg: Color | None = None,
    bg: Color | None = None,
    attributes: Iterable[Attribute] = (),
) -> str:
    """Wrap *text* in SGR codes. Returns *text* untouched if nothing is set."""
    params: list[str] = [attr.value for attr in attributes]
    if fg is not None:
        params.append(fg.fg_params)
    if bg is not None:
        params.append(bg.bg_params)

    prefix = sgr(params)
    if not prefix:
        return text
    return f"{prefix}{text}{_RESET}"
