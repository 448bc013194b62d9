"""Wrapping text in ANSI colour and attribute escape sequences."""

from __future__ import annotations

from .unit import Color

_INIT = "\x1b["
_END = "m"
_HILIT = "1;"
_BLINK = "5;"
_RECOVER = "\x1b[0m"


def _format(parts: list[str]) -> str:
    body = "".join(parts)
    if body.endswith(";"):
        body = body[:-1]
    return _INIT + body + _END


def ansi_print(
    text: str | None,
    fg: Color = Color.NOCHANGE,
    bg: Color = Color.NOCHANGE,
    hi: bool = False,
    blinking: bool = False,
) -> str:
    """Return ``text`` with the given colours and attributes applied.

    An empty or missing text yields an empty string.
    """
    if not text:
        return ""
    parts: list[str] = []
    if hi:
        parts.append(_HILIT)
    if blinking:
        parts.append(_BLINK)
    if fg != Color.NOCHANGE:
        parts.append(f"3{int(fg)};")
    if bg != Color.NOCHANGE:
        parts.append(f"4{int(bg)};")
    return _format(parts) + text + _RECOVER


def ansi_plain(text: str | None, hi: bool = False, blinking: bool = False) -> str:
    """Return ``text`` with only highlighting and blinking applied."""
    if not text:
        return ""
    parts: list[str] = []
    if hi:
        parts.append(_HILIT)
    if blinking:
        parts.append(_BLINK)
    prefix = _format(parts) if parts else ""
    return prefix + text + _RECOVER