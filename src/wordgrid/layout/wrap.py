"""Text wrapping for grid labels.

Two strategies are provided:

- ``split_into_two_lines`` breaks a label into at most two lines,
  preferring a space or hyphen near the width limit.
- ``wrap_text_to_lines`` greedily word-wraps longer copy into a capped
  number of lines.
"""

from __future__ import annotations

from wordgrid.layout.constants import DETAIL_MAX_LINES

_BREAK_CHARS = (" ", "-")


def split_into_two_lines(text: str, max_len: int) -> tuple[list[str], bool]:
    """Split *text* into one or two lines no wider than *max_len*.

    Returns ``(lines, wrapped)``. Text that already fits comes back as a
    single untouched line. Otherwise the break is the nearest space or
    hyphen at or before *max_len* (index 1 at the earliest); without one
    the text is cut at exactly *max_len*. Only the first line is
    guaranteed to respect the limit. *max_len* must be at least 1.
    """
    if len(text) <= max_len:
        return [text], False

    break_at = max_len
    for i in range(min(max_len, len(text) - 1), 0, -1):
        if text[i] in _BREAK_CHARS:
            break_at = i
            break

    first = text[:break_at].rstrip()
    rest = text[break_at:].lstrip()
    return [first, rest], True


def wrap_text_to_lines(
    text: str,
    max_cols: int,
    max_lines: int = DETAIL_MAX_LINES,
) -> list[str]:
    """Greedy word-wrap of *text* into at most *max_lines* lines.

    Words that would start a line past the cap are dropped. A single word
    wider than *max_cols* is kept whole on its own line.
    """
    if max_lines < 1:
        return []
    lines: list[str] = []
    current = ""
    for word in text.split():
        joined = f"{current} {word}" if current else word
        if len(joined) <= max_cols:
            current = joined
            continue
        if current:
            lines.append(current)
        current = word
        if len(lines) >= max_lines - 1:
            break
    if current and len(lines) < max_lines:
        lines.append(current)
    return lines
