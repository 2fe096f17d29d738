"""
Text rendering for linked lists.

Supports two conventions:
    - ARROW:            "0 -> 1 -> 2" with no trailing separator
    - NULL_TERMINATED:  "0 -> 1 -> 2 -> NULL", the minimal-variant form

The caller picks the convention; the list itself never does.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from sllist.linked_list import LinkedList

SEPARATOR = " -> "
EMPTY_TEXT = "Empty List"
NULL_TEXT = "NULL"


class RenderStyle(Enum):
    """Rendering conventions for text output."""
    ARROW = "arrow"                      # 1 -> 2 -> 3
    NULL_TERMINATED = "null_terminated"  # 1 -> 2 -> 3 -> NULL


def render_list(lst: "LinkedList", style: RenderStyle = RenderStyle.ARROW) -> str:
    """
    Render a list to a string, newline included.

    Args:
        lst: List to render (not modified)
        style: Rendering convention

    Returns:
        "Empty List\\n" (ARROW) or "NULL\\n" (NULL_TERMINATED) for an
        empty list, otherwise the values joined by " -> ".
    """
    parts = [str(value) for value in lst]

    if style == RenderStyle.NULL_TERMINATED:
        parts.append(NULL_TEXT)
    elif not parts:
        return EMPTY_TEXT + "\n"

    return SEPARATOR.join(parts) + "\n"


def render(lst: "LinkedList", sink: TextIO, style: RenderStyle = RenderStyle.ARROW) -> None:
    """Write the rendering of `lst` to `sink`."""
    sink.write(render_list(lst, style=style))


__all__ = ["RenderStyle", "render_list", "render", "SEPARATOR", "EMPTY_TEXT", "NULL_TEXT"]
