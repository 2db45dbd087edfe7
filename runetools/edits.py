"""Kinds of edit, for grouping undo history, and the known tool identifiers."""

from __future__ import annotations

from enum import Enum

TOOL_IDS = (
    "Preview",
    "Pen",
    "HyperPen",
    "Metaball",
    "Select",
    "Rectangle",
    "Star",
    "Ellipse",
    "Knife",
    "Measure",
)


class EditType(Enum):
    """The kind of modification an event made to the document."""

    NORMAL = "normal"
    NUDGE_LEFT = "nudge_left"
    NUDGE_RIGHT = "nudge_right"
    NUDGE_UP = "nudge_up"
    NUDGE_DOWN = "nudge_down"
    DRAG = "drag"
    DRAG_UP = "drag_up"

    def needs_new_undo_group(self, other: "EditType") -> bool:
        """Whether an edit of kind ``other`` following this one starts a new undo group."""
        if self is other and self in _COMBINING:
            return False
        return not (self is EditType.DRAG and other is EditType.DRAG_UP)


_COMBINING = frozenset(
    {
        EditType.NUDGE_LEFT,
        EditType.NUDGE_RIGHT,
        EditType.NUDGE_UP,
        EditType.NUDGE_DOWN,
        EditType.DRAG,
    }
)


def is_known_tool(tool_id: str) -> bool:
    """Whether ``tool_id`` names one of the editor's tools."""
    return tool_id in TOOL_IDS