"""Mouse and keyboard handling for the shape-drawing tools."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, Tuple

from runetools.edits import EditType
from runetools.geometry import Point
from runetools.shapes import (
    ellipse_points,
    rect_points,
    square_locked,
    star_locked,
    star_points,
)

SHIFT = "Shift"


class GestureState(Enum):
    """Where a shape tool is in its click-drag gesture."""

    READY = "ready"
    DOWN = "down"
    BEGUN = "begun"


class ShapeTool(ABC):
    """A tool that drags out a shape between a start and a current point.

    Finished shapes are appended to ``shapes`` as lists of points.
    """

    name = "Shape"

    def __init__(self) -> None:
        self.gesture = GestureState.READY
        self.shift_locked = False
        self.shapes: List[List[Point]] = []
        self._start: Optional[Point] = None
        self._current: Optional[Point] = None

    def _lock(self, start: Point, current: Point) -> Point:
        return square_locked(start, current)

    @abstractmethod
    def _make_shape(self, start: Point, current: Point) -> List[Point]:
        """Build the shape's points from the gesture's two points."""

    def points(self) -> Optional[Tuple[Point, Point]]:
        """The gesture's start and (possibly locked) current point, while dragging."""
        if self.gesture is not GestureState.BEGUN:
            return None
        start, current = self._start, self._current
        if self.shift_locked:
            current = self._lock(start, current)
        return start, current

    def _finish(self) -> Optional[EditType]:
        pts = self.points()
        if pts is None:
            return None
        self.shapes.append(self._make_shape(*pts))
        self.gesture = GestureState.READY
        return EditType.NORMAL

    def left_down(self, pos: Point, count: int, shift: bool) -> None:
        """Begin a gesture on a single click at ``pos``."""
        if count == 1:
            self.gesture = GestureState.DOWN
            self._start = pos
            self._current = None
            self.shift_locked = shift

    def left_up(self) -> Optional[EditType]:
        """Finish the drag, creating the shape; returns the edit made, if any."""
        return self._finish()

    def left_drag_began(self, start: Point, current: Point, shift: bool) -> None:
        """Start dragging from the point where the mouse went down."""
        if self.gesture is GestureState.DOWN:
            self.gesture = GestureState.BEGUN
            self._current = current

    def left_drag_changed(self, pos: Point) -> None:
        """Follow the mouse during a drag."""
        if self.gesture is GestureState.BEGUN:
            self._current = pos

    def left_drag_ended(self) -> Optional[EditType]:
        """End of a drag; the shape is made on mouse up instead."""
        return None

    def key_down(self, key: str) -> bool:
        """Handle a key press; returns True if a repaint is needed."""
        if key == SHIFT:
            self.shift_locked = True
            return True
        return False

    def key_up(self, key: str) -> bool:
        """Handle a key release; returns True if a repaint is needed."""
        if key == SHIFT:
            self.shift_locked = False
            return True
        return False

    def cancel(self) -> None:
        """Abandon any gesture in progress."""
        self.gesture = GestureState.READY


class RectangleTool(ShapeTool):
    """Drags out closed rectangles; shift makes squares."""

    name = "Rectangle"

    def _make_shape(self, start: Point, current: Point) -> List[Point]:
        return rect_points(start, current)


class StarTool(ShapeTool):
    """Drags out five-pointed stars from their centre."""

    name = "Star"

    def _lock(self, start: Point, current: Point) -> Point:
        return star_locked(start, current)

    def _make_shape(self, start: Point, current: Point) -> List[Point]:
        return star_points(start, current)


class EllipseTool(ShapeTool):
    """Drags out ellipses inscribed in the dragged box; shift makes circles."""

    name = "Ellipse"

    def _make_shape(self, start: Point, current: Point) -> List[Point]:
        return ellipse_points(start, current)

    def left_down(self, pos: Point, count: int, shift: bool) -> None:
        """The ellipse tool starts on drag, not on mouse down."""

    def left_up(self) -> Optional[EditType]:
        """The ellipse is created when the drag ends, not on mouse up."""
        return None

    def left_drag_began(self, start: Point, current: Point, shift: bool) -> None:
        self.gesture = GestureState.BEGUN
        self._start = start
        self._current = current
        self.shift_locked = shift

    def left_drag_ended(self) -> Optional[EditType]:
        return self._finish()