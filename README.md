# runetools

Building blocks for a font editor. It uses only the standard library.

## Modules

- `runetools.undo`: `UndoState`, a bounded stack of states (128 by default)
  with `undo()`, `redo()`, `add_undo_group(item)`, `current()` and
  `update_current_undo(f)`. `undo()` and `redo()` return `None` when there is
  nothing to step to. Adding a state after an undo drops the redo history.
  When the stack is full, the oldest state is dropped.
- `runetools.edits`: the `EditType` enum. `EditType.needs_new_undo_group(other)`
  decides whether an edit starts a new undo group. Repeated nudges in the
  same direction combine into one group, as do drags, and a drag followed by
  `DRAG_UP`. The module also has `TOOL_IDS` and `is_known_tool(tool_id)`.
- `runetools.geometry`: `Point`, a frozen 2D point or vector with `+`, `-`,
  scalar `*` and `hypot()`. It also has:
  - `compute_scale(pre, post)`, which takes `(width, height)` pairs; any axis
    whose ratio is not finite scales by 1.
  - `axis_locked_point(point, prev)`, the shift-click axis lock.
- `runetools.font`: a small in-memory font model (`FontInfo`, `Glyph`, `Font`)
  and `create_blank_font()`, which returns an "Untitled" / "Regular" font with
  1000 units per em and empty glyphs a–z and A–Z.
- `runetools.virtual_font`: `glyph_ids(font)`, `make_cmap_table(glyphs)` and
  `make_horiz_tables(font, glyphs, left_side_bearings)`.
  - `make_cmap_table` builds a `cmap` table with a single format 4 subtable. It
    raises `ValueError` for codepoints outside the BMP.
  - `make_horiz_tables` builds the `hhea` and `hmtx` tables.
  - `VirtualFont(font, left_side_bearings=None)` holds `glyph_ids`, `cmap`,
    `hhea` and `hmtx`. Its `glyph_for_id(glyph_id)` returns a glyph name, or
    `None` if the id is out of range.
  - Glyph id 0 is always `.notdef`.
  - Left side bearings are passed in as a mapping from glyph name to value; they
    are not computed from outlines.
- `runetools.measure`: helpers for a measuring line.
  - `atan_to_angle(atan)` converts an angle to degrees.
  - `format_pt(x, y)` formats a point to one decimal and drops a trailing `.0`.
  - `label_offset(angle)` gives the offset for a label.
  - `cluster_intersections(line_ts, line_length)` merges intersections that lie
    closer than 0.1 units. It always keeps the endpoints 0 and 1, and raises
    `ValueError` for a non-positive length.
  - `segment_lengths(line_ts, line_length)` returns `(mid_t, length)` for each
    piece of the line.
- `runetools.shapes`: pure geometry for the shape tools.
  - `square_locked` and `star_locked` apply the shift constraints.
  - `rect_points`, `star_points` and `ellipse_points` build the points of a shape.
  - `size_label` builds the `"width, height"` drag label.
- `runetools.gestures`: the shape tools `RectangleTool`, `StarTool` and
  `EllipseTool`, built on `ShapeTool`, with a `GestureState` enum.
  - The tools take mouse events (`left_down`, `left_drag_began`,
    `left_drag_changed`, `left_drag_ended`, `left_up`), `key_down` and `key_up`
    with the key name `"Shift"`, and `cancel()`.
  - Each finished shape is appended to the tool's `shapes` list as a list of
    `Point`s, and the event that finishes it returns `EditType.NORMAL`.
  - Rectangles and stars finish on mouse up; ellipses finish when the drag ends.

## Example

```python
from runetools.undo import UndoState
from runetools.font import create_blank_font
from runetools.virtual_font import VirtualFont
from runetools.gestures import RectangleTool
from runetools.geometry import Point

history = UndoState("first")
history.add_undo_group("second")
assert history.undo() == "first"
assert history.redo() == "second"

vfont = VirtualFont(create_blank_font())
print(len(vfont.cmap), len(vfont.hhea), len(vfont.hmtx))
print(vfont.glyph_for_id(1))  # "A"

tool = RectangleTool()
tool.left_down(Point(0, 0), count=1, shift=False)
tool.left_drag_began(Point(0, 0), Point(10, 5), shift=False)
tool.left_up()
print(tool.shapes[0])  # corners, starting point last
```

## What it does not do

The package has no command-line program and no graphical interface. It does
no rendering or painting. It cannot read or write font files, and
`VirtualFont` does not shape text itself. The only drawing tools are the
rectangle, star and ellipse tools; there are no pen, selection or knife tools.

## Installation and tests

```
pip install .
pip install ".[test]"
pytest
```