import pytest

from runetools.edits import TOOL_IDS, EditType, is_known_tool


@pytest.mark.parametrize(
    "first,second",
    [
        (EditType.NUDGE_DOWN, EditType.NUDGE_DOWN),
        (EditType.NUDGE_UP, EditType.NUDGE_UP),
        (EditType.NUDGE_LEFT, EditType.NUDGE_LEFT),
        (EditType.NUDGE_RIGHT, EditType.NUDGE_RIGHT),
        (EditType.DRAG, EditType.DRAG),
        (EditType.DRAG, EditType.DRAG_UP),
    ],
)
def test_combining_edits(first, second):
    assert first.needs_new_undo_group(second) is False


@pytest.mark.parametrize(
    "first,second",
    [
        (EditType.NORMAL, EditType.NORMAL),
        (EditType.NUDGE_LEFT, EditType.NUDGE_RIGHT),
        (EditType.NUDGE_UP, EditType.NUDGE_DOWN),
        (EditType.DRAG_UP, EditType.DRAG),
        (EditType.DRAG_UP, EditType.DRAG_UP),
        (EditType.NORMAL, EditType.DRAG),
        (EditType.DRAG, EditType.NORMAL),
    ],
)
def test_separate_edits(first, second):
    assert first.needs_new_undo_group(second) is True


@pytest.mark.parametrize("tool_id", ["Pen", "HyperPen", "Select", "Knife", "Measure"])
def test_known_tools(tool_id):
    assert is_known_tool(tool_id) is True


@pytest.mark.parametrize("tool_id", ["pen", "Brush", ""])
def test_unknown_tools(tool_id):
    assert is_known_tool(tool_id) is False


def test_every_listed_tool_id_is_known_and_unique():
    assert len(set(TOOL_IDS)) == len(TOOL_IDS)
    assert [is_known_tool(tool_id) for tool_id in TOOL_IDS] == [True] * len(TOOL_IDS)