"""Synthesised binary font tables for a font held in memory.

These let a shaping engine treat an in-memory font as if it were a
compiled font file.
"""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Tuple

from runetools.font import Font

GlyphEntry = Tuple[str, str]

NOTDEF = ".notdef"
_CMAP_END_CODE = 0xFFFF


def _float_to_int(value: Optional[float], lo: int, hi: int) -> int:
    """Convert a float to an int by truncation, saturating at the bounds."""
    if value is None or math.isnan(value):
        return 0
    if value <= lo:
        return lo
    if value >= hi:
        return hi
    return int(value)


def _wrap_i16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def glyph_ids(font: Font) -> List[GlyphEntry]:
    """Return ``(codepoint, glyph name)`` pairs sorted by codepoint.

    The first entry is always the ``.notdef`` glyph at codepoint zero; the
    position of an entry in the list is its glyph id.
    """
    entries: List[GlyphEntry] = [("\0", NOTDEF)]
    entries.extend(
        (codepoint, glyph.name) for glyph in font for codepoint in glyph.codepoints
    )
    entries.sort()
    return entries


def make_cmap_table(glyphs: List[GlyphEntry]) -> bytes:
    """Build a ``cmap`` table with a single format 4 subtable.

    Raises ValueError if a codepoint lies outside the Basic Multilingual Plane.
    """
    start_codes: List[int] = []
    end_codes: List[int] = []
    deltas: List[int] = []

    for glyph_id, (char, _name) in enumerate(glyphs):
        if glyph_id == 0:
            continue
        code = ord(char)
        if code > 0xFFFF:
            raise ValueError(f"codepoint U+{code:X} does not fit in a format 4 cmap")
        if end_codes and end_codes[-1] + 1 == code:
            end_codes[-1] += 1
        else:
            start_codes.append(code)
            end_codes.append(code)
            deltas.append(_wrap_i16(glyph_id - code))

    start_codes.append(_CMAP_END_CODE)
    end_codes.append(_CMAP_END_CODE)
    deltas.append(1)
    offsets = [0] * len(start_codes)

    segment_count = len(start_codes)
    length = (16 + segment_count * 2 * 4) & 0xFFFF
    segment_count_x2 = (segment_count * 2) & 0xFFFF

    header = struct.pack(">HHHHI", 0, 1, 0, 4, 12)
    encoding = struct.pack(">HHHHHHH", 4, length, 0, segment_count_x2, 0, 0, 0)
    arrays = b"".join(
        (
            struct.pack(f">{segment_count}H", *end_codes),
            struct.pack(">H", 0),
            struct.pack(f">{segment_count}H", *start_codes),
            struct.pack(f">{segment_count}h", *deltas),
            struct.pack(f">{segment_count}H", *offsets),
        )
    )
    return header + encoding + arrays


@dataclass
class HorizontalHeader:
    """The contents of an ``hhea`` table."""

    ascender: int = 0
    descender: int = 0
    line_gap: int = 0
    advance_width_max: int = 0
    left_side_bearing_min: int = 0
    right_side_bearing_min: int = 6
    max_x_extent: int = 900
    caret_slope_rise: int = 1
    caret_slope_run: int = 0
    caret_offset: int = 0
    reserved: int = 0
    format: int = 0
    number_of_h_metrics: int = 0
    version: Tuple[int, int] = (1, 0)

    def encode(self) -> bytes:
        """Serialise to the 36-byte big-endian table."""
        return struct.pack(
            ">HHhhhHhhhhhhQhH",
            self.version[0],
            self.version[1],
            self.ascender,
            self.descender,
            self.line_gap,
            self.advance_width_max,
            self.left_side_bearing_min,
            self.right_side_bearing_min,
            self.max_x_extent,
            self.caret_slope_rise,
            self.caret_slope_run,
            self.caret_offset,
            self.reserved,
            self.format,
            self.number_of_h_metrics,
        )


@dataclass(frozen=True)
class HorizontalMetricRecord:
    """One glyph's advance width and left side bearing."""

    advance_width: int
    left_side_bearing: int


@dataclass
class HorizontalMetrics:
    """The contents of an ``hmtx`` table."""

    records: List[HorizontalMetricRecord] = field(default_factory=list)
    left_side_bearings: List[int] = field(default_factory=list)

    def encode(self) -> bytes:
        """Serialise records followed by trailing left side bearings."""
        parts = [
            struct.pack(">Hh", record.advance_width, record.left_side_bearing)
            for record in self.records
        ]
        parts.extend(struct.pack(">h", lsb) for lsb in self.left_side_bearings)
        return b"".join(parts)


def make_horiz_tables(
    font: Font,
    glyphs: List[GlyphEntry],
    left_side_bearings: Optional[Mapping[str, float]] = None,
) -> Tuple[bytes, bytes]:
    """Build the ``hhea`` and ``hmtx`` tables for ``glyphs``.

    ``left_side_bearings`` maps glyph names to the left edge of each glyph's
    outline bounding box; glyphs missing from it get a bearing of zero.
    """
    bearings = left_side_bearings or {}
    records = []
    for _char, name in glyphs:
        glyph = font.glyph(name)
        advance = glyph.advance_width if glyph is not None else None
        records.append(
            HorizontalMetricRecord(
                advance_width=_float_to_int(advance, 0, 0xFFFF),
                left_side_bearing=_float_to_int(bearings.get(name), -0x8000, 0x7FFF),
            )
        )
    metrics = HorizontalMetrics(records=records)

    info = font.info
    line_gap = info.open_type_hhea_line_gap
    hhea = HorizontalHeader(
        ascender=_float_to_int(info.ascender, -0x8000, 0x7FFF),
        descender=_float_to_int(info.descender, -0x8000, 0x7FFF),
        line_gap=_wrap_i16(int(line_gap)) if line_gap is not None else 0,
        advance_width_max=max((r.advance_width for r in records), default=0),
        left_side_bearing_min=min((r.left_side_bearing for r in records), default=0),
        number_of_h_metrics=len(records) & 0xFFFF,
    )
    return hhea.encode(), metrics.encode()


class VirtualFont:
    """A font's glyph id table plus generated ``cmap``, ``hhea`` and ``hmtx``."""

    def __init__(
        self, font: Font, left_side_bearings: Optional[Mapping[str, float]] = None
    ):
        self.glyph_ids = glyph_ids(font)
        self.cmap = make_cmap_table(self.glyph_ids)
        self.hhea, self.hmtx = make_horiz_tables(
            font, self.glyph_ids, left_side_bearings
        )

    def glyph_for_id(self, glyph_id: int) -> Optional[str]:
        """Return the glyph name for ``glyph_id``, or None if out of range."""
        if 0 <= glyph_id < len(self.glyph_ids):
            return self.glyph_ids[glyph_id][1]
        return None