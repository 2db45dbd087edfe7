"""A minimal in-memory font: metadata and named glyphs."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional


@dataclass
class FontInfo:
    """Font-wide metadata."""

    family_name: Optional[str] = None
    style_name: Optional[str] = None
    units_per_em: Optional[float] = None
    descender: Optional[float] = None
    ascender: Optional[float] = None
    cap_height: Optional[float] = None
    x_height: Optional[float] = None
    open_type_hhea_line_gap: Optional[int] = None


@dataclass
class Glyph:
    """A named glyph with the codepoints that map to it."""

    name: str
    codepoints: List[str] = field(default_factory=list)
    advance_width: Optional[float] = None


@dataclass
class Font:
    """A font holding metadata and a single layer of glyphs keyed by name."""

    info: FontInfo = field(default_factory=FontInfo)
    glyphs: Dict[str, Glyph] = field(default_factory=dict)

    def glyph(self, name: str) -> Optional[Glyph]:
        """Return the glyph called ``name``, or None."""
        return self.glyphs.get(name)

    def glyph_count(self) -> int:
        """Number of glyphs in the font."""
        return len(self.glyphs)

    def insert_glyph(self, glyph: Glyph) -> None:
        """Add ``glyph``, replacing any glyph of the same name."""
        self.glyphs[glyph.name] = glyph

    def __iter__(self) -> Iterator[Glyph]:
        return iter(self.glyphs.values())

    def __len__(self) -> int:
        return len(self.glyphs)


def create_blank_font() -> Font:
    """Create an untitled font with placeholder glyphs for a-z and A-Z."""
    font = Font(
        info=FontInfo(
            family_name="Untitled",
            style_name="Regular",
            units_per_em=1000.0,
            descender=-200.0,
            ascender=800.0,
            cap_height=700.0,
            x_height=500.0,
        )
    )
    for char in string.ascii_lowercase + string.ascii_uppercase:
        font.insert_glyph(Glyph(name=char, codepoints=[char]))
    return font