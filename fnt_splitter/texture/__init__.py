"""
Texture module - Moving glyph rectangles between an atlas and glyph images.
"""

from .naming import RESERVED_CHARACTERS, glyph_filename, sanitize
from .splitter import glyph_regions, split_atlas
from .combiner import combine_glyphs, glyph_loader
from .compare import compare_regions

__all__ = [
    "RESERVED_CHARACTERS",
    "glyph_filename",
    "sanitize",
    "glyph_regions",
    "split_atlas",
    "combine_glyphs",
    "glyph_loader",
    "compare_regions",
]
