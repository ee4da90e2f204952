"""
Core module - FNT parsing and writing, errors and file-level orchestration.
"""

from .errors import FontSplitterError, GeometryError, GrammarError, ResourceError
from .parser import (
    Common, FontDocument, FNTParser, Glyph, Info, Page, parse_fnt, parse_fnt_file, read_fnt_text,
)
from .writer import format_fnt, rename_page_file, write_fnt, write_fnt_text

__all__ = [
    "FontSplitterError",
    "GeometryError",
    "GrammarError",
    "ResourceError",
    "Common",
    "FontDocument",
    "FNTParser",
    "Glyph",
    "Info",
    "Page",
    "parse_fnt",
    "parse_fnt_file",
    "read_fnt_text",
    "format_fnt",
    "rename_page_file",
    "write_fnt",
    "write_fnt_text",
]
