"""
Errors - Exception types raised while parsing and mapping FNT fonts.
"""

from typing import Optional


class FontSplitterError(Exception):
    """Base class for every failure reported by fnt_splitter."""


class GrammarError(FontSplitterError):
    """The FNT text does not follow the line grammar."""

    def __init__(self, message: str, section: str,
                 field: Optional[str] = None, line: Optional[int] = None):
        super().__init__(message)
        self.section = section
        self.field = field
        self.line = line


class GeometryError(FontSplitterError):
    """A glyph rectangle falls outside the atlas or the canvas."""


class ResourceError(FontSplitterError):
    """A file or folder is missing, or an image cannot be decoded/encoded."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
