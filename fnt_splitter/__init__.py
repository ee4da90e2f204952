"""
FNT Splitter - Split Geometry Dash font sprite sheets into glyph images and
combine them back.

Modules:
    core: FNT parsing and writing, errors, file-level split/combine
    texture: Glyph cropping, compositing and comparison
    i18n: Internationalization
"""

__version__ = "1.0.0"
__license__ = "MIT"
