"""
Glyph naming - Maps glyph letters to the file names used by split and combine.

Both directions must go through ``glyph_filename`` so a split folder can be
combined back without renaming anything.
"""

from ..core.errors import ResourceError
from ..core.parser import Glyph
from ..i18n import tr

GLYPH_EXTENSION = "png"

# Characters that are illegal or reserved in file names
RESERVED_CHARACTERS = (
    ("<", "lt"),
    (">", "gt"),
    (":", "colon"),
    ('"', "dq"),
    ("/", "fs"),
    ("\\", "bs"),
    ("|", "pipe"),
    ("?", "qm"),
    ("*", "star"),
)

_MNEMONICS = dict(RESERVED_CHARACTERS)

_UNUSABLE_NAMES = ("", ".", "..")


def sanitize(letter: str) -> str:
    """Mnemonic for a reserved character, anything else unchanged."""
    return _MNEMONICS.get(letter, letter)


def glyph_filename(glyph: Glyph, extension: str = GLYPH_EXTENSION) -> str:
    """
    File name holding a glyph's pixels, e.g. ``A.png`` or ``qm.png``.

    Raises:
        ResourceError: the letter cannot name a file even after substitution
    """
    stem = sanitize(glyph.letter)
    if stem in _UNUSABLE_NAMES or any(c in stem for c in "/\\\0"):
        raise ResourceError(tr("resource.bad_file_name", id=glyph.id, letter=glyph.letter))
    return f"{stem}.{extension}"
