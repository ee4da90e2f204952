"""
Region comparison - Finds the glyphs whose pixels differ between two atlases.
"""

import logging
from typing import List

import numpy as np
from PIL import Image

from ..core.errors import GeometryError
from ..core.parser import FontDocument
from ..i18n import tr
from .splitter import check_atlas_bounds, glyph_regions

logger = logging.getLogger(__name__)


def compare_regions(reference: Image.Image, candidate: Image.Image,
                    document: FontDocument) -> List[str]:
    """
    File names of the drawable glyphs that differ between two atlases.

    Only glyph rectangles are compared; the background between glyphs is
    not part of the font and is ignored.
    """
    if reference.size != candidate.size:
        raise GeometryError(tr(
            "geometry.compare_size",
            reference=f"{reference.width}x{reference.height}",
            candidate=f"{candidate.width}x{candidate.height}"))

    ref = np.asarray(reference.convert('RGBA'))
    cand = np.asarray(candidate.convert('RGBA'))

    changed = []
    for filename, glyph in glyph_regions(document):
        check_atlas_bounds(glyph, reference.width, reference.height)
        left, upper, right, lower = glyph.box
        if filename in changed:
            continue
        if not np.array_equal(ref[upper:lower, left:right], cand[upper:lower, left:right]):
            changed.append(filename)

    logger.debug(f"{len(changed)} of {len(document.drawable_glyphs())} glyphs differ")
    return changed
