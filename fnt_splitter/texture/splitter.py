"""
Glyph Splitter - Crops every glyph of a font atlas into its own image.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Tuple

from PIL import Image

from ..core.errors import GeometryError
from ..core.parser import FontDocument, Glyph
from ..i18n import tr
from .naming import glyph_filename

logger = logging.getLogger(__name__)


def glyph_regions(document: FontDocument) -> List[Tuple[str, Glyph]]:
    """
    (file name, glyph) for every glyph that has pixels, in file order.

    Zero-area glyphs (the space, usually) are skipped.
    """
    regions = []
    for glyph in document.glyphs:
        if not glyph.is_drawable:
            logger.debug(f"Skipping zero-area glyph {glyph.id} ({glyph.letter!r})")
            continue
        regions.append((glyph_filename(glyph), glyph))
    return regions


def check_atlas_bounds(glyph: Glyph, atlas_width: int, atlas_height: int) -> None:
    """Raise GeometryError if the glyph's box is not fully inside the atlas."""
    left, upper, right, lower = glyph.box
    if right > atlas_width or lower > atlas_height:
        raise GeometryError(tr(
            "geometry.outside_atlas", id=glyph.id, letter=glyph.letter,
            x=left, y=upper, width=glyph.width, height=glyph.height,
            atlas_width=atlas_width, atlas_height=atlas_height))


def split_atlas(atlas: Image.Image, document: FontDocument,
                max_workers: int = 1) -> Dict[str, Image.Image]:
    """
    Crop each drawable glyph out of the atlas.

    Every rectangle is checked against the atlas before anything is cropped.

    Args:
        atlas: Decoded sprite sheet
        document: Parsed font describing the sheet
        max_workers: Threads used for cropping; 1 crops sequentially

    Returns:
        Ordered {file name: glyph image}. When two glyphs share a file name
        the later glyph's pixels are kept.
    """
    if atlas.size != (document.common.scale_w, document.common.scale_h):
        logger.warning(
            f"Atlas is {atlas.width}x{atlas.height} but the font declares "
            f"{document.common.scale_w}x{document.common.scale_h}")

    regions = glyph_regions(document)
    for _, glyph in regions:
        check_atlas_bounds(glyph, atlas.width, atlas.height)

    # Load once so worker threads only read pixel data
    atlas.load()

    def crop_one(region: Tuple[str, Glyph]) -> Image.Image:
        return atlas.crop(region[1].box)

    if max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            crops = list(executor.map(crop_one, regions))
    else:
        crops = [crop_one(region) for region in regions]

    glyphs: Dict[str, Image.Image] = {}
    for (filename, glyph), crop in zip(regions, crops):
        if filename in glyphs:
            logger.warning(f"Glyph {glyph.id} ({glyph.letter!r}) overwrites {filename}")
        glyphs[filename] = crop

    logger.info(f"Cropped {len(glyphs)} glyphs from {len(document.glyphs)} records")
    return glyphs
