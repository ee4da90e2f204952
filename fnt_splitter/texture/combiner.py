"""
Glyph Combiner - Rebuilds a font atlas from individual glyph images.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Tuple

from PIL import Image

from ..core.errors import GeometryError, ResourceError
from ..core.parser import FontDocument, Glyph
from ..i18n import tr
from .splitter import glyph_regions

logger = logging.getLogger(__name__)

# Loads the image stored under a glyph file name
GlyphLoader = Callable[[str], Image.Image]


def glyph_loader(folder: str) -> GlyphLoader:
    """
    Loader reading glyph images from a folder.

    Missing files and decode failures raise ResourceError naming the file.
    """
    def load(filename: str) -> Image.Image:
        path = os.path.join(folder, filename)
        if not os.path.isfile(path):
            raise ResourceError(tr("resource.missing_glyph", path=path), path)
        try:
            with Image.open(path) as image:
                return image.convert('RGBA')
        except OSError as e:
            raise ResourceError(tr("resource.decode_failed", path=path, error=e), path) from e

    return load


def check_canvas_bounds(filename: str, glyph: Glyph, image: Image.Image,
                        canvas_width: int, canvas_height: int) -> None:
    """
    Raise GeometryError if the glyph's declared rectangle, or the image
    pasted at its origin, leaves the canvas.
    """
    width = max(glyph.width, image.width)
    height = max(glyph.height, image.height)
    if glyph.x + width > canvas_width or glyph.y + height > canvas_height:
        raise GeometryError(tr(
            "geometry.outside_canvas", filename=filename, x=glyph.x, y=glyph.y,
            width=width, height=height,
            canvas_width=canvas_width, canvas_height=canvas_height))


def combine_glyphs(document: FontDocument, load_glyph: GlyphLoader,
                   max_workers: int = 1) -> Image.Image:
    """
    Paste every drawable glyph's image onto a blank atlas.

    Images are pasted in file order with a straight copy, so later glyphs
    win where rectangles overlap. Nothing is composited until every image
    has been loaded and checked.

    Args:
        document: Parsed font giving the atlas size and glyph positions
        load_glyph: Returns the image for a glyph file name
        max_workers: Threads used for loading; 1 loads sequentially

    Returns:
        RGBA image of size (scaleW, scaleH)
    """
    canvas_width = document.common.scale_w
    canvas_height = document.common.scale_h
    regions = glyph_regions(document)

    def load_one(region: Tuple[str, Glyph]) -> Image.Image:
        image = load_glyph(region[0])
        return image if image.mode == 'RGBA' else image.convert('RGBA')

    if max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            images: List[Image.Image] = list(executor.map(load_one, regions))
    else:
        images = [load_one(region) for region in regions]

    for (filename, glyph), image in zip(regions, images):
        check_canvas_bounds(filename, glyph, image, canvas_width, canvas_height)
        if image.size != (glyph.width, glyph.height):
            logger.warning(
                f"{filename} is {image.width}x{image.height}, "
                f"glyph {glyph.id} declares {glyph.width}x{glyph.height}")

    canvas = Image.new('RGBA', (canvas_width, canvas_height), (0, 0, 0, 0))
    for (_, glyph), image in zip(regions, images):
        canvas.paste(image, (glyph.x, glyph.y))

    logger.info(f"Composited {len(images)} glyphs onto a {canvas_width}x{canvas_height} atlas")
    return canvas
