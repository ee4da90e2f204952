"""
Export/Import Manager - File level split, combine and compare.

Works on folders laid out the way Geometry Dash ships its fonts: an
"original" folder holding ``<name>.fnt`` and the sprite sheet named by its
``page`` line, a folder of per-glyph PNG files, and a destination folder for
the rebuilt sheet.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import List

from PIL import Image

from .errors import ResourceError
from .parser import FontDocument, parse_fnt, parse_fnt_file, read_fnt_text
from .paths import find_font_file, validate_path
from .writer import rename_page_file, write_fnt_text
from ..i18n import tr
from ..texture.combiner import combine_glyphs, glyph_loader
from ..texture.compare import compare_regions
from ..texture.splitter import split_atlas

logger = logging.getLogger(__name__)

ATLAS_EXTENSION = ".png"


def open_image(path: str) -> Image.Image:
    """Decode an image file into an RGBA image."""
    try:
        with Image.open(path) as image:
            return image.convert('RGBA')
    except OSError as e:
        raise ResourceError(tr("resource.decode_failed", path=path, error=e), path) from e


def save_image(image: Image.Image, path: str) -> None:
    """Encode an image as PNG."""
    try:
        image.save(path, "PNG")
    except (OSError, ValueError) as e:
        raise ResourceError(tr("resource.encode_failed", path=path, error=e), path) from e


def load_font(orig_folder: str) -> tuple[str, FontDocument]:
    """Find and parse the .fnt file of an original folder."""
    font_path = find_font_file(orig_folder)
    logger.info(f"Parsing font: {font_path}")
    return font_path, parse_fnt_file(font_path)


def split_font(orig_folder: str, sprites_folder: str, max_workers: int = 1) -> List[str]:
    """
    Split the original sprite sheet into one PNG per glyph.

    Args:
        orig_folder: Folder with the .fnt file and its sprite sheet
        sprites_folder: Existing folder receiving the glyph images
        max_workers: Threads used for cropping and encoding

    Returns:
        Paths of the written glyph images
    """
    validate_path(orig_folder)
    validate_path(sprites_folder)

    _, document = load_font(orig_folder)
    atlas_path = os.path.join(orig_folder, document.page.file)
    atlas = open_image(atlas_path)
    logger.info(f"Loaded atlas {atlas_path} ({atlas.width}x{atlas.height})")

    glyphs = split_atlas(atlas, document, max_workers)
    items = [(image, os.path.join(sprites_folder, filename))
             for filename, image in glyphs.items()]

    def save_one(item) -> str:
        save_image(*item)
        return item[1]

    if max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            paths = list(executor.map(save_one, items))
    else:
        paths = [save_one(item) for item in items]

    logger.info(f"Wrote {len(paths)} glyph images to {sprites_folder}")
    return paths


def combine_font(orig_folder: str, sprites_folder: str, dest_folder: str,
                 max_workers: int = 1) -> str:
    """
    Rebuild the sprite sheet from the glyph images.

    Writes ``<name>.png`` and a copy of the original ``<name>.fnt`` whose
    page points at the new sheet into dest_folder. Nothing is written when
    any glyph is missing or out of bounds, and the sheet is removed again if
    the descriptor cannot be written.

    Returns:
        Path of the rebuilt sprite sheet
    """
    validate_path(orig_folder)
    validate_path(sprites_folder)
    validate_path(dest_folder)

    font_path = find_font_file(orig_folder)
    logger.info(f"Parsing font: {font_path}")
    text = read_fnt_text(font_path)
    document = parse_fnt(text)
    canvas = combine_glyphs(document, glyph_loader(sprites_folder), max_workers)

    stem = os.path.splitext(os.path.basename(font_path))[0]
    atlas_name = stem + ATLAS_EXTENSION
    atlas_path = os.path.join(dest_folder, atlas_name)
    descriptor = rename_page_file(text, atlas_name)
    descriptor_path = os.path.join(dest_folder, os.path.basename(font_path))

    save_image(canvas, atlas_path)
    try:
        write_fnt_text(descriptor, descriptor_path)
    except OSError as e:
        os.remove(atlas_path)
        raise ResourceError(tr("resource.write_failed", path=descriptor_path, error=e),
                            descriptor_path) from e

    logger.info(f"Wrote rebuilt atlas {atlas_path}")
    return atlas_path


def compare_font(orig_folder: str, dest_folder: str) -> List[str]:
    """
    Glyph file names whose pixels differ between the original sheet and
    the sheet rebuilt into dest_folder.
    """
    validate_path(orig_folder)
    validate_path(dest_folder)

    font_path, document = load_font(orig_folder)
    reference = open_image(os.path.join(orig_folder, document.page.file))

    stem = os.path.splitext(os.path.basename(font_path))[0]
    rebuilt_path = os.path.join(dest_folder, stem + ATLAS_EXTENSION)
    validate_path(rebuilt_path, folder=False)
    candidate = open_image(rebuilt_path)

    return compare_regions(reference, candidate, document)
