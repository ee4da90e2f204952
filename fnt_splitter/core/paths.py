"""
Path helpers - Folder validation and font file discovery.
"""

import os

from .errors import ResourceError
from ..i18n import tr

FONT_EXTENSION = ".fnt"


def validate_path(path: str, folder: bool = True) -> None:
    """Raise ResourceError unless path exists and is a folder (or a file)."""
    if not os.path.exists(path):
        raise ResourceError(tr("resource.path_missing", path=path), path)
    if folder and not os.path.isdir(path):
        raise ResourceError(tr("resource.not_a_folder", path=path), path)
    if not folder and not os.path.isfile(path):
        raise ResourceError(tr("resource.not_a_file", path=path), path)


def find_font_file(folder: str) -> str:
    """Path of the first .fnt file in a folder, by name."""
    for name in sorted(os.listdir(folder)):
        path = os.path.join(folder, name)
        if name.lower().endswith(FONT_EXTENSION) and os.path.isfile(path):
            return path
    raise ResourceError(tr("resource.no_font_file", path=folder), folder)
