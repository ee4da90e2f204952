import os

import numpy as np
import pytest
from PIL import Image

from fnt_splitter.core.parser import parse_fnt
from fnt_splitter.i18n import set_language

SAMPLE_FNT = """\
info face="Pusab" size=32 bold=0 italic=0 charset="" unicode=1 stretchH=100 smooth=1 aa=1 padding=0,0,0,0 spacing=1,1
common lineHeight=40 base=32 scaleW=64 scaleH=64 pages=1 packed=0
page id=0 file="atlas.png"
chars count=5
char id=32 x=0 y=0 width=0 height=0 xoffset=0 yoffset=30 xadvance=12 page=0 chnl=15 letter=" "
char id=65 x=2 y=2 width=10 height=12 xoffset=-1 yoffset=4 xadvance=11 page=0 chnl=15 letter="A"
char id=63 x=14 y=2 width=8 height=12 xoffset=0 yoffset=4 xadvance=9 page=0 chnl=15 letter="?"
char id=66 x=24 y=2 width=9 height=12 xoffset=0 yoffset=4 xadvance=10 page=0 chnl=15 letter="B"
char id=34 x=40 y=2 width=4 height=6 xoffset=1 yoffset=2 xadvance=6 page=0 chnl=15 letter=\"\"\"
"""

SCENARIO_FNT = """\
info face="Pusab" size=32 bold=0 italic=0 charset="" unicode=1 stretchH=100 smooth=1 aa=1 padding=0,0,0,0 spacing=1,1
common lineHeight=40 base=32 scaleW=512 scaleH=512 pages=1 packed=0
page id=0 file="atlas.png"
chars count=1
char id=65 x=10 y=20 width=30 height=40 xoffset=0 yoffset=0 xadvance=32 page=0 chnl=15 letter="A"
"""


def make_atlas(width: int, height: int) -> Image.Image:
    """RGBA image in which every pixel is different from its neighbours."""
    ys, xs = np.indices((height, width))
    pixels = np.stack([
        (xs * 7) % 256,
        (ys * 5) % 256,
        (xs + ys * 3) % 256,
        np.full_like(xs, 255),
    ], axis=-1).astype(np.uint8)
    return Image.fromarray(pixels, 'RGBA')


@pytest.fixture(autouse=True)
def english_messages():
    set_language("en")
    yield
    set_language("en")


@pytest.fixture
def document():
    return parse_fnt(SAMPLE_FNT)


@pytest.fixture
def atlas():
    return make_atlas(64, 64)


@pytest.fixture
def font_folders(tmp_path, atlas):
    """orig/ holding font.fnt and atlas.png, plus empty split/ and dest/."""
    orig = tmp_path / "orig"
    split = tmp_path / "split"
    dest = tmp_path / "dest"
    for folder in (orig, split, dest):
        folder.mkdir()
    (orig / "font.fnt").write_text(SAMPLE_FNT, encoding="utf-8")
    atlas.save(os.path.join(orig, "atlas.png"))
    return str(orig), str(split), str(dest)
