import numpy as np
import pytest

from fnt_splitter.core.errors import GeometryError
from fnt_splitter.core.parser import parse_fnt
from fnt_splitter.texture.splitter import glyph_regions, split_atlas

from conftest import SAMPLE_FNT, make_atlas


def test_glyph_regions_skip_zero_area(document):
    names = [name for name, _ in glyph_regions(document)]
    assert names == ["A.png", "qm.png", "B.png", "dq.png"]


def test_one_image_per_drawable_glyph(atlas, document):
    glyphs = split_atlas(atlas, document)
    assert len(glyphs) == len(document.drawable_glyphs())
    assert list(glyphs) == ["A.png", "qm.png", "B.png", "dq.png"]


def test_crops_match_atlas_pixels(atlas, document):
    glyphs = split_atlas(atlas, document)
    pixels = np.asarray(atlas)
    for name, glyph in glyph_regions(document):
        image = glyphs[name]
        assert image.size == (glyph.width, glyph.height)
        left, upper, right, lower = glyph.box
        assert np.array_equal(np.asarray(image), pixels[upper:lower, left:right])


def test_threaded_split_matches_sequential(atlas, document):
    sequential = split_atlas(atlas, document)
    threaded = split_atlas(atlas, document, max_workers=4)
    assert list(sequential) == list(threaded)
    for name in sequential:
        assert sequential[name].tobytes() == threaded[name].tobytes()


def test_glyph_outside_atlas(document):
    with pytest.raises(GeometryError) as excinfo:
        split_atlas(make_atlas(40, 64), document)
    assert "dq" not in str(excinfo.value)
    assert "34" in str(excinfo.value)


def test_glyph_below_the_atlas(document):
    with pytest.raises(GeometryError) as excinfo:
        split_atlas(make_atlas(64, 10), document)
    assert "65" in str(excinfo.value)


def test_glyph_height_past_the_bottom_edge():
    text = SAMPLE_FNT.replace("x=40 y=2 width=4 height=6", "x=40 y=60 width=4 height=6")
    with pytest.raises(GeometryError) as excinfo:
        split_atlas(make_atlas(64, 64), parse_fnt(text))
    assert "34" in str(excinfo.value)


def test_glyph_touching_the_edge_is_inside():
    text = SAMPLE_FNT.replace("x=40 y=2 width=4 height=6", "x=60 y=58 width=4 height=6")
    glyphs = split_atlas(make_atlas(64, 64), parse_fnt(text))
    assert glyphs["dq.png"].size == (4, 6)


def test_duplicate_letters_keep_the_later_glyph(atlas):
    text = SAMPLE_FNT.replace('letter="B"', 'letter="A"')
    glyphs = split_atlas(atlas, parse_fnt(text))
    assert len(glyphs) == 3
    expected = atlas.crop((24, 2, 33, 14))
    assert glyphs["A.png"].tobytes() == expected.tobytes()
