import os

import pytest
from PIL import Image

from fnt_splitter.core.errors import GrammarError, ResourceError
from fnt_splitter.core.exporter import combine_font, compare_font, split_font
from fnt_splitter.core.parser import parse_fnt_file


def test_split_font_writes_one_png_per_glyph(font_folders):
    orig, split, _ = font_folders
    paths = split_font(orig, split)
    assert sorted(os.listdir(split)) == ["A.png", "B.png", "dq.png", "qm.png"]
    assert sorted(paths) == sorted(os.path.join(split, n) for n in os.listdir(split))
    with Image.open(os.path.join(split, "A.png")) as image:
        assert image.size == (10, 12)


def test_threaded_split_font(font_folders):
    orig, split, _ = font_folders
    assert len(split_font(orig, split, max_workers=3)) == 4


def test_combine_font_writes_atlas_and_descriptor(font_folders):
    orig, split, dest = font_folders
    split_font(orig, split)
    atlas_path = combine_font(orig, split, dest)
    assert atlas_path == os.path.join(dest, "font.png")
    assert sorted(os.listdir(dest)) == ["font.fnt", "font.png"]
    with Image.open(atlas_path) as image:
        assert image.size == (64, 64)
    rebuilt = parse_fnt_file(os.path.join(dest, "font.fnt"))
    assert rebuilt.page.file == "font.png"
    assert rebuilt.glyphs == parse_fnt_file(os.path.join(orig, "font.fnt")).glyphs


def test_combine_font_writes_nothing_when_a_glyph_is_missing(font_folders):
    orig, split, dest = font_folders
    split_font(orig, split)
    os.remove(os.path.join(split, "B.png"))
    with pytest.raises(ResourceError) as excinfo:
        combine_font(orig, split, dest)
    assert "B.png" in str(excinfo.value)
    assert os.listdir(dest) == []


def test_combine_font_keeps_kernings_and_extra_fields(font_folders):
    orig, split, dest = font_folders
    font_file = os.path.join(orig, "font.fnt")
    with open(font_file, "r", encoding="utf-8") as f:
        original = f.read().replace("packed=0", "packed=0 alphaChnl=1")
    original += "kernings count=1\nkerning first=65 second=66 amount=-2\n"
    with open(font_file, "w", encoding="utf-8", newline="") as f:
        f.write(original)

    split_font(orig, split)
    combine_font(orig, split, dest)
    with open(os.path.join(dest, "font.fnt"), "r", encoding="utf-8", newline="") as f:
        rebuilt = f.read()
    assert rebuilt == original.replace('file="atlas.png"', 'file="font.png"')
    assert "kerning first=65 second=66 amount=-2" in rebuilt
    assert "alphaChnl=1" in rebuilt


def test_combine_font_removes_atlas_when_descriptor_fails(font_folders):
    orig, split, dest = font_folders
    split_font(orig, split)
    # A folder where the descriptor should go makes the write fail
    os.mkdir(os.path.join(dest, "font.fnt"))
    with pytest.raises(ResourceError) as excinfo:
        combine_font(orig, split, dest)
    assert "font.fnt" in str(excinfo.value)
    assert os.listdir(dest) == ["font.fnt"]


def test_compare_font(font_folders):
    orig, split, dest = font_folders
    split_font(orig, split)
    combine_font(orig, split, dest)
    assert compare_font(orig, dest) == []

    edited = Image.new("RGBA", (9, 12), (255, 255, 255, 255))
    edited.save(os.path.join(split, "B.png"))
    combine_font(orig, split, dest)
    assert compare_font(orig, dest) == ["B.png"]


def test_compare_font_without_rebuilt_atlas(font_folders):
    orig, _, dest = font_folders
    with pytest.raises(ResourceError):
        compare_font(orig, dest)


def test_missing_folder(font_folders, tmp_path):
    orig, _, _ = font_folders
    with pytest.raises(ResourceError) as excinfo:
        split_font(orig, str(tmp_path / "nowhere"))
    assert "nowhere" in str(excinfo.value)


def test_folder_argument_is_a_file(font_folders):
    orig, split, _ = font_folders
    with pytest.raises(ResourceError):
        split_font(os.path.join(orig, "font.fnt"), split)


def test_no_font_file(tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    with pytest.raises(ResourceError) as excinfo:
        split_font(str(empty), str(tmp_path))
    assert ".fnt" in str(excinfo.value)


def test_missing_atlas(font_folders):
    orig, split, _ = font_folders
    os.remove(os.path.join(orig, "atlas.png"))
    with pytest.raises(ResourceError):
        split_font(orig, split)
    assert os.listdir(split) == []


def test_malformed_font(font_folders):
    orig, split, _ = font_folders
    with open(os.path.join(orig, "font.fnt"), "w", encoding="utf-8") as f:
        f.write('info face="Pusab"\n')
    with pytest.raises(GrammarError):
        split_font(orig, split)
