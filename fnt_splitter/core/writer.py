"""
FNT Writer - Writes a FontDocument back to BMFont text form.

Fields are emitted in the canonical BMFont order so that parsing the output
yields an equal FontDocument.
"""

import logging
import re
from typing import List

from .parser import Common, FontDocument, Glyph, Info, Page

logger = logging.getLogger(__name__)

# The file=... field of a page line, value quoted or bare
_PAGE_FILE_RE = re.compile(r'(\sfile=)("""|"[^"]*"|[^\s"]*)(?=\s|$)')


def _quote(value: str) -> str:
    # A lone double quote is written as `"""`, which the parser reads back as `"`.
    return f'"{value}"'


def _int_list(values) -> str:
    return ",".join(str(v) for v in values)


def format_info(info: Info) -> str:
    return (
        f"info face={_quote(info.face)} size={info.size} bold={info.bold} "
        f"italic={info.italic} charset={_quote(info.charset)} unicode={info.unicode} "
        f"stretchH={info.stretch_h} smooth={info.smooth} aa={info.aa} "
        f"padding={_int_list(info.padding)} spacing={_int_list(info.spacing)}"
    )


def format_common(common: Common) -> str:
    return (
        f"common lineHeight={common.line_height} base={common.base} "
        f"scaleW={common.scale_w} scaleH={common.scale_h} "
        f"pages={common.pages} packed={common.packed}"
    )


def format_char(glyph: Glyph, page_id: int) -> str:
    return (
        f"char id={glyph.id} x={glyph.x} y={glyph.y} width={glyph.width} "
        f"height={glyph.height} xoffset={glyph.xoffset} yoffset={glyph.yoffset} "
        f"xadvance={glyph.xadvance} page={page_id} chnl={glyph.chnl} "
        f"letter={_quote(glyph.letter)}"
    )


def format_page(page: Page) -> List[str]:
    """The page line, the chars line and one line per glyph."""
    lines = [
        f"page id={page.id} file={_quote(page.file)}",
        f"chars count={len(page.chars)}",
    ]
    lines.extend(format_char(glyph, page.id) for glyph in page.chars)
    return lines


def format_fnt(document: FontDocument) -> str:
    """Serialize a FontDocument to FNT text (newline terminated)."""
    lines = [format_info(document.info), format_common(document.common)]
    lines.extend(format_page(document.page))
    return "\n".join(lines) + "\n"


def rename_page_file(text: str, file_name: str) -> str:
    """
    Point the ``page`` line of FNT text at another sprite sheet.

    Only the ``file`` value of the first ``page`` line changes; every other
    line (kernings, fields this tool does not model) is kept byte for byte.
    """
    lines = text.splitlines(keepends=True)
    for index, line in enumerate(lines):
        parts = line.split(None, 1)
        if not parts or parts[0] != "page":
            continue
        renamed, count = _PAGE_FILE_RE.subn(
            lambda m: m.group(1) + _quote(file_name), line, count=1)
        if count == 0:
            raise ValueError(f"page line {index + 1} has no file field")
        lines[index] = renamed
        return "".join(lines)
    raise ValueError("no page line")


def write_fnt_text(text: str, output_path: str) -> None:
    """Write FNT text to disk as UTF-8, newlines untranslated."""
    with open(output_path, 'w', encoding='utf-8', newline='') as f:
        f.write(text)
    logger.debug(f"Wrote font descriptor: {output_path}")


def write_fnt(document: FontDocument, output_path: str) -> None:
    """
    Write a FontDocument to disk as UTF-8.

    Args:
        document: Font to serialize
        output_path: Path of the .fnt file to create
    """
    write_fnt_text(format_fnt(document), output_path)
