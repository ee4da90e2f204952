"""
FNT Parser - BMFont text descriptor parser.

Parses the line oriented ``.fnt`` files that describe a font sprite sheet
(one ``info``, ``common``, ``page`` and ``chars`` line followed by exactly
``count`` ``char`` lines) into an immutable FontDocument.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .errors import GrammarError, ResourceError
from ..i18n import tr

logger = logging.getLogger(__name__)

UINT32_MAX = 0xFFFFFFFF
INT32_MIN = -0x80000000
INT32_MAX = 0x7FFFFFFF

PADDING_LENGTH = 4  # top, right, bottom, left
SPACING_LENGTH = 2  # horizontal, vertical

# key=value, where value is a quoted string or a run of non-space characters.
# `"""` is a quoted double quote (letter="""), the only quote a value may hold.
_FIELD_RE = re.compile(r'([A-Za-z_][A-Za-z0-9_]*)=("""|"[^"]*"|[^\s"]*)(?=\s|$)')
_TOKEN_RE = re.compile(r'\S+')
_UNSIGNED_RE = re.compile(r'[0-9]+')
_SIGNED_RE = re.compile(r'-?[0-9]+')
_INT_LIST_RE = re.compile(r'[0-9]+(?:,[0-9]+)*')

# Digits of the widest 32-bit value; longer runs never reach int()
MAX_DIGITS = 10


@dataclass(frozen=True)
class Info:
    """The ``info`` line: how the font was generated."""
    face: str
    size: int
    bold: int
    italic: int
    charset: str
    unicode: int
    stretch_h: int  # stretchH, percent
    smooth: int
    aa: int
    padding: Tuple[int, int, int, int]  # top, right, bottom, left
    spacing: Tuple[int, int]  # horizontal, vertical


@dataclass(frozen=True)
class Common:
    """The ``common`` line: metrics shared by every glyph."""
    line_height: int
    base: int
    scale_w: int  # atlas width
    scale_h: int  # atlas height
    pages: int
    packed: int


@dataclass(frozen=True)
class Glyph:
    """One ``char`` record: where a character sits in the atlas."""
    id: int
    x: int
    y: int
    width: int
    height: int
    xoffset: int
    yoffset: int
    xadvance: int
    chnl: int
    letter: str

    @property
    def rect(self) -> Tuple[int, int, int, int]:
        """(x, y, width, height) in atlas pixels."""
        return self.x, self.y, self.width, self.height

    @property
    def box(self) -> Tuple[int, int, int, int]:
        """(left, upper, right, lower) box as used by Image.crop."""
        return self.x, self.y, self.x + self.width, self.y + self.height

    @property
    def is_drawable(self) -> bool:
        """Zero-area glyphs such as the space have no pixels."""
        return self.width > 0 and self.height > 0


@dataclass(frozen=True)
class Page:
    """The ``page`` line together with the glyphs it owns."""
    id: int
    file: str
    char_count: int
    chars: Tuple[Glyph, ...]


@dataclass(frozen=True)
class FontDocument:
    """Complete parsed FNT file."""
    info: Info
    common: Common
    page: Page

    @property
    def glyphs(self) -> Tuple[Glyph, ...]:
        return self.page.chars

    def drawable_glyphs(self) -> List[Glyph]:
        """Glyphs with pixels, in file order."""
        return [glyph for glyph in self.page.chars if glyph.is_drawable]


class FNTParser:
    """Parser for BMFont text descriptors."""

    def __init__(self):
        self._lines: List[str] = []
        self._pos = 0

    def parse(self, text: str) -> FontDocument:
        """Parse a whole descriptor. Any problem raises GrammarError."""
        self._lines = text.splitlines()
        self._pos = 0

        info = self._parse_info(*self._next_line("info"))
        common = self._parse_common(*self._next_line("common"))
        page_id, page_file = self._parse_page(*self._next_line("page"))
        count = self._parse_chars_count(*self._next_line("chars"))

        chars = []
        for _ in range(count):
            line_no, body = self._next_char_line(count, len(chars))
            chars.append(self._parse_char(line_no, body))
        self._check_no_extra_chars(count)

        page = Page(id=page_id, file=page_file, char_count=count, chars=tuple(chars))
        logger.debug(f"Parsed {len(chars)} char records for page {page.id} ({page.file})")
        return FontDocument(info=info, common=common, page=page)

    # ------------------------------------------------------------------
    # Line scanning
    # ------------------------------------------------------------------

    def _peek(self) -> Optional[Tuple[int, str, str]]:
        """Next non-blank line as (line_no, keyword, body), without consuming it."""
        while self._pos < len(self._lines):
            parts = self._lines[self._pos].split(None, 1)
            if parts:
                body = parts[1] if len(parts) > 1 else ""
                return self._pos + 1, parts[0], body
            self._pos += 1
        return None

    def _next_line(self, section: str) -> Tuple[int, str]:
        peeked = self._peek()
        if peeked is None:
            raise GrammarError(tr("grammar.expected_line", section=section), section)
        line_no, keyword, body = peeked
        if keyword != section:
            raise GrammarError(
                tr("grammar.unexpected_line", section=section, found=keyword, line=line_no),
                section, line=line_no)
        self._pos += 1
        return line_no, body

    def _next_char_line(self, expected: int, found: int) -> Tuple[int, str]:
        peeked = self._peek()
        if peeked is None or peeked[1] != "char":
            line_no = peeked[0] if peeked else None
            raise GrammarError(
                tr("grammar.too_few_chars", expected=expected, found=found),
                "char", line=line_no)
        self._pos += 1
        return peeked[0], peeked[2]

    def _check_no_extra_chars(self, expected: int) -> None:
        while True:
            peeked = self._peek()
            if peeked is None:
                return
            line_no, keyword, _ = peeked
            if keyword == "char":
                raise GrammarError(
                    tr("grammar.too_many_chars", expected=expected, line=line_no),
                    "char", line=line_no)
            self._pos += 1

    # ------------------------------------------------------------------
    # Field extraction
    # ------------------------------------------------------------------

    def _fields(self, section: str, line_no: int, body: str) -> Dict[str, str]:
        """Split a line body into {key: raw value}. Raw strings keep their quotes."""
        fields = {}
        pos = 0
        while True:
            token = _TOKEN_RE.search(body, pos)
            if token is None:
                return fields
            match = _FIELD_RE.match(body, token.start())
            if match is None:
                raise GrammarError(
                    tr("grammar.malformed_field", section=section, line=line_no,
                       token=token.group()),
                    section, line=line_no)
            key, raw = match.group(1), match.group(2)
            if key in fields:
                raise GrammarError(
                    tr("grammar.duplicate_field", section=section, line=line_no, field=key),
                    section, field=key, line=line_no)
            fields[key] = raw
            pos = match.end()

    def _raw(self, section: str, line_no: int, fields: Dict[str, str], name: str) -> str:
        if name not in fields:
            raise GrammarError(
                tr("grammar.missing_field", section=section, line=line_no, field=name),
                section, field=name, line=line_no)
        return fields[name]

    def _string(self, section: str, line_no: int, fields: Dict[str, str], name: str) -> str:
        raw = self._raw(section, line_no, fields, name)
        if len(raw) < 2 or not (raw.startswith('"') and raw.endswith('"')):
            raise GrammarError(
                tr("grammar.not_string", section=section, line=line_no, field=name, value=raw),
                section, field=name, line=line_no)
        if raw == '"""':
            return '"'
        return raw[1:-1]

    def _integer(self, section: str, line_no: int, name: str, raw: str,
                 signed: bool) -> int:
        pattern = _SIGNED_RE if signed else _UNSIGNED_RE
        if not pattern.fullmatch(raw):
            key = "grammar.not_signed" if signed else "grammar.not_unsigned"
            raise GrammarError(
                tr(key, section=section, line=line_no, field=name, value=raw),
                section, field=name, line=line_no)
        digits = raw.lstrip('-').lstrip('0') or '0'
        low, high = (INT32_MIN, INT32_MAX) if signed else (0, UINT32_MAX)
        value = None
        if len(digits) <= MAX_DIGITS:
            value = -int(digits) if raw.startswith('-') else int(digits)
        if value is None or not low <= value <= high:
            raise GrammarError(
                tr("grammar.out_of_range", section=section, line=line_no, field=name, value=raw),
                section, field=name, line=line_no)
        return value

    def _unsigned(self, section: str, line_no: int, fields: Dict[str, str], name: str) -> int:
        raw = self._raw(section, line_no, fields, name)
        return self._integer(section, line_no, name, raw, signed=False)

    def _signed(self, section: str, line_no: int, fields: Dict[str, str], name: str) -> int:
        raw = self._raw(section, line_no, fields, name)
        return self._integer(section, line_no, name, raw, signed=True)

    def _int_list(self, section: str, line_no: int, fields: Dict[str, str], name: str,
                  length: int) -> Tuple[int, ...]:
        raw = self._raw(section, line_no, fields, name)
        if not _INT_LIST_RE.fullmatch(raw):
            raise GrammarError(
                tr("grammar.not_list", section=section, line=line_no, field=name, value=raw),
                section, field=name, line=line_no)
        values = tuple(self._integer(section, line_no, name, item, signed=False)
                       for item in raw.split(","))
        if len(values) != length:
            raise GrammarError(
                tr("grammar.list_length", section=section, line=line_no, field=name,
                   expected=length, count=len(values)),
                section, field=name, line=line_no)
        return values

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def _parse_info(self, line_no: int, body: str) -> Info:
        s = "info"
        f = self._fields(s, line_no, body)
        return Info(
            face=self._string(s, line_no, f, "face"),
            size=self._signed(s, line_no, f, "size"),
            bold=self._unsigned(s, line_no, f, "bold"),
            italic=self._unsigned(s, line_no, f, "italic"),
            charset=self._string(s, line_no, f, "charset"),
            unicode=self._unsigned(s, line_no, f, "unicode"),
            stretch_h=self._unsigned(s, line_no, f, "stretchH"),
            smooth=self._unsigned(s, line_no, f, "smooth"),
            aa=self._unsigned(s, line_no, f, "aa"),
            padding=self._int_list(s, line_no, f, "padding", PADDING_LENGTH),
            spacing=self._int_list(s, line_no, f, "spacing", SPACING_LENGTH),
        )

    def _parse_common(self, line_no: int, body: str) -> Common:
        s = "common"
        f = self._fields(s, line_no, body)
        common = Common(
            line_height=self._unsigned(s, line_no, f, "lineHeight"),
            base=self._unsigned(s, line_no, f, "base"),
            scale_w=self._unsigned(s, line_no, f, "scaleW"),
            scale_h=self._unsigned(s, line_no, f, "scaleH"),
            pages=self._unsigned(s, line_no, f, "pages"),
            packed=self._unsigned(s, line_no, f, "packed"),
        )
        for name, value in (("scaleW", common.scale_w), ("scaleH", common.scale_h)):
            if value == 0:
                raise GrammarError(
                    tr("grammar.zero_size", section=s, line=line_no, field=name),
                    s, field=name, line=line_no)
        return common

    def _parse_page(self, line_no: int, body: str) -> Tuple[int, str]:
        s = "page"
        f = self._fields(s, line_no, body)
        return self._unsigned(s, line_no, f, "id"), self._string(s, line_no, f, "file")

    def _parse_chars_count(self, line_no: int, body: str) -> int:
        f = self._fields("chars", line_no, body)
        return self._unsigned("chars", line_no, f, "count")

    def _parse_char(self, line_no: int, body: str) -> Glyph:
        s = "char"
        f = self._fields(s, line_no, body)
        if "page" in f:
            # Single page only; the owning page id is validated and dropped.
            self._unsigned(s, line_no, f, "page")
        return Glyph(
            id=self._unsigned(s, line_no, f, "id"),
            x=self._unsigned(s, line_no, f, "x"),
            y=self._unsigned(s, line_no, f, "y"),
            width=self._unsigned(s, line_no, f, "width"),
            height=self._unsigned(s, line_no, f, "height"),
            xoffset=self._signed(s, line_no, f, "xoffset"),
            yoffset=self._signed(s, line_no, f, "yoffset"),
            xadvance=self._unsigned(s, line_no, f, "xadvance"),
            chnl=self._unsigned(s, line_no, f, "chnl"),
            letter=self._string(s, line_no, f, "letter"),
        )


def parse_fnt(text: str) -> FontDocument:
    """Convenience function to parse FNT text."""
    return FNTParser().parse(text)


def read_fnt_text(file_path: str) -> str:
    """Read a .fnt file as UTF-8, dropping a leading byte order mark."""
    try:
        with open(file_path, 'r', encoding='utf-8-sig') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceError(tr("resource.read_failed", path=file_path, error=e),
                            str(file_path)) from e


def parse_fnt_file(file_path: str) -> FontDocument:
    """Read a .fnt file as UTF-8 and parse it."""
    return parse_fnt(read_fnt_text(file_path))
