"""
FNT Splitter - Main entry point.

Splits a font sprite sheet into one image per glyph, and recombines edited
glyph images into a sprite sheet.

Usage:
    python -m fnt_splitter.main split [-o ORIG] [-s SPRITES]
    python -m fnt_splitter.main combine [-o ORIG] [-s SPRITES] [-d DEST]
    python -m fnt_splitter.main compare [-o ORIG] [-d DEST]
"""

import argparse
import logging
import sys
from typing import List, Optional

from .core.errors import FontSplitterError
from .core.exporter import combine_font, compare_font, split_font
from .i18n import default_language, get_available_languages, set_language, tr

DEFAULT_ORIG_FOLDER = "./orig/"
DEFAULT_SPRITES_FOLDER = "./split/"
DEFAULT_DEST_FOLDER = "./dest/"

CONSOLE_FORMAT = '[%(levelname)s] %(message)s'
FILE_FORMAT = '%(asctime)s [%(levelname)s] %(funcName)s: %(message)s'

logger = logging.getLogger('fnt_splitter')


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Console logging, plus a detailed log file when requested."""
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)
        logger.debug(f"Log file: {log_file}")


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {value}")
    return number


def _add_orig(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-o", "--orig-folder", default=DEFAULT_ORIG_FOLDER,
                        help=tr("cli.orig_help", default=DEFAULT_ORIG_FOLDER))


def _add_sprites(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-s", "--sprites-folder", default=DEFAULT_SPRITES_FOLDER,
                        help=tr("cli.sprites_help", default=DEFAULT_SPRITES_FOLDER))


def _add_dest(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-d", "--dest-folder", default=DEFAULT_DEST_FOLDER,
                        help=tr("cli.dest_help", default=DEFAULT_DEST_FOLDER))


def build_parser() -> argparse.ArgumentParser:
    """Command line parser; help texts use the current language."""
    languages = get_available_languages()
    parser = argparse.ArgumentParser(prog="fnt-splitter", description=tr("cli.description"))
    parser.add_argument("--workers", type=_positive_int, default=1,
                        help=tr("cli.workers_help"))
    parser.add_argument("--lang", choices=sorted(languages), default=default_language(),
                        help=tr("cli.lang_help", languages=", ".join(sorted(languages))))
    parser.add_argument("--log-file", help=tr("cli.log_file_help"))
    parser.add_argument("-v", "--verbose", action="store_true", help=tr("cli.verbose_help"))

    commands = parser.add_subparsers(dest="command", required=True)

    split = commands.add_parser("split", help=tr("cli.split_help"))
    _add_orig(split)
    _add_sprites(split)

    combine = commands.add_parser("combine", help=tr("cli.combine_help"))
    _add_orig(combine)
    _add_sprites(combine)
    _add_dest(combine)

    compare = commands.add_parser("compare", help=tr("cli.compare_help"))
    _add_orig(compare)
    _add_dest(compare)

    return parser


def run(args: argparse.Namespace) -> int:
    """Dispatch a parsed command. Returns the exit status."""
    if args.command == "split":
        paths = split_font(args.orig_folder, args.sprites_folder, args.workers)
        logger.info(tr("cli.split_done", count=len(paths), path=args.sprites_folder))
        return 0

    if args.command == "combine":
        atlas_path = combine_font(args.orig_folder, args.sprites_folder,
                                  args.dest_folder, args.workers)
        logger.info(tr("cli.combine_done", path=atlas_path))
        return 0

    changed = compare_font(args.orig_folder, args.dest_folder)
    if not changed:
        logger.info(tr("cli.compare_same"))
        return 0
    logger.info(tr("cli.compare_changed", count=len(changed), names=", ".join(changed)))
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    # The language has to be known before the help texts are built
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument("--lang", default=default_language())
    known, _ = pre_parser.parse_known_args(argv)
    set_language(known.lang)

    args = build_parser().parse_args(argv)
    set_language(args.lang)
    setup_logging(args.verbose, args.log_file)

    try:
        return run(args)
    except FontSplitterError as e:
        logger.error(tr("cli.failed", message=e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
