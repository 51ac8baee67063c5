"""
Shared utilities for typographic feature tools.

Logging setup, font file checks, and OpenType table readers.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Set

from fontTools.ttLib import TTFont, TTLibError
from rich.logging import RichHandler

FONT_EXTENSIONS = {".ttf", ".otf", ".ttc", ".woff", ".woff2"}

# fontTools is chatty about tables it does not fully understand
logging.getLogger("fontTools").setLevel(logging.ERROR)


def get_logger(name: str) -> logging.Logger:
    """Module logger under the package namespace."""
    if not name.startswith("typographic_features"):
        name = f"typographic_features.{name}"
    return logging.getLogger(name)


def configure_logging(verbose: bool = False):
    """Route package logs through rich (DEBUG when verbose)."""
    logger = logging.getLogger("typographic_features")
    logger.handlers = [RichHandler(show_path=False, markup=False)]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


log = get_logger(__name__)


def validate_font_file(path: Path) -> bool:
    """
    Basic font file validation.

    Checks if file exists and has a font extension.

    Args:
        path: Path to font file

    Returns:
        True if file appears to be a font file
    """
    if not path.is_file():
        return False
    return path.suffix.lower() in FONT_EXTENSIONS


@contextmanager
def open_font(path: Optional[Path]) -> Iterator[Optional[TTFont]]:
    """
    Open a font for the duration of a block.

    Yields None when the path is missing or fontTools cannot read it.
    """
    if path is None:
        yield None
        return

    try:
        font = TTFont(str(path), lazy=True, fontNumber=0)
    except (OSError, TTLibError) as e:
        log.warning("Cannot read font %s: %s", path, e)
        yield None
        return

    try:
        yield font
    finally:
        font.close()


def get_feature_tags(font: TTFont) -> Set[str]:
    """Get set of feature tags declared in GSUB and GPOS."""
    existing = set()
    for table_tag in ("GSUB", "GPOS"):
        if table_tag not in font:
            continue
        table = font[table_tag].table
        if getattr(table, "FeatureList", None):
            for frec in table.FeatureList.FeatureRecord:
                existing.add(frec.FeatureTag)
    return existing


def get_language_system_tags(font: TTFont) -> List[str]:
    """Get language system tags from GSUB/GPOS script lists, in table order."""
    languages: List[str] = []
    for table_tag in ("GSUB", "GPOS"):
        if table_tag not in font:
            continue
        table = font[table_tag].table
        if not getattr(table, "ScriptList", None):
            continue
        for script_record in table.ScriptList.ScriptRecord:
            script = script_record.Script
            for lang_record in getattr(script, "LangSysRecord", None) or []:
                tag = lang_record.LangSysTag.strip()
                if tag not in languages:
                    languages.append(tag)
    return languages
