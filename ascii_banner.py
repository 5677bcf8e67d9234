#!/usr/bin/env python3
"""
🎨 ASCII Art Color - Banner Loader
==================================
Copyright (c) 2025 PNGN-Tec LLC

Banner File Loading
===================
Reads a banner file into a glyph table (character -> list of rows).

File Layout
===========
- Glyphs appear in code point order starting from ' ' (32) up to '~' (126)
- Each glyph is BANNER_HEIGHT lines
- Exactly one blank separator line between glyphs
- A single leading blank line (the canonical layout) is skipped

Rows of a glyph are right-padded with spaces to the widest row so every
row of a glyph has the same width; trailing whitespace in banner files
is easily lost by editors.

Module Interface
================
- load_banner(): Parse a banner file into a glyph table
- parse_banner(): Parse banner text already in memory
- resolve_banner_path(): Map a banner name or path to a file
- available_banners(): Names of the bundled banners
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from config import BANNER_HEIGHT, BANNER_SUFFIX, PRINTABLE_MIN, PRINTABLE_MAX, get_rendering_config
from banners import BANNER_FILES

# Configure logging
logger = logging.getLogger('ascii_banner')


class BannerError(Exception):
    """Base class for banner lookup and loading failures."""


class BannerNotFoundError(BannerError):
    """The requested banner name is not known."""

    def __init__(self, name: str, valid: List[str]):
        self.name = name
        self.valid = valid
        super().__init__(
            f"invalid banner name: {name!r}\nValid options: {', '.join(valid)}"
        )


class BannerLoadError(BannerError):
    """The banner file could not be read."""


def available_banners(banner_dir: Optional[Path] = None) -> List[str]:
    """
    Names of the bundled banners.

    Includes the registered banners plus any other *.txt file found in the
    banner directory.
    """
    banner_dir = Path(banner_dir or get_rendering_config().banner_dir)
    names = set(BANNER_FILES)
    if banner_dir.is_dir():
        names.update(path.stem for path in banner_dir.glob(f"*{BANNER_SUFFIX}"))
    return sorted(names)


def resolve_banner_path(name: str, banner_dir: Optional[Path] = None) -> Path:
    """
    Map a banner name, or a path to a banner file, to a file path.

    Args:
        name: Bundled banner name (e.g. "standard") or path to a .txt file
        banner_dir: Directory holding bundled banners (config if None)

    Returns:
        Path of the banner file

    Raises:
        BannerNotFoundError: If name is neither a known banner nor a file
    """
    banner_dir = Path(banner_dir or get_rendering_config().banner_dir)

    filename = BANNER_FILES.get(name, f"{name}{BANNER_SUFFIX}")
    candidate = banner_dir / filename
    if "/" not in name and "\\" not in name and candidate.is_file():
        return candidate

    path = Path(name)
    if path.suffix == BANNER_SUFFIX and path.is_file():
        return path

    raise BannerNotFoundError(name, available_banners(banner_dir))


def is_banner_name(name: str, banner_dir: Optional[Path] = None) -> bool:
    try:
        resolve_banner_path(name, banner_dir)
    except BannerNotFoundError:
        return False
    return True


def parse_banner(text: str, height: int = BANNER_HEIGHT) -> Dict[str, List[str]]:
    """
    Parse banner file contents into a glyph table.

    Args:
        text: Full banner file contents
        height: Rows per glyph

    Returns:
        Mapping of character to its padded rows; empty if the text holds
        no complete glyph
    """
    lines = text.splitlines()
    if lines and lines[0] == "":
        lines = lines[1:]

    glyphs: Dict[str, List[str]] = {}
    code = PRINTABLE_MIN
    start = 0
    while start + height <= len(lines) and code <= PRINTABLE_MAX:
        rows = lines[start:start + height]
        width = max(len(row) for row in rows)
        glyphs[chr(code)] = [row.ljust(width) for row in rows]

        separator = start + height
        if separator < len(lines) and lines[separator].strip() != "":
            logger.warning(f"Glyph {chr(code)!r} is not followed by a blank line")

        code += 1
        start += height + 1

    if not glyphs:
        logger.warning("Banner holds no complete glyph")
    return glyphs


def load_banner(path: Union[str, Path], height: int = BANNER_HEIGHT) -> Dict[str, List[str]]:
    """
    Read a banner file into a glyph table.

    Args:
        path: Banner file path
        height: Rows per glyph

    Returns:
        Mapping of character to its rows

    Raises:
        BannerLoadError: If the file cannot be read
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise BannerLoadError(f"cannot read banner {path}: {e}") from e

    glyphs = parse_banner(text, height)
    logger.info(f"Loaded {len(glyphs)} glyphs from {path}")
    return glyphs
