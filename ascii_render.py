#!/usr/bin/env python3
"""
🎨 ASCII Art Color - Banner Renderer
====================================
Copyright (c) 2025 PNGN-Tec LLC

Text-to-Art Rendering
=====================
Converts plain text into multi-line banner art using a glyph table that
maps each printable character to a fixed-height block of rows.

Rendering Rules
===============
- Input is split on line breaks; a single trailing break adds nothing
- Each non-empty line becomes a block of BANNER_HEIGHT rows
- Each empty line (from consecutive breaks) becomes one empty output line
- Rows are joined with line breaks, never ending with one
- Empty input, or input that is a single line break, renders to ""

Validation Order
================
1. Every character except the line break must be printable ASCII (32-126)
2. Empty input / lone line break short-circuits to ""
3. The glyph table must not be empty
4. Each character is looked up lazily while rows are assembled; the first
   missing or malformed glyph aborts the whole render

Module Interface
================
- render(): Render text to a single art string
- render_blocks(): Render text to one block of rows per input line
- split_lines(): Split text into input lines
- RenderError and its subclasses
"""

import logging
from typing import Dict, List, Optional

from config import BANNER_HEIGHT, LINE_BREAK, PRINTABLE_MIN, PRINTABLE_MAX

# Configure logging
logger = logging.getLogger('ascii_render')

GlyphTable = Dict[str, List[str]]

# ============================================================================
# ERRORS
# ============================================================================

class RenderError(Exception):
    """Base class for all rendering failures."""


class UnprintableCharacterError(RenderError):
    """Input holds a character outside the printable ASCII range."""

    def __init__(self, char: str, index: int):
        self.char = char
        self.index = index
        super().__init__(f"not printable character {char!r} at index {index}")


class EmptyGlyphTableError(RenderError):
    """The glyph table has no entries."""

    def __init__(self):
        super().__init__("banner is empty")


class MissingGlyphError(RenderError):
    """A character of the input has no glyph in the table."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"the character {char!r} does not exist in the banner")


class MalformedGlyphError(RenderError):
    """A glyph does not have the expected number of rows."""

    def __init__(self, char: str, rows: int, expected: int):
        self.char = char
        self.rows = rows
        self.expected = expected
        super().__init__(
            f"the character {char!r} has {rows} rows, expected {expected}"
        )


# ============================================================================
# HELPERS
# ============================================================================

def is_printable(char: str) -> bool:
    return PRINTABLE_MIN <= ord(char) <= PRINTABLE_MAX


def validate_text(text: str):
    """
    Check that text holds only printable ASCII and line breaks.

    Raises:
        UnprintableCharacterError: On the first offending character
    """
    for index, char in enumerate(text):
        if char == LINE_BREAK:
            continue
        if not is_printable(char):
            raise UnprintableCharacterError(char, index)


def split_lines(text: str) -> List[str]:
    """
    Split text into input lines.

    A single trailing line break does not produce a trailing empty line,
    so "a\\n" gives ["a"] while "a\\n\\nb" gives ["a", "", "b"].
    """
    lines = text.split(LINE_BREAK)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def lookup_glyph(char: str, glyphs: GlyphTable, height: int = BANNER_HEIGHT) -> List[str]:
    """
    Fetch and check the glyph rows for a single character.

    Raises:
        MissingGlyphError: If the table has no entry for char
        MalformedGlyphError: If the entry does not have exactly height rows
    """
    rows = glyphs.get(char)
    if rows is None:
        raise MissingGlyphError(char)
    if len(rows) != height:
        raise MalformedGlyphError(char, len(rows), height)
    return rows


def render_line(line: str, glyphs: GlyphTable, height: int = BANNER_HEIGHT) -> List[str]:
    """
    Render one input line to its block of rows.

    An empty line gives [""]; otherwise exactly height rows are returned,
    row i being row i of every glyph concatenated left to right.
    """
    if not line:
        return [""]

    rows: List[List[str]] = [[] for _ in range(height)]
    for char in line:
        glyph = lookup_glyph(char, glyphs, height)
        for i in range(height):
            rows[i].append(glyph[i])

    return ["".join(parts) for parts in rows]


# ============================================================================
# RENDERING
# ============================================================================

def _check_inputs(text: str, glyphs: GlyphTable) -> bool:
    """Run the up-front checks; returns False when there is nothing to draw."""
    validate_text(text)
    if text == "" or text == LINE_BREAK:
        return False
    if not glyphs:
        raise EmptyGlyphTableError()
    return True


def render_blocks(text: str, glyphs: GlyphTable,
                  height: Optional[int] = None) -> List[List[str]]:
    """
    Render text to one block of rows per input line.

    Args:
        text: Text to render, lines separated by "\\n"
        glyphs: Mapping of character to its glyph rows
        height: Rows per glyph (BANNER_HEIGHT if None)

    Returns:
        List of blocks; each block is a list of rows. Empty input lines
        yield [""].

    Raises:
        RenderError: See module docstring for the validation order
    """
    if height is None:
        height = BANNER_HEIGHT
    if not _check_inputs(text, glyphs):
        return []

    blocks = [render_line(line, glyphs, height) for line in split_lines(text)]
    logger.debug(f"Rendered {len(blocks)} block(s) for {len(text)} characters")
    return blocks


def render(text: str, glyphs: GlyphTable, height: Optional[int] = None) -> str:
    """
    Render text into a banner art string.

    Args:
        text: Text to render, lines separated by "\\n"
        glyphs: Mapping of character to its glyph rows
        height: Rows per glyph (BANNER_HEIGHT if None)

    Returns:
        Art rows joined by "\\n" with no trailing line break

    Raises:
        RenderError: On unprintable input, an empty table, or a missing or
            malformed glyph. No partial output is produced.

    Example:
        >>> table = {"A": ["A1", "A2", "A3", "A4", "A5", "A6", "A7", "A8"]}
        >>> render("A", table).splitlines()[0]
        'A1'
    """
    blocks = render_blocks(text, glyphs, height)
    return join_blocks(blocks)


def join_blocks(blocks: List[List[str]]) -> str:
    return LINE_BREAK.join(row for block in blocks for row in block)
