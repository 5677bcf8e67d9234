#!/usr/bin/env python3
"""
🎨 ASCII Art Color - Substring Colorizer
========================================
Copyright (c) 2025 PNGN-Tec LLC

Column Coloring System
======================
Highlights occurrences of a substring inside rendered banner art by
wrapping the art columns of the matching characters in ANSI codes.

Two coordinate spaces are involved: character indexes in the input line
and column offsets inside each rendered row. A width table (one glyph
width per input character) links them; a single forward walk with a
running offset turns each character index into its column span.

Technical Implementation
========================
- find_matches(): per-character match mask, union of all occurrences
- colorize(): splices the color prefix at the start of each run of
  matched characters and the reset at its end, once per run
- The same mask and widths apply to every row of a block, so color
  boundaries line up vertically across the glyph height

Module Interface
================
- find_matches(): Match mask for a substring in a line
- char_widths(): Width table for a line from the glyph table
- colorize(): Color a block of rows given a mask and widths
- apply_color(): Guarded find_matches() + colorize()
- render_colored(): Render and color multi-line text in one call
"""

import logging
from typing import List, Optional

from config import ANSI, BANNER_HEIGHT
from ascii_render import GlyphTable, join_blocks, lookup_glyph, render_blocks, split_lines

# Configure logging
logger = logging.getLogger('ascii_coloring')

RESET = ANSI.RESET

# ============================================================================
# POSITION MAPPING
# ============================================================================

def find_matches(line: str, substring: str) -> List[bool]:
    """
    Mark every character of line covered by an occurrence of substring.

    Matching is exact and case-sensitive; overlapping occurrences merge.
    An empty substring marks every position.

    Example:
        >>> find_matches("hello", "ll")
        [False, False, True, True, False]
    """
    if substring == "":
        return [True] * len(line)

    mask = [False] * len(line)
    size = len(substring)

    for i in range(len(line) - size + 1):
        if line[i:i + size] == substring:
            for j in range(i, i + size):
                mask[j] = True

    return mask


def char_widths(line: str, glyphs: GlyphTable, height: int = BANNER_HEIGHT) -> List[int]:
    """Width table for line: the row width of each character's glyph."""
    return [len(lookup_glyph(char, glyphs, height)[0]) for char in line]


# ============================================================================
# COLUMN COLORIZER
# ============================================================================

def colorize_line(row: str, mask: List[bool], widths: List[int],
                  color_prefix: str, reset: str = RESET) -> str:
    """Color one rendered row; see colorize() for the rules."""
    parts: List[str] = []
    offset = 0
    last = len(mask) - 1
    in_run = False

    for idx, width in enumerate(widths):
        if offset >= len(row):
            break

        end = min(offset + width, len(row))
        matched = mask[idx]

        if matched and (idx == 0 or not mask[idx - 1]):
            parts.append(color_prefix)
            in_run = True

        parts.append(row[offset:end])

        if matched and (idx == last or not mask[idx + 1]):
            parts.append(reset)
            in_run = False

        offset = end

    # Short row: do not let the color bleed past it
    if in_run:
        parts.append(reset)

    if offset < len(row):
        parts.append(row[offset:])

    return "".join(parts)


def colorize(art_lines: List[str], mask: List[bool], widths: List[int],
             color_prefix: str, reset: str = RESET) -> List[str]:
    """
    Wrap matched character columns of every row in ANSI codes.

    For character index idx with width w the column span is
    [offset, offset + w), clipped to the row. A prefix goes before the
    span when idx starts a run of True mask entries and a reset goes after
    it when idx ends one, so each run is wrapped once. Columns past the
    last mapped one are copied unchanged.

    Args:
        art_lines: Rows of one rendered block
        mask: Match mask over the source line
        widths: Width table over the source line
        color_prefix: ANSI sequence that starts the color
        reset: ANSI sequence that ends it

    Returns:
        Colored rows (art_lines itself when there is nothing to map)
    """
    if not art_lines or not widths:
        return art_lines
    if len(mask) < len(widths):
        raise ValueError(
            f"mask covers {len(mask)} characters but widths cover {len(widths)}"
        )

    return [colorize_line(row, mask, widths, color_prefix, reset) for row in art_lines]


def apply_color(art_lines: List[str], text: str, substring: str,
                color_prefix: str, widths: List[int], reset: str = RESET) -> List[str]:
    """
    Color occurrences of substring in the block rendered from text.

    Returns art_lines unchanged when there is no art, no width table, no
    text, or an empty substring.
    """
    if not art_lines or not widths or not text or substring == "":
        return art_lines

    mask = find_matches(text, substring)
    return colorize(art_lines, mask, widths, color_prefix, reset)


def render_colored(text: str, glyphs: GlyphTable, color_prefix: str,
                   substring: Optional[str] = None,
                   height: Optional[int] = None) -> str:
    """
    Render text and color matches of substring in every line.

    Args:
        text: Text to render, lines separated by "\\n"
        glyphs: Mapping of character to its glyph rows
        color_prefix: ANSI sequence that starts the color
        substring: Text to highlight; None colors every character
        height: Rows per glyph (BANNER_HEIGHT if None)

    Returns:
        Colored art rows joined by "\\n"

    Raises:
        RenderError: Same conditions as ascii_render.render()
    """
    if height is None:
        height = BANNER_HEIGHT
    blocks = render_blocks(text, glyphs, height)
    if not blocks:
        return ""

    colored = []
    for line, block in zip(split_lines(text), blocks):
        widths = char_widths(line, glyphs, height)
        if substring is None:
            colored.append(colorize(block, [True] * len(line), widths, color_prefix))
        else:
            colored.append(apply_color(block, line, substring, color_prefix, widths))

    logger.debug(f"Colored {len(colored)} block(s), substring={substring!r}")
    return join_blocks(colored)
