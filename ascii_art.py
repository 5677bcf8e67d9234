#!/usr/bin/env python3
"""
🎨 ASCII Art Color - Command Line Interface
===========================================
Copyright (c) 2025 PNGN-Tec LLC

Usage
=====
    ascii-art [--color=<spec>] [SUBSTRING] STRING [BANNER]

- STRING is rendered with BANNER (default: standard); a literal "\\n"
  in STRING starts a new line
- --color=<spec> colors the whole STRING, or only the occurrences of
  SUBSTRING when one is given. It must be the first argument.
- <spec> is a color name, #RRGGBB, or rgb(r,g,b)

Exit Codes
==========
- 0: Success
- 1: Usage error (bad arguments, unknown banner name)
- 2: Banner file could not be loaded
- 3: Text could not be rendered with the banner
- 4: Invalid color specification

Examples
========
    ascii-art "Hello\\nWorld"
    ascii-art "Hello" standard
    ascii-art --color=red "Hello"
    ascii-art --color="#ff8800" ll "Hello World"
    ascii-art --color="rgb(0,128,255)" World "Hello World" standard
"""

import argparse
import logging
import shutil
import sys
from dataclasses import dataclass
from typing import List, Optional

from config import AsciiArtConfig, get_config
from ascii_banner import BannerLoadError, BannerNotFoundError, is_banner_name, load_banner, resolve_banner_path
from ascii_color import ColorError, parse_color
from ascii_coloring import render_colored
from ascii_render import RenderError, render
from ascii_width import get_widths

# Configure logging
logger = logging.getLogger('ascii_art')

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_BANNER = 2
EXIT_RENDER = 3
EXIT_COLOR = 4

COLOR_FLAG = "--color"
MAX_ARGS = 4
USAGE = "Usage: ascii-art [OPTION] [STRING] [BANNER]\n\nEX: ascii-art --color=<color> <substring to be colored> \"something\""


class UsageError(Exception):
    """Command-line arguments do not follow the expected format."""

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail
        super().__init__(f"{detail}\n{USAGE}" if detail else USAGE)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


@dataclass
class RenderRequest:
    """Parsed command line."""
    text: str
    banner: str
    color: Optional[str] = None
    substring: Optional[str] = None


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="ascii-art", description="Render text as banner ASCII art",
                             allow_abbrev=False)
    parser.add_argument(COLOR_FLAG, dest="color", default=None,
                        help="Color for the text or SUBSTRING (name, #RRGGBB, rgb(r,g,b))")
    parser.add_argument("args", nargs="+", metavar="ARG",
                        help="[SUBSTRING] STRING [BANNER]")
    return parser


def _check_color_flag(argv: List[str]):
    for position, arg in enumerate(argv):
        if not arg.startswith(COLOR_FLAG):
            continue
        if position != 0:
            raise UsageError(f"{COLOR_FLAG} must be the first argument")
        if not arg.startswith(f"{COLOR_FLAG}="):
            raise UsageError(f"expected {COLOR_FLAG}=<color>")
        if arg == f"{COLOR_FLAG}=":
            raise UsageError("missing color value")


def parse_args(argv: List[str], default_banner: str = "standard") -> RenderRequest:
    """
    Parse and validate command-line arguments.

    Args:
        argv: Arguments without the program name
        default_banner: Banner used when none is given

    Returns:
        RenderRequest with the text already unescaped

    Raises:
        UsageError: If the arguments do not follow the expected format
    """
    if not argv or len(argv) > MAX_ARGS:
        raise UsageError()
    _check_color_flag(argv)

    # Only the first argument may be an option; later ones are text even
    # when they start with "-"
    if argv[0].startswith(f"{COLOR_FLAG}="):
        argv = [argv[0], "--", *argv[1:]]
    elif not argv[0].startswith("-"):
        argv = ["--", *argv]

    ns = _build_parser().parse_args(argv)
    positionals = list(ns.args)
    substring = None
    banner = default_banner

    if ns.color is None:
        if len(positionals) > 2:
            raise UsageError("too many arguments")
        text = positionals[0]
        if len(positionals) == 2:
            banner = positionals[1]
    else:
        if len(positionals) == 3 or (len(positionals) == 2 and is_banner_name(positionals[-1])):
            banner = positionals.pop()
        if len(positionals) == 2:
            substring, text = positionals
        else:
            text = positionals[0]

    return RenderRequest(
        text=text.replace("\\n", "\n"),
        banner=banner,
        color=ns.color,
        substring=substring,
    )


def configure_logging(app_config: AsciiArtConfig):
    logging.basicConfig(
        level=app_config.effective_log_level,
        format="%(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )


def _warn_if_too_wide(art: str):
    columns = shutil.get_terminal_size().columns
    widest = max(get_widths(art.split("\n")), default=0)
    if widest > columns:
        logger.warning(f"Rendered art is {widest} columns wide; terminal has {columns}")


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    app_config = get_config()
    configure_logging(app_config)

    try:
        request = parse_args(argv, app_config.rendering.default_banner)
    except UsageError as e:
        print(e, file=sys.stderr)
        return EXIT_USAGE

    color = None
    if request.color is not None:
        try:
            color = parse_color(request.color)
        except ColorError as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_COLOR

    try:
        banner_path = resolve_banner_path(request.banner, app_config.rendering.banner_dir)
    except BannerNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    height = app_config.rendering.banner_height
    try:
        glyphs = load_banner(banner_path, height)
    except BannerLoadError as e:
        print(f"Error loading banner file: {e}", file=sys.stderr)
        return EXIT_BANNER

    try:
        if color is None:
            art = render(request.text, glyphs, height)
        else:
            art = render_colored(request.text, glyphs, color.ansi, request.substring, height)
    except RenderError as e:
        print(f"Error rendering text: {e}", file=sys.stderr)
        return EXIT_RENDER

    if art:
        _warn_if_too_wide(art)
        print(art)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
