import pytest

from ascii_banner import load_banner, resolve_banner_path
from config import BANNER_HEIGHT


def make_glyph(char: str, width: int = 2):
    return [char * width] * BANNER_HEIGHT


@pytest.fixture
def letter_a():
    return {"A": [f"A{i}" for i in range(1, BANNER_HEIGHT + 1)]}


@pytest.fixture
def two_wide():
    # Every glyph is its character repeated twice on all rows.
    return {ch: make_glyph(ch) for ch in " HelloWrd"}


@pytest.fixture(scope="session")
def standard():
    return load_banner(resolve_banner_path("standard"))


@pytest.fixture(scope="session")
def shadow():
    return load_banner(resolve_banner_path("shadow"))


@pytest.fixture(scope="session")
def thinkertoy():
    return load_banner(resolve_banner_path("thinkertoy"))
