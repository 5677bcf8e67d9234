import pytest

from ascii_banner import (
    BannerLoadError,
    BannerNotFoundError,
    available_banners,
    is_banner_name,
    load_banner,
    parse_banner,
    resolve_banner_path,
)
from config import BANNER_HEIGHT


def banner_text(glyph_rows, leading_blank: bool = True) -> str:
    blocks = ["\n".join(rows) for rows in glyph_rows]
    body = "\n\n".join(blocks) + "\n"
    return ("\n" + body) if leading_blank else body


@pytest.mark.parametrize("banner", ["standard", "shadow", "thinkertoy"])
def test_bundled_banner_covers_printable_ascii(banner: str, request) -> None:
    glyphs = request.getfixturevalue(banner)
    assert len(glyphs) == 95
    assert sorted(glyphs) == [chr(code) for code in range(32, 127)]


@pytest.mark.parametrize("banner", ["standard", "shadow", "thinkertoy"])
def test_bundled_glyphs_are_rectangular(banner: str, request) -> None:
    for char, rows in request.getfixturevalue(banner).items():
        assert len(rows) == BANNER_HEIGHT, char
        assert len({len(row) for row in rows}) == 1, char


def test_standard_space_has_width(standard) -> None:
    assert len(standard[" "][0]) > 0
    assert set("".join(standard[" "])) == {" "}


def test_parse_with_and_without_leading_blank() -> None:
    rows = [["s"] * BANNER_HEIGHT, ["!"] * BANNER_HEIGHT]
    for leading in (True, False):
        glyphs = parse_banner(banner_text(rows, leading))
        assert glyphs == {" ": ["s"] * BANNER_HEIGHT, "!": ["!"] * BANNER_HEIGHT}


def test_parse_pads_ragged_rows() -> None:
    rows = [["ab", "a", "", "abc", "a", "a", "a", "a"]]
    glyphs = parse_banner(banner_text(rows))
    assert glyphs[" "] == ["ab ", "a  ", "   ", "abc", "a  ", "a  ", "a  ", "a  "]


def test_parse_ignores_incomplete_trailing_glyph() -> None:
    text = banner_text([["s"] * BANNER_HEIGHT]) + "\n".join(["x"] * 3) + "\n"
    assert list(parse_banner(text)) == [" "]


def test_parse_stops_after_tilde() -> None:
    rows = [[chr(code)] * BANNER_HEIGHT for code in range(32, 130)]
    glyphs = parse_banner(banner_text(rows))
    assert len(glyphs) == 95
    assert "~" in glyphs


def test_parse_empty_text() -> None:
    assert parse_banner("") == {}


def test_parse_crlf_line_endings() -> None:
    text = banner_text([["s"] * BANNER_HEIGHT]).replace("\n", "\r\n")
    assert parse_banner(text) == {" ": ["s"] * BANNER_HEIGHT}


def test_parse_custom_height() -> None:
    glyphs = parse_banner(banner_text([["1", "2", "3"]]), height=3)
    assert glyphs == {" ": ["1", "2", "3"]}


def test_load_banner_missing_file(tmp_path) -> None:
    with pytest.raises(BannerLoadError):
        load_banner(tmp_path / "nope.txt")


def test_load_banner_from_file(tmp_path) -> None:
    path = tmp_path / "tiny.txt"
    path.write_text(banner_text([["s"] * BANNER_HEIGHT]), encoding="utf-8")
    assert load_banner(path) == {" ": ["s"] * BANNER_HEIGHT}


def test_resolve_bundled_name() -> None:
    path = resolve_banner_path("standard")
    assert path.name == "standard.txt"
    assert path.is_file()


def test_resolve_file_path(tmp_path) -> None:
    path = tmp_path / "custom.txt"
    path.write_text("", encoding="utf-8")
    assert resolve_banner_path(str(path)) == path


def test_resolve_unknown_name() -> None:
    with pytest.raises(BannerNotFoundError) as info:
        resolve_banner_path("nonexistent")
    assert "standard" in info.value.valid
    assert "nonexistent" in str(info.value)


def test_resolve_in_custom_directory(tmp_path) -> None:
    (tmp_path / "mini.txt").write_text("", encoding="utf-8")
    assert resolve_banner_path("mini", tmp_path) == tmp_path / "mini.txt"
    assert "mini" in available_banners(tmp_path)


def test_is_banner_name() -> None:
    assert is_banner_name("standard")
    assert not is_banner_name("Hello")


def test_available_banners_lists_standard() -> None:
    assert "standard" in available_banners()


def test_bundled_banners_have_their_own_style(standard, shadow, thinkertoy) -> None:
    assert shadow["H"] != standard["H"]
    assert thinkertoy["H"] != standard["H"]
    assert shadow["H"] != thinkertoy["H"]


@pytest.mark.parametrize("name", ["standard", "shadow", "thinkertoy"])
def test_every_bundled_banner_resolves(name: str) -> None:
    assert is_banner_name(name)
    assert name in available_banners()
    assert resolve_banner_path(name).is_file()
