from ascii_width import WidthCalculator, get_width, get_widths, strip_ansi

RED = "\033[38;2;255;0;0m"
RESET = "\033[0m"


def test_strip_ansi() -> None:
    assert strip_ansi(f"a{RED}b{RESET}c") == "abc"
    assert strip_ansi("plain") == "plain"


def test_colored_text_width_ignores_escapes() -> None:
    assert get_width(f"{RED}Hi{RESET}") == 2
    assert get_width("") == 0


def test_wide_characters() -> None:
    assert get_width("你好") == 4


def test_control_characters_count_zero() -> None:
    calc = WidthCalculator(enable_cache=False)
    assert calc.get_width("a\x07b") == 2
    assert calc.get_stats()['control_chars_handled'] == 1


def test_get_widths() -> None:
    assert get_widths(["ab", f"{RED}abc{RESET}"]) == [2, 3]


def test_cache_hits_and_evictions() -> None:
    calc = WidthCalculator(cache_size=1, enable_cache=True)
    calc.get_width("one")
    calc.get_width("one")
    calc.get_width("two")

    stats = calc.get_stats()
    assert stats['cache_hits'] == 1
    assert stats['cache_misses'] == 2
    assert stats['cache_evictions'] == 1
    assert stats['cache_entries'] == 1
    assert stats['cache_hit_rate'] == 1 / 3


def test_clear_cache() -> None:
    calc = WidthCalculator(cache_size=4, enable_cache=True)
    calc.get_width("row")
    calc.clear_cache()
    assert calc.get_stats()['cache_entries'] == 0
