import pytest

from widgetlab.prompter import (
    DARK,
    KEY_DOWN,
    KEY_PAGE_DOWN,
    KEY_PAGE_UP,
    KEY_SPACE,
    KEY_UP,
    LIGHT,
    ColorMode,
    Prompter,
    read_paragraphs,
)


def test_read_paragraphs_splits_and_pads(tmp_path):
    path = tmp_path / "speech.txt"
    path.write_text("first\nsecond", encoding="utf-8")
    assert read_paragraphs(path) == ["first", "second"] + [""] * 10


def test_read_paragraphs_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_paragraphs(tmp_path / "nothing.txt")


def test_defaults():
    p = Prompter()
    assert (p.scroll_y, p.focus_bar_y, p.text_width, p.font_size) == (0, 170, 550, 35)
    assert p.autoscroll is False
    assert p.colors == DARK


def test_color_modes():
    assert DARK.background == (0, 0, 0, 255)
    assert LIGHT.focusbar == (0xFF, 0, 0, 0x66)
    assert ColorMode(*(DARK.background, DARK.foreground, DARK.focusbar)) == DARK


def test_scroll_uses_font_size_and_clamps():
    p = Prompter()
    p.scroll(2)
    assert p.scroll_y == p.font_size * 2
    p.scroll(-10)
    assert p.scroll_y == 0


def test_press_toggles_autoscroll():
    p = Prompter()
    p.press()
    assert p.autoscroll is True
    p.press()
    assert p.autoscroll is False


def test_space_restarts_speed_when_stopped():
    p = Prompter(autospeed=0)
    p.key(KEY_SPACE, shift=True)
    assert p.autoscroll is True
    assert p.autospeed == 5


def test_focus_bar_moves_up_and_down():
    p = Prompter()
    start = p.focus_bar_y
    p.key("D")
    p.key("D", shift=True)
    p.key("U")
    assert p.focus_bar_y == start + 5


@pytest.mark.parametrize("name", ["K", KEY_UP, KEY_PAGE_UP])
def test_scroll_up_never_below_zero(name):
    p = Prompter()
    p.key(name, shift=True)
    assert p.scroll_y == 0


def test_down_keys_scroll_down():
    p = Prompter()
    p.key("J")
    after_j = p.scroll_y
    p.key(KEY_DOWN)
    assert p.scroll_y == 2 * after_j
    p.key(KEY_UP)
    assert p.scroll_y == after_j


def test_page_down_goes_further_than_arrow_and_page_up_undoes_most():
    p = Prompter()
    p.key(KEY_PAGE_DOWN)
    paged = p.scroll_y
    q = Prompter()
    q.key(KEY_DOWN)
    assert paged > q.scroll_y
    p.key(KEY_PAGE_UP)
    assert p.scroll_y == q.scroll_y


def test_faster_and_slower():
    p = Prompter()
    p.key("F")
    assert p.autoscroll is True
    assert p.autospeed == 2
    p.key("S", shift=True)
    assert p.autospeed == 0
    assert p.autoscroll is False


def test_font_size_and_width_keys_are_symmetric():
    p = Prompter()
    size, width = p.font_size, p.text_width
    p.key("+", shift=True)
    p.key("W")
    assert p.font_size > size and p.text_width > width
    p.key("-", shift=True)
    p.key("N")
    assert (p.font_size, p.text_width) == (size, width)


def test_color_key_toggles():
    p = Prompter()
    p.key("C")
    assert p.colors == LIGHT
    p.key("C")
    assert p.colors == DARK


def test_unknown_key_changes_nothing():
    p = Prompter()
    p.key("Z", shift=True)
    assert p == Prompter()


def test_advance():
    p = Prompter()
    assert p.advance() is False
    assert p.scroll_y == 0
    p.autoscroll = True
    p.autospeed = 3
    assert p.advance() is True
    assert p.scroll_y == 3


def test_advance_clamps_negative_speed():
    p = Prompter(autoscroll=True, autospeed=-4)
    p.advance()
    assert p.autospeed == 0
    assert p.scroll_y == 0


def test_margin_width():
    p = Prompter()
    assert p.margin_width(p.text_width) == 0
    assert p.margin_width(p.text_width + 300) == 100


def test_focus_bar_rectangle():
    p = Prompter()
    left, top, right, bottom = p.focus_bar(650)
    assert (left, top, right) == (0, 170, 650)
    assert bottom - top == int(p.font_size * 1.5)