import pytest

from clockface.display.colors import ClockColors, parse_color


def test_defaults_are_rgba():
    colors = ClockColors.defaults()
    assert colors.background == (0xD3, 0xD3, 0xD3, 0xFF)
    assert colors.hour_hand == (0x37, 0x00, 0xB3, 0xFF)
    assert all(len(c) == 4 for c in colors)


@pytest.mark.parametrize("value,expected", [
    ("#102030", (16, 32, 48, 255)),
    ("#10203040", (16, 32, 48, 64)),
    ("red", (255, 0, 0, 255)),
    ([1, 2, 3], (1, 2, 3, 255)),
    ((1, 2, 3, 4), (1, 2, 3, 4)),
])
def test_parse_color(value, expected):
    assert parse_color(value) == expected


@pytest.mark.parametrize("value", ["not-a-color", [1, 2], [0, 0, 300], 42])
def test_parse_color_rejects_garbage(value):
    with pytest.raises(ValueError):
        parse_color(value)


def test_from_config_accepts_aliases_and_keeps_defaults():
    colors = ClockColors.from_config({"tickMark": "#010203", "border": "white"})
    assert colors.tick_mark == (1, 2, 3, 255)
    assert colors.border == (255, 255, 255, 255)
    assert colors.background == ClockColors.defaults().background


def test_invalid_entry_falls_back(caplog):
    colors = ClockColors.from_config({"shadow": "nope", "mystery": "#000000"})
    assert colors.shadow == ClockColors.defaults().shadow
    assert "Invalid color for 'shadow'" in caplog.text
    assert "unknown color key 'mystery'" in caplog.text


def test_style_only_recolours_hands():
    base = ClockColors.defaults()
    styled = base.with_style({
        "hourHandColor": "#FF0000",
        "second_hand_color": "#00FF00",
        "background": "#0000FF",
    })
    assert styled.hour_hand == (255, 0, 0, 255)
    assert styled.second_hand == (0, 255, 0, 255)
    assert styled.minute_hand == base.minute_hand
    assert styled.background == base.background
    # base instance untouched
    assert base.hour_hand == (0x37, 0x00, 0xB3, 0xFF)


def test_empty_config():
    assert ClockColors.from_config(None) == ClockColors.defaults()
    assert ClockColors.defaults().with_style(None) == ClockColors.defaults()


@pytest.mark.parametrize("value", ["red", ["#FF0000"], 7])
def test_non_mapping_config_keeps_defaults(value, caplog):
    assert ClockColors.from_config(value) == ClockColors.defaults()
    assert ClockColors.defaults().with_style(value) == ClockColors.defaults()
    assert "Expected a mapping of colors" in caplog.text
