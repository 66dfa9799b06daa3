import pytest

from solong.colors import lookup_color


@pytest.mark.parametrize(
    "name, value",
    [
        ("snow", 0xFFFAFA),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("thistle4", 0x8B7B8B),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_colors(name, value):
    assert lookup_color(name) == value


def test_none_is_transparent():
    assert lookup_color("none") == -1


def test_lookup_ignores_case():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == 0xF8F8FF
    assert lookup_color("NoNe") == -1


def test_unknown_color_gives_none():
    assert lookup_color("no such colour") is None
    assert lookup_color("") is None
    assert lookup_color("gray101") is None


def test_first_entry_wins_for_repeated_names():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


@pytest.mark.parametrize("level", range(0, 101))
def test_gray_and_grey_agree(level):
    assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_gray_levels_increase():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    assert values[0] == 0x0
    assert values[-1] == 0xFFFFFF


@pytest.mark.parametrize(
    "spaced, joined",
    [
        ("ghost white", "ghostwhite"),
        ("dark orange", "darkorange"),
        ("medium purple", "mediumpurple"),
        ("dark grey", "darkgrey"),
    ],
)
def test_spaced_and_joined_names_agree(spaced, joined):
    assert lookup_color(spaced) == lookup_color(joined)


@pytest.mark.parametrize("base", ["snow", "red", "green", "blue", "yellow"])
def test_first_numbered_shade_matches_base(base):
    assert lookup_color(f"{base}1") == lookup_color(base)


@pytest.mark.parametrize("base", ["snow", "red", "green", "blue", "orchid"])
def test_numbered_shades_darken(base):
    shades = [lookup_color(f"{base}{n}") for n in range(1, 5)]
    assert shades == sorted(shades, reverse=True)
    assert lookup_color(f"{base}5") is None


def test_values_fit_in_24_bits():
    names = ["snow", "thistle", "gray100", "darkred", "skyblue3"]
    for name in names:
        value = lookup_color(name)
        assert 0 <= value <= 0xFFFFFF