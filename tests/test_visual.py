import pytest

from solong.visual import convert_color, rgb_shifts

WIN_SIZE = 242


def _color_map_1(x, y, w=WIN_SIZE, h=WIN_SIZE):
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def _color_map_2(x, y, w=WIN_SIZE, h=WIN_SIZE):
    return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


SAMPLE_POINTS = [(0, 0), (20, 20), (121, 60), (241, 241), (5, 200)]


def test_shifts_for_24_bit_masks():
    assert rgb_shifts(0xFF0000, 0x00FF00, 0x0000FF) == (16, 8, 8, 8, 0, 8)


def test_shifts_for_565_masks():
    assert rgb_shifts(0xF800, 0x07E0, 0x001F) == (11, 5, 5, 6, 0, 5)


@pytest.mark.parametrize("mask", [0, -1])
def test_shifts_reject_empty_mask(mask):
    with pytest.raises(ValueError):
        rgb_shifts(mask, 0xFF00, 0xFF)


@pytest.mark.parametrize("x,y", SAMPLE_POINTS)
def test_deep_visual_keeps_color(x, y):
    shifts = rgb_shifts(0xFF0000, 0xFF00, 0xFF)
    for color in (_color_map_1(x, y), _color_map_2(x, y)):
        assert convert_color(color, 24, shifts) == color
        assert convert_color(color, 32, shifts) == color


@pytest.mark.parametrize("x,y", SAMPLE_POINTS)
def test_shallow_visual_with_8_bit_channels_keeps_color(x, y):
    shifts = rgb_shifts(0xFF0000, 0xFF00, 0xFF)
    color = _color_map_1(x, y)
    assert convert_color(color, 16, shifts) == color


def test_string_colors_from_test_program():
    shifts = rgb_shifts(0xFF0000, 0xFF00, 0xFF)
    assert convert_color(0xFF99FF, 16, shifts) == 0xFF99FF
    assert convert_color(0x00FFFF, 16, shifts) == 0x00FFFF


def test_white_fills_all_masks_at_16_bits():
    masks = (0xF800, 0x07E0, 0x001F)
    shifts = rgb_shifts(*masks)
    assert convert_color(0xFFFFFF, 16, shifts) == masks[0] | masks[1] | masks[2]


def test_black_is_zero_at_16_bits():
    shifts = rgb_shifts(0xF800, 0x07E0, 0x001F)
    assert convert_color(0x000000, 16, shifts) == 0


@pytest.mark.parametrize("x,y", SAMPLE_POINTS)
def test_shallow_pixel_stays_within_masks(x, y):
    masks = (0xF800, 0x07E0, 0x001F)
    shifts = rgb_shifts(*masks)
    pixel = convert_color(_color_map_1(x, y), 16, shifts)
    assert pixel & ~(masks[0] | masks[1] | masks[2]) == 0