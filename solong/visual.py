"""Conversion of 0xRRGGBB colours to pixel values of a TrueColor visual."""

from __future__ import annotations

from typing import Sequence


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return (offset, bits) for red, green and blue as one flat 6-tuple.

    The offset is the position of a mask's lowest set bit and bits is the
    length of the run of set bits that starts there.
    """
    shifts: list[int] = []
    for mask in (red_mask, green_mask, blue_mask):
        if mask <= 0:
            raise ValueError(f"colour mask must be a positive bit mask, got {mask!r}")
        offset = (mask & -mask).bit_length() - 1
        run = mask >> offset
        bits = (run ^ (run + 1)).bit_length() - 1
        shifts.extend((offset, bits))
    return tuple(shifts)


def convert_color(color: int, depth: int, shifts: Sequence[int]) -> int:
    """Return the pixel value for ``color`` on a visual of the given depth.

    Visuals of 24 bits or more take the colour unchanged; shallower ones
    pack each 8-bit channel into the bit fields described by ``shifts``.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - shifts[1])) << shifts[0])
        + ((green >> (16 - shifts[3])) << shifts[2])
        + ((blue >> (16 - shifts[5])) << shifts[4])
    )