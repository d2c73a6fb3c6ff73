"""Ready-made foil gradients."""
import math

from foil.geometry import Alignment, TOP_LEFT, BOTTOM_RIGHT, CENTER, CENTER_LEFT, CENTER_RIGHT
from foil.gradients import (
    LinearGradient, RadialGradient, SweepGradient, TileMode, hex_color,
)


RAINBOW = (
    hex_color(0xFFFF0000),
    hex_color(0xFFFFFF00),
    hex_color(0xFF00FF00),
    hex_color(0xFF00FFFF),
    hex_color(0xFF0000FF),
    hex_color(0xFFFF00FF),
    hex_color(0xFFFF0000),
)

# Colors repeat so the gradient tiles cleanly as it is translated.
LINEAR_LOOPING = LinearGradient(
    colors=(
        hex_color(0x66FF0000),
        hex_color(0x66FFFF00),
        hex_color(0x6600FF00),
        hex_color(0x6600FFFF),
        hex_color(0x660000FF),
        hex_color(0x66FF00FF),
        hex_color(0x66FF0000),
    ),
    begin=TOP_LEFT,
    end=Alignment(-0.2, -0.2),
    tile_mode=TileMode.MIRROR,
)

LINEAR_RAINBOW = LinearGradient(colors=RAINBOW, begin=TOP_LEFT, end=BOTTOM_RIGHT)

SITAR = LinearGradient(
    colors=(
        hex_color(0xAAFFB300),
        hex_color(0xAA3D5AFE),
        hex_color(0xAA00E5FF),
        hex_color(0xAAFFB300),
    ),
    stops=(0.0, 0.3, 0.7, 1.0),
    begin=CENTER_LEFT,
    end=CENTER_RIGHT,
    tile_mode=TileMode.REPEATED,
)

GOLD = LinearGradient(
    colors=(
        hex_color(0xFFBF953F),
        hex_color(0xFFFCF6BA),
        hex_color(0xFFB38728),
        hex_color(0xFFFBF5B7),
        hex_color(0xFFAA771C),
    ),
    begin=TOP_LEFT,
    end=BOTTOM_RIGHT,
    tile_mode=TileMode.MIRROR,
)

SILVER = LinearGradient(
    colors=(
        hex_color(0xFF757F9A),
        hex_color(0xFFD7DDE8),
        hex_color(0xFF757F9A),
    ),
    begin=TOP_LEFT,
    end=Alignment(0.0, 0.0),
    tile_mode=TileMode.MIRROR,
)

PEACOCK = SweepGradient(
    colors=RAINBOW,
    center=CENTER,
    start_angle=0.0,
    end_angle=2.0 * math.pi,
)

HALO = RadialGradient(
    colors=(
        hex_color(0x00FFFFFF),
        hex_color(0x88FFFFFF),
        hex_color(0x00FFFFFF),
    ),
    stops=(0.4, 0.7, 1.0),
    center=CENTER,
    radius=0.6,
    tile_mode=TileMode.CLAMP,
)

FOILS = {
    'linear_looping': LINEAR_LOOPING,
    'linear_rainbow': LINEAR_RAINBOW,
    'sitar':          SITAR,
    'gold':           GOLD,
    'silver':         SILVER,
    'peacock':        PEACOCK,
    'halo':           HALO,
}
