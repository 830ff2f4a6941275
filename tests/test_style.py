import pytest

from reformant.okcolor import RGB, linear_srgb_to_oklab
from reformant.style import (
    StyleColor,
    light_palette,
    set_outline_color,
    style_colors,
)


def test_light_palette_pins_source_values():
    palette = light_palette()
    assert palette[StyleColor.TEXT] == (0.00, 0.00, 0.00, 1.00)
    assert palette[StyleColor.CHECK_MARK] == (0.26, 0.59, 0.98, 1.00)
    assert set(palette) == set(StyleColor)


def test_light_palette_is_a_copy():
    palette = light_palette()
    palette[StyleColor.TEXT] = (1.0, 1.0, 1.0, 1.0)
    assert light_palette()[StyleColor.TEXT] == (0.00, 0.00, 0.00, 1.00)


def test_light_style_with_full_alpha_equals_palette():
    assert style_colors(dark=False, alpha=1.0) == light_palette()


def test_light_style_fades_only_translucent_colours():
    palette = light_palette()
    colors = style_colors(dark=False, alpha=0.5)
    for key, (r, g, b, w) in palette.items():
        if w < 1.0:
            assert colors[key] == pytest.approx((r * 0.5, g * 0.5, b * 0.5, w * 0.5))
        else:
            assert colors[key] == (r, g, b, w)


def test_dark_style_inverts_grey_text():
    colors = style_colors(dark=True)
    assert colors[StyleColor.TEXT] == pytest.approx((1.0, 1.0, 1.0, 1.0))


def test_dark_style_inverts_brightness_of_greys():
    palette = light_palette()
    colors = style_colors(dark=True, alpha=1.0)
    old = palette[StyleColor.TITLE_BG_ACTIVE]
    new = colors[StyleColor.TITLE_BG_ACTIVE]
    assert max(new[:3]) == pytest.approx(1.0 - max(old[:3]))
    assert new[3] == old[3]


def test_dark_style_keeps_saturated_colours():
    palette = light_palette()
    colors = style_colors(dark=True, alpha=1.0)
    assert colors[StyleColor.CHECK_MARK] == pytest.approx(palette[StyleColor.CHECK_MARK])


def test_dark_style_scales_only_translucent_alpha():
    palette = light_palette()
    colors = style_colors(dark=True, alpha=0.5)
    for key, color in palette.items():
        expected = color[3] * 0.5 if color[3] < 1.0 else color[3]
        assert colors[key][3] == pytest.approx(expected)


@pytest.mark.parametrize("dark", [True, False])
def test_viewports_make_window_background_opaque(dark):
    colors = style_colors(dark=dark, alpha=0.5, viewports_enabled=True)
    assert colors[StyleColor.WINDOW_BG][3] == 1.0
    plain = style_colors(dark=dark, alpha=0.5, viewports_enabled=False)
    assert plain[StyleColor.WINDOW_BG][3] < 1.0


def test_outline_alpha_is_fixed():
    assert set_outline_color((0.2, 0.4, 0.6))[3] == pytest.approx(0.8)


def test_outline_of_black_stays_black():
    r, g, b, _ = set_outline_color((0.0, 0.0, 0.0))
    assert (r, g, b) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)


def test_outline_of_white_is_mid_grey():
    r, g, b, _ = set_outline_color((1.0, 1.0, 1.0))
    assert r == pytest.approx(g, abs=1e-4)
    assert g == pytest.approx(b, abs=1e-4)
    assert linear_srgb_to_oklab(RGB(r, g, b)).L == pytest.approx(0.5, abs=1e-4)


def test_outline_is_darker_than_light_input():
    rgb = (0.8, 0.7, 0.3)
    out = set_outline_color(rgb)
    assert linear_srgb_to_oklab(RGB(*out[:3])).L < linear_srgb_to_oklab(RGB(*rgb)).L