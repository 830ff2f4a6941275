"""Colour palette of the user interface and the outline colour helper."""

from __future__ import annotations

import colorsys
import enum

from reformant.okcolor import RGB, linear_srgb_to_oklab, oklab_to_linear_srgb

Color = tuple[float, float, float, float]

_OUTLINE_WEIGHT = 0.9
_OUTLINE_ALPHA = 0.8


class StyleColor(enum.Enum):
    """Interface elements whose colour the palette defines."""

    TEXT = enum.auto()
    TEXT_DISABLED = enum.auto()
    WINDOW_BG = enum.auto()
    CHILD_BG = enum.auto()
    POPUP_BG = enum.auto()
    BORDER = enum.auto()
    BORDER_SHADOW = enum.auto()
    FRAME_BG = enum.auto()
    FRAME_BG_HOVERED = enum.auto()
    FRAME_BG_ACTIVE = enum.auto()
    TITLE_BG = enum.auto()
    TITLE_BG_COLLAPSED = enum.auto()
    TITLE_BG_ACTIVE = enum.auto()
    MENU_BAR_BG = enum.auto()
    SCROLLBAR_BG = enum.auto()
    SCROLLBAR_GRAB = enum.auto()
    SCROLLBAR_GRAB_HOVERED = enum.auto()
    SCROLLBAR_GRAB_ACTIVE = enum.auto()
    CHECK_MARK = enum.auto()
    SLIDER_GRAB = enum.auto()
    SLIDER_GRAB_ACTIVE = enum.auto()
    BUTTON = enum.auto()
    BUTTON_HOVERED = enum.auto()
    BUTTON_ACTIVE = enum.auto()
    HEADER = enum.auto()
    HEADER_HOVERED = enum.auto()
    HEADER_ACTIVE = enum.auto()
    RESIZE_GRIP = enum.auto()
    RESIZE_GRIP_HOVERED = enum.auto()
    RESIZE_GRIP_ACTIVE = enum.auto()
    PLOT_LINES = enum.auto()
    PLOT_LINES_HOVERED = enum.auto()
    PLOT_HISTOGRAM = enum.auto()
    PLOT_HISTOGRAM_HOVERED = enum.auto()
    TEXT_SELECTED_BG = enum.auto()
    MODAL_WINDOW_DIM_BG = enum.auto()


_LIGHT_PALETTE: dict[StyleColor, Color] = {
    StyleColor.TEXT: (0.00, 0.00, 0.00, 1.00),
    StyleColor.TEXT_DISABLED: (0.60, 0.60, 0.60, 1.00),
    StyleColor.WINDOW_BG: (0.94, 0.94, 0.94, 0.94),
    StyleColor.CHILD_BG: (0.00, 0.00, 0.00, 0.00),
    StyleColor.POPUP_BG: (1.00, 1.00, 1.00, 0.94),
    StyleColor.BORDER: (0.00, 0.00, 0.00, 0.39),
    StyleColor.BORDER_SHADOW: (1.00, 1.00, 1.00, 0.10),
    StyleColor.FRAME_BG: (1.00, 1.00, 1.00, 0.94),
    StyleColor.FRAME_BG_HOVERED: (0.26, 0.59, 0.98, 0.40),
    StyleColor.FRAME_BG_ACTIVE: (0.26, 0.59, 0.98, 0.67),
    StyleColor.TITLE_BG: (0.96, 0.96, 0.96, 1.00),
    StyleColor.TITLE_BG_COLLAPSED: (1.00, 1.00, 1.00, 0.51),
    StyleColor.TITLE_BG_ACTIVE: (0.82, 0.82, 0.82, 1.00),
    StyleColor.MENU_BAR_BG: (0.86, 0.86, 0.86, 1.00),
    StyleColor.SCROLLBAR_BG: (0.98, 0.98, 0.98, 0.53),
    StyleColor.SCROLLBAR_GRAB: (0.69, 0.69, 0.69, 1.00),
    StyleColor.SCROLLBAR_GRAB_HOVERED: (0.59, 0.59, 0.59, 1.00),
    StyleColor.SCROLLBAR_GRAB_ACTIVE: (0.49, 0.49, 0.49, 1.00),
    StyleColor.CHECK_MARK: (0.26, 0.59, 0.98, 1.00),
    StyleColor.SLIDER_GRAB: (0.24, 0.52, 0.88, 1.00),
    StyleColor.SLIDER_GRAB_ACTIVE: (0.26, 0.59, 0.98, 1.00),
    StyleColor.BUTTON: (0.26, 0.59, 0.98, 0.40),
    StyleColor.BUTTON_HOVERED: (0.26, 0.59, 0.98, 1.00),
    StyleColor.BUTTON_ACTIVE: (0.06, 0.53, 0.98, 1.00),
    StyleColor.HEADER: (0.26, 0.59, 0.98, 0.31),
    StyleColor.HEADER_HOVERED: (0.26, 0.59, 0.98, 0.80),
    StyleColor.HEADER_ACTIVE: (0.26, 0.59, 0.98, 1.00),
    StyleColor.RESIZE_GRIP: (1.00, 1.00, 1.00, 0.50),
    StyleColor.RESIZE_GRIP_HOVERED: (0.26, 0.59, 0.98, 0.67),
    StyleColor.RESIZE_GRIP_ACTIVE: (0.26, 0.59, 0.98, 0.95),
    StyleColor.PLOT_LINES: (0.39, 0.39, 0.39, 1.00),
    StyleColor.PLOT_LINES_HOVERED: (1.00, 0.43, 0.35, 1.00),
    StyleColor.PLOT_HISTOGRAM: (0.90, 0.70, 0.00, 1.00),
    StyleColor.PLOT_HISTOGRAM_HOVERED: (1.00, 0.60, 0.00, 1.00),
    StyleColor.TEXT_SELECTED_BG: (0.26, 0.59, 0.98, 0.35),
    StyleColor.MODAL_WINDOW_DIM_BG: (0.20, 0.20, 0.20, 0.35),
}


def light_palette() -> dict[StyleColor, Color]:
    """Return a fresh copy of the base light palette as RGBA tuples."""
    return dict(_LIGHT_PALETTE)


def _darken(color: Color, alpha: float) -> Color:
    r, g, b, w = color
    h, s, v = colorsys.rgb_to_hsv(r, g, b)
    if s < 0.1:
        v = 1.0 - v
    r, g, b = colorsys.hsv_to_rgb(h, s, v)
    if w < 1.0:
        w *= alpha
    return (r, g, b, w)


def _fade(color: Color, alpha: float) -> Color:
    r, g, b, w = color
    if w < 1.0:
        return (r * alpha, g * alpha, b * alpha, w * alpha)
    return color


def style_colors(
    dark: bool = True, alpha: float = 1.0, viewports_enabled: bool = False
) -> dict[StyleColor, Color]:
    """Build the interface palette.

    The dark variant inverts the brightness of nearly grey colours and
    scales translucent alphas by ``alpha``; the light variant scales every
    component of translucent colours by ``alpha``. With platform viewports
    enabled, window backgrounds become opaque.
    """
    transform = _darken if dark else _fade
    colors = {key: transform(color, alpha) for key, color in _LIGHT_PALETTE.items()}
    if viewports_enabled:
        r, g, b, _ = colors[StyleColor.WINDOW_BG]
        colors[StyleColor.WINDOW_BG] = (r, g, b, 1.0)
    return colors


def set_outline_color(rgb: tuple[float, float, float]) -> Color:
    """Return an outline colour contrasting with the linear sRGB colour ``rgb``.

    The Oklab lightness is pulled towards the middle and halved, keeping the
    hue; the outline is slightly translucent.
    """
    lab = linear_srgb_to_oklab(RGB(*rgb))
    target = 1.0 if lab.L > 0.5 else 0.0
    lightness = (_OUTLINE_WEIGHT * lab.L + (1 - _OUTLINE_WEIGHT) * target) / 2
    out = oklab_to_linear_srgb(lab._replace(L=lightness))
    return (out.r, out.g, out.b, _OUTLINE_ALPHA)