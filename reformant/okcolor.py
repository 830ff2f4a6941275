"""Oklab colour space, gamut clipping and the Okhsl / Okhsv colour models.

Conversions between sRGB (gamma encoded), linear sRGB and Oklab, together
with the perceptual Okhsl and Okhsv pickers built on top of them.
Arithmetic follows IEEE rules: divisions by zero give infinities or NaN
rather than raising, so degenerate inputs propagate NaN like the reference
formulas do.
"""

from __future__ import annotations

import math
from typing import NamedTuple

_FLT_MAX = 3.4028234663852886e38
_EPS = 0.00001


class Lab(NamedTuple):
    """A colour in Oklab coordinates."""

    L: float
    a: float
    b: float


class RGB(NamedTuple):
    """A colour with red, green and blue components."""

    r: float
    g: float
    b: float


class HSV(NamedTuple):
    """A colour in Okhsv coordinates, each in [0, 1]."""

    h: float
    s: float
    v: float


class HSL(NamedTuple):
    """A colour in Okhsl coordinates, each in [0, 1]."""

    h: float
    s: float
    l: float  # noqa: E741


class LC(NamedTuple):
    """Lightness and chroma, typically of a gamut cusp."""

    L: float
    C: float


class ST(NamedTuple):
    """Cusp encoded as S = C/L and T = C/(1 - L)."""

    S: float
    T: float


class Cs(NamedTuple):
    """Reference chroma values used by Okhsl."""

    C_0: float
    C_mid: float
    C_max: float


def _div(n: float, d: float) -> float:
    """Divide with IEEE semantics instead of raising on a zero divisor."""
    try:
        return n / d
    except ZeroDivisionError:
        if n == 0 or math.isnan(n):
            return math.nan
        return math.copysign(math.inf, n) * math.copysign(1.0, d)


def _fmax(x: float, y: float) -> float:
    if math.isnan(x):
        return y
    if math.isnan(y):
        return x
    return max(x, y)


def _fmin(x: float, y: float) -> float:
    if math.isnan(x):
        return y
    if math.isnan(y):
        return x
    return min(x, y)


def _cbrt(x: float) -> float:
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


def clamp(x: float, lo: float, hi: float) -> float:
    """Limit ``x`` to the closed range [lo, hi]."""
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x


def sgn(x: float) -> float:
    """Return 1.0, -1.0 or 0.0 according to the sign of ``x``."""
    return float(0.0 < x) - float(x < 0.0)


def srgb_transfer_function(a: float) -> float:
    """Encode a linear sRGB component with the sRGB gamma curve."""
    if 0.0031308 >= a:
        return 12.92 * a
    return 1.055 * a ** 0.4166666666666667 - 0.055


def srgb_transfer_function_inv(a: float) -> float:
    """Decode a gamma-encoded sRGB component to linear light."""
    if 0.04045 < a:
        return ((a + 0.055) / 1.055) ** 2.4
    return a / 12.92


def linear_srgb_to_oklab(c: RGB) -> Lab:
    """Convert linear sRGB to Oklab."""
    l = 0.4122214708 * c.r + 0.5363325363 * c.g + 0.0514459929 * c.b  # noqa: E741
    m = 0.2119034982 * c.r + 0.6806995451 * c.g + 0.1073969566 * c.b
    s = 0.0883024619 * c.r + 0.2817188376 * c.g + 0.6299787005 * c.b

    l_ = _cbrt(l)
    m_ = _cbrt(m)
    s_ = _cbrt(s)

    return Lab(
        0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_,
        1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_,
        0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_,
    )


def oklab_to_linear_srgb(c: Lab) -> RGB:
    """Convert Oklab to linear sRGB."""
    l_ = c.L + 0.3963377774 * c.a + 0.2158037573 * c.b
    m_ = c.L - 0.1055613458 * c.a - 0.0638541728 * c.b
    s_ = c.L - 0.0894841775 * c.a - 1.2914855480 * c.b

    l = l_ * l_ * l_  # noqa: E741
    m = m_ * m_ * m_
    s = s_ * s_ * s_

    return RGB(
        +4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s,
        -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s,
        -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s,
    )


def _lms_coefficients(a: float, b: float) -> tuple[float, float, float]:
    k_l = +0.3963377774 * a + 0.2158037573 * b
    k_m = -0.1055613458 * a - 0.0638541728 * b
    k_s = -0.0894841775 * a - 1.2914855480 * b
    return k_l, k_m, k_s


def compute_max_saturation(a: float, b: float) -> float:
    """Maximum saturation S = C/L inside sRGB for a normalised hue (a, b)."""
    if -1.88170328 * a - 0.80936493 * b > 1:
        # Red goes out of gamut first.
        k0, k1, k2, k3, k4 = 1.19086277, 1.76576728, 0.59662641, 0.75515197, 0.56771245
        wl, wm, ws = 4.0767416621, -3.3077115913, 0.2309699292
    elif 1.81444104 * a - 1.19445276 * b > 1:
        # Green goes out of gamut first.
        k0, k1, k2, k3, k4 = 0.73956515, -0.45954404, 0.08285427, 0.12541070, 0.14503204
        wl, wm, ws = -1.2684380046, 2.6097574011, -0.3413193965
    else:
        # Blue goes out of gamut first.
        k0, k1, k2, k3, k4 = 1.35733652, -0.00915799, -1.15130210, -0.50559606, 0.00692167
        wl, wm, ws = -0.0041960863, -0.7034186147, 1.7076147010

    saturation = k0 + k1 * a + k2 * b + k3 * a * a + k4 * a * b

    # One step of Halley's method.
    k_l, k_m, k_s = _lms_coefficients(a, b)

    l_ = 1.0 + saturation * k_l
    m_ = 1.0 + saturation * k_m
    s_ = 1.0 + saturation * k_s

    l = l_ * l_ * l_  # noqa: E741
    m = m_ * m_ * m_
    s = s_ * s_ * s_

    l_ds = 3.0 * k_l * l_ * l_
    m_ds = 3.0 * k_m * m_ * m_
    s_ds = 3.0 * k_s * s_ * s_

    l_ds2 = 6.0 * k_l * k_l * l_
    m_ds2 = 6.0 * k_m * k_m * m_
    s_ds2 = 6.0 * k_s * k_s * s_

    f = wl * l + wm * m + ws * s
    f1 = wl * l_ds + wm * m_ds + ws * s_ds
    f2 = wl * l_ds2 + wm * m_ds2 + ws * s_ds2

    return saturation - _div(f * f1, f1 * f1 - 0.5 * f * f2)


def find_cusp(a: float, b: float) -> LC:
    """Lightness and chroma of the gamut cusp for a normalised hue (a, b)."""
    s_cusp = compute_max_saturation(a, b)
    rgb_at_max = oklab_to_linear_srgb(Lab(1.0, s_cusp * a, s_cusp * b))
    l_cusp = _cbrt(_div(1.0, _fmax(_fmax(rgb_at_max.r, rgb_at_max.g), rgb_at_max.b)))
    return LC(l_cusp, l_cusp * s_cusp)


def find_gamut_intersection(
    a: float, b: float, l1: float, c1: float, l0: float, cusp: LC | None = None
) -> float:
    """Parameter t where the line from (l0, 0) to (l1, c1) meets the gamut edge.

    The line is L = l0 * (1 - t) + t * l1, C = t * c1. When ``cusp`` is not
    given it is computed from the hue.
    """
    if cusp is None:
        cusp = find_cusp(a, b)

    if (l1 - l0) * cusp.C - (cusp.L - l0) * c1 <= 0.0:
        # Lower half.
        return _div(cusp.C * l0, c1 * cusp.L + cusp.C * (l0 - l1))

    # Upper half: intersect the triangle, then one Halley step.
    t = _div(cusp.C * (l0 - 1.0), c1 * (cusp.L - 1.0) + cusp.C * (l0 - l1))

    d_l = l1 - l0
    d_c = c1
    k_l, k_m, k_s = _lms_coefficients(a, b)

    l_dt = d_l + d_c * k_l
    m_dt = d_l + d_c * k_m
    s_dt = d_l + d_c * k_s

    lightness = l0 * (1.0 - t) + t * l1
    chroma = t * c1

    l_ = lightness + chroma * k_l
    m_ = lightness + chroma * k_m
    s_ = lightness + chroma * k_s

    l = l_ * l_ * l_  # noqa: E741
    m = m_ * m_ * m_
    s = s_ * s_ * s_

    ldt = 3 * l_dt * l_ * l_
    mdt = 3 * m_dt * m_ * m_
    sdt = 3 * s_dt * s_ * s_

    ldt2 = 6 * l_dt * l_dt * l_
    mdt2 = 6 * m_dt * m_dt * m_
    sdt2 = 6 * s_dt * s_dt * s_

    def step(wl: float, wm: float, ws: float) -> float:
        r = wl * l + wm * m + ws * s - 1
        r1 = wl * ldt + wm * mdt + ws * sdt
        r2 = wl * ldt2 + wm * mdt2 + ws * sdt2
        u = _div(r1, r1 * r1 - 0.5 * r * r2)
        return -r * u if u >= 0.0 else _FLT_MAX

    t_r = step(4.0767416621, -3.3077115913, 0.2309699292)
    t_g = step(-1.2684380046, 2.6097574011, -0.3413193965)
    t_b = step(-0.0041960863, -0.7034186147, 1.7076147010)

    return t + _fmin(t_r, _fmin(t_g, t_b))


def _in_gamut(rgb: RGB) -> bool:
    return 0 < rgb.r < 1 and 0 < rgb.g < 1 and 0 < rgb.b < 1


def _project(rgb: RGB) -> tuple[float, float, float, float]:
    """Return lightness, chroma and normalised hue (a, b) of a linear colour."""
    lab = linear_srgb_to_oklab(rgb)
    chroma = _fmax(_EPS, math.sqrt(lab.a * lab.a + lab.b * lab.b))
    return lab.L, chroma, lab.a / chroma, lab.b / chroma


def _clip_towards(
    lightness: float, chroma: float, a_: float, b_: float, l0: float
) -> RGB:
    t = find_gamut_intersection(a_, b_, lightness, chroma, l0)
    l_clipped = l0 * (1.0 - t) + t * lightness
    c_clipped = t * chroma
    return oklab_to_linear_srgb(Lab(l_clipped, c_clipped * a_, c_clipped * b_))


def gamut_clip_preserve_chroma(rgb: RGB) -> RGB:
    """Clip a linear sRGB colour into gamut, keeping lightness where possible."""
    if _in_gamut(rgb):
        return rgb
    lightness, chroma, a_, b_ = _project(rgb)
    return _clip_towards(lightness, chroma, a_, b_, clamp(lightness, 0, 1))


def gamut_clip_project_to_0_5(rgb: RGB) -> RGB:
    """Clip a linear sRGB colour into gamut by projecting towards L = 0.5."""
    if _in_gamut(rgb):
        return rgb
    lightness, chroma, a_, b_ = _project(rgb)
    return _clip_towards(lightness, chroma, a_, b_, 0.5)


def gamut_clip_project_to_l_cusp(rgb: RGB) -> RGB:
    """Clip a linear sRGB colour into gamut by projecting towards the cusp lightness."""
    if _in_gamut(rgb):
        return rgb
    lightness, chroma, a_, b_ = _project(rgb)
    cusp = find_cusp(a_, b_)
    return _clip_towards(lightness, chroma, a_, b_, cusp.L)


def gamut_clip_adaptive_l0_0_5(rgb: RGB, alpha: float = 0.05) -> RGB:
    """Clip into gamut towards an adaptive point around L = 0.5."""
    if _in_gamut(rgb):
        return rgb
    lightness, chroma, a_, b_ = _project(rgb)

    ld = lightness - 0.5
    e1 = 0.5 + abs(ld) + alpha * chroma
    l0 = 0.5 * (1.0 + sgn(ld) * (e1 - math.sqrt(e1 * e1 - 2.0 * abs(ld))))

    return _clip_towards(lightness, chroma, a_, b_, l0)


def gamut_clip_adaptive_l0_l_cusp(rgb: RGB, alpha: float = 0.05) -> RGB:
    """Clip into gamut towards an adaptive point around the cusp lightness."""
    if _in_gamut(rgb):
        return rgb
    lightness, chroma, a_, b_ = _project(rgb)
    cusp = find_cusp(a_, b_)

    ld = lightness - cusp.L
    k = 2.0 * (1.0 - cusp.L if ld > 0 else cusp.L)

    e1 = 0.5 * k + abs(ld) + _div(alpha * chroma, k)
    l0 = cusp.L + 0.5 * (sgn(ld) * (e1 - math.sqrt(e1 * e1 - 2.0 * k * abs(ld))))

    return _clip_towards(lightness, chroma, a_, b_, l0)


_TOE_K1 = 0.206
_TOE_K2 = 0.03
_TOE_K3 = (1.0 + _TOE_K1) / (1.0 + _TOE_K2)


def toe(x: float) -> float:
    """Map Oklab lightness to the perceptual lightness used by Okhsl/Okhsv."""
    y = _TOE_K3 * x - _TOE_K1
    return 0.5 * (y + math.sqrt(y * y + 4 * _TOE_K2 * _TOE_K3 * x))


def toe_inv(x: float) -> float:
    """Inverse of :func:`toe`."""
    return _div(x * x + _TOE_K1 * x, _TOE_K3 * (x + _TOE_K2))


def to_st(cusp: LC) -> ST:
    """Encode a cusp as the slopes S = C/L and T = C/(1 - L)."""
    return ST(_div(cusp.C, cusp.L), _div(cusp.C, 1 - cusp.L))


def get_st_mid(a: float, b: float) -> ST:
    """Smooth approximation of the cusp location for a normalised hue."""
    s = 0.11516993 + _div(
        1.0,
        +7.44778970
        + 4.15901240 * b
        + a
        * (
            -2.19557347
            + 1.75198401 * b
            + a
            * (
                -2.13704948
                - 10.02301043 * b
                + a * (-4.24894561 + 5.38770819 * b + 4.69891013 * a)
            )
        ),
    )
    t = 0.11239642 + _div(
        1.0,
        +1.61320320
        - 0.68124379 * b
        + a
        * (
            +0.40370612
            + 0.90148123 * b
            + a
            * (
                -0.27087943
                + 0.61223990 * b
                + a * (+0.00299215 - 0.45399568 * b - 0.14661872 * a)
            )
        ),
    )
    return ST(s, t)


def get_cs(lightness: float, a: float, b: float) -> Cs:
    """Reference chroma values at ``lightness`` for a normalised hue (a, b)."""
    cusp = find_cusp(a, b)

    c_max = find_gamut_intersection(a, b, lightness, 1, lightness, cusp)
    st_max = to_st(cusp)

    # Compensates for the curved part of the gamut shape.
    k = _div(c_max, _fmin(lightness * st_max.S, (1 - lightness) * st_max.T))

    st_mid = get_st_mid(a, b)
    c_a = lightness * st_mid.S
    c_b = (1.0 - lightness) * st_mid.T
    c_mid = 0.9 * k * math.sqrt(
        math.sqrt(_div(1.0, _div(1.0, c_a ** 4) + _div(1.0, c_b ** 4)))
    )

    c_a = lightness * 0.4
    c_b = (1.0 - lightness) * 0.8
    c_0 = math.sqrt(_div(1.0, _div(1.0, c_a * c_a) + _div(1.0, c_b * c_b)))

    return Cs(c_0, c_mid, c_max)


_MID = 0.8
_MID_INV = 1.25


def okhsl_to_srgb(hsl: HSL) -> RGB:
    """Convert Okhsl to gamma-encoded sRGB."""
    h, s, l = hsl  # noqa: E741

    if l == 1.0:
        return RGB(1.0, 1.0, 1.0)
    if l == 0.0:
        return RGB(0.0, 0.0, 0.0)

    a_ = math.cos(2.0 * math.pi * h)
    b_ = math.sin(2.0 * math.pi * h)
    lightness = toe_inv(l)

    c_0, c_mid, c_max = get_cs(lightness, a_, b_)

    if s < _MID:
        t = _MID_INV * s
        k_1 = _MID * c_0
        k_2 = 1.0 - _div(k_1, c_mid)
        chroma = _div(t * k_1, 1.0 - k_2 * t)
    else:
        t = (s - _MID) / (1 - _MID)
        k_0 = c_mid
        k_1 = _div((1.0 - _MID) * c_mid * c_mid * _MID_INV * _MID_INV, c_0)
        k_2 = 1.0 - _div(k_1, c_max - c_mid)
        chroma = k_0 + _div(t * k_1, 1.0 - k_2 * t)

    rgb = oklab_to_linear_srgb(Lab(lightness, chroma * a_, chroma * b_))
    return RGB(*(srgb_transfer_function(x) for x in rgb))


def _srgb_to_lab_polar(rgb: RGB) -> tuple[Lab, float, float, float, float]:
    lab = linear_srgb_to_oklab(RGB(*(srgb_transfer_function_inv(x) for x in rgb)))
    chroma = math.sqrt(lab.a * lab.a + lab.b * lab.b)
    a_ = _div(lab.a, chroma)
    b_ = _div(lab.b, chroma)
    h = 0.5 + 0.5 * math.atan2(-lab.b, -lab.a) / math.pi
    return lab, chroma, a_, b_, h


def srgb_to_okhsl(rgb: RGB) -> HSL:
    """Convert gamma-encoded sRGB to Okhsl."""
    lab, chroma, a_, b_, h = _srgb_to_lab_polar(rgb)
    lightness = lab.L

    c_0, c_mid, c_max = get_cs(lightness, a_, b_)

    if chroma < c_mid:
        k_1 = _MID * c_0
        k_2 = 1.0 - _div(k_1, c_mid)
        t = _div(chroma, k_1 + k_2 * chroma)
        s = t * _MID
    else:
        k_0 = c_mid
        k_1 = _div((1.0 - _MID) * c_mid * c_mid * _MID_INV * _MID_INV, c_0)
        k_2 = 1.0 - _div(k_1, c_max - c_mid)
        t = _div(chroma - k_0, k_1 + k_2 * (chroma - k_0))
        s = _MID + (1.0 - _MID) * t

    return HSL(h, s, toe(lightness))


_S_0 = 0.5


def okhsv_to_srgb(hsv: HSV) -> RGB:
    """Convert Okhsv to gamma-encoded sRGB."""
    h, s, v = hsv

    a_ = math.cos(2.0 * math.pi * h)
    b_ = math.sin(2.0 * math.pi * h)

    s_max, t_max = to_st(find_cusp(a_, b_))
    k = 1 - _div(_S_0, s_max)

    # Lightness and chroma as if the gamut were a perfect triangle.
    denom = _S_0 + t_max - t_max * k * s
    l_v = 1 - _div(s * _S_0, denom)
    c_v = _div(s * t_max * _S_0, denom)

    lightness = v * l_v
    chroma = v * c_v

    # Compensate for the toe and the curved top of the triangle.
    l_vt = toe_inv(l_v)
    c_vt = _div(c_v * l_vt, l_v)

    l_new = toe_inv(lightness)
    chroma = _div(chroma * l_new, lightness)
    lightness = l_new

    rgb_scale = oklab_to_linear_srgb(Lab(l_vt, a_ * c_vt, b_ * c_vt))
    scale_l = _cbrt(
        _div(1.0, _fmax(_fmax(rgb_scale.r, rgb_scale.g), _fmax(rgb_scale.b, 0.0)))
    )

    lightness *= scale_l
    chroma *= scale_l

    rgb = oklab_to_linear_srgb(Lab(lightness, chroma * a_, chroma * b_))
    return RGB(*(srgb_transfer_function(x) for x in rgb))


def srgb_to_okhsv(rgb: RGB) -> HSV:
    """Convert gamma-encoded sRGB to Okhsv."""
    lab, chroma, a_, b_, h = _srgb_to_lab_polar(rgb)
    lightness = lab.L

    s_max, t_max = to_st(find_cusp(a_, b_))
    k = 1 - _div(_S_0, s_max)

    t = _div(t_max, chroma + lightness * t_max)
    l_v = t * lightness
    c_v = t * chroma

    l_vt = toe_inv(l_v)
    c_vt = _div(c_v * l_vt, l_v)

    rgb_scale = oklab_to_linear_srgb(Lab(l_vt, a_ * c_vt, b_ * c_vt))
    scale_l = _cbrt(
        _div(1.0, _fmax(_fmax(rgb_scale.r, rgb_scale.g), _fmax(rgb_scale.b, 0.0)))
    )

    lightness = _div(lightness, scale_l)
    chroma = _div(chroma, scale_l)

    chroma = _div(chroma * toe(lightness), lightness)
    lightness = toe(lightness)

    v = _div(lightness, l_v)
    s = _div((_S_0 + t_max) * c_v, (t_max * _S_0) + t_max * k * c_v)

    return HSV(h, s, v)