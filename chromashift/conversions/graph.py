from __future__ import annotations
from typing import Any, Callable, Dict, Tuple

from ..types.color_types import ColorModel, as_model
from ..types.domains import check_domain
from .cielab import lab_to_lch, lab_to_xyz, lch_to_lab, xyz_to_lab
from .hexcode import hex_to_rgb, rgb_to_hex
from .hsx import hsl_to_rgb, hsv_to_rgb, rgb_to_hsl, rgb_to_hsv
from .srgb import rgb_to_xyz, xyz_to_rgb
from .subtractive import cmy_to_cmyk, cmy_to_rgb, cmyk_to_cmy, rgb_to_cmy
from .yxy import xyz_to_yxy, yxy_to_xyz

M = ColorModel

EdgeFunction = Callable[..., Tuple[Any, ...]]

# Pairs with a closed-form formula; every other pair is composed from these
DIRECT_EDGES: Dict[Tuple[ColorModel, ColorModel], EdgeFunction] = {
    (M.RGB, M.HEX): rgb_to_hex,
    (M.HEX, M.RGB): hex_to_rgb,
    (M.RGB, M.XYZ): rgb_to_xyz,
    (M.XYZ, M.RGB): xyz_to_rgb,
    (M.XYZ, M.CIELAB): xyz_to_lab,
    (M.CIELAB, M.XYZ): lab_to_xyz,
    (M.CIELAB, M.CIELCH): lab_to_lch,
    (M.CIELCH, M.CIELAB): lch_to_lab,
    (M.XYZ, M.YXY): xyz_to_yxy,
    (M.YXY, M.XYZ): yxy_to_xyz,
    (M.RGB, M.HSV): rgb_to_hsv,
    (M.HSV, M.RGB): hsv_to_rgb,
    (M.RGB, M.HSL): rgb_to_hsl,
    (M.HSL, M.RGB): hsl_to_rgb,
    (M.RGB, M.CMY): rgb_to_cmy,
    (M.CMY, M.RGB): cmy_to_rgb,
    (M.CMY, M.CMYK): cmy_to_cmyk,
    (M.CMYK, M.CMY): cmyk_to_cmy,
}

# Next hop towards targets without a direct edge: a "default" hop per source
# plus the exceptions. Floating-point results depend on the route, so this
# table is the single source of truth for every composed conversion.
_DEFAULT = "default"
NEXT_HOP: Dict[ColorModel, Dict[Any, ColorModel]] = {
    M.HEX: {_DEFAULT: M.RGB},
    M.RGB: {_DEFAULT: M.XYZ, M.CMYK: M.CMY},
    M.XYZ: {_DEFAULT: M.RGB, M.CIELCH: M.CIELAB},
    M.YXY: {_DEFAULT: M.XYZ},
    M.CIELAB: {_DEFAULT: M.XYZ},
    M.CIELCH: {_DEFAULT: M.CIELAB},
    M.CMY: {_DEFAULT: M.RGB},
    M.CMYK: {_DEFAULT: M.CMY},
    M.HSL: {_DEFAULT: M.RGB},
    M.HSV: {_DEFAULT: M.RGB},
}


def next_hop(src: ColorModel, dst: ColorModel) -> ColorModel:
    if (src, dst) in DIRECT_EDGES:
        return dst
    routes = NEXT_HOP[src]
    return routes.get(dst, routes[_DEFAULT])


def canonical_path(src: ColorModel | str, dst: ColorModel | str) -> Tuple[ColorModel, ...]:
    """
    Return the fixed sequence of models visited when converting ``src`` to ``dst``.

    The path starts with ``src`` and ends with ``dst``; converting a model to
    itself yields a one-element path.

    Examples:
        >>> canonical_path("hsv", "cmyk")
        (<ColorModel.HSV: 'hsv'>, <ColorModel.RGB: 'rgb'>, <ColorModel.CMY: 'cmy'>, <ColorModel.CMYK: 'cmyk'>)
    """
    src, dst = as_model(src), as_model(dst)
    path = [src]
    while path[-1] != dst:
        hop = next_hop(path[-1], dst)
        if hop in path:
            raise RuntimeError(f"Routing loop converting {src.value} to {dst.value}: {path}")
        path.append(hop)
    return tuple(path)


CANONICAL_PATHS: Dict[Tuple[ColorModel, ColorModel], Tuple[ColorModel, ...]] = {
    (src, dst): canonical_path(src, dst) for src in ColorModel for dst in ColorModel
}


def convert(
    values: Tuple[Any, ...],
    from_model: ColorModel | str,
    to_model: ColorModel | str,
) -> Tuple[Any, ...]:
    """
    Convert raw field values between any two models along the canonical path.

    Args:
        values: Field values of ``from_model``, already in canonical form
        from_model: Source model
        to_model: Target model

    Returns:
        Field values of ``to_model``, domain checked

    Raises:
        InvalidColorError: if an intermediate model's domain check fails
            (e.g. an oversaturated HSV producing an RGB channel above 255)
    """
    path = CANONICAL_PATHS[(as_model(from_model), as_model(to_model))]
    current = tuple(values)
    for src, dst in zip(path, path[1:]):
        current = check_domain(dst, DIRECT_EDGES[(src, dst)](*current))
    return current
