from ..utils.num_utils import round_half_up


def rgb_to_hex(r: float, g: float, b: float) -> tuple[int]:
    """Pack the rounded channels as ``0xRRGGBB``."""
    return (round_half_up(r) << 16 | round_half_up(g) << 8 | round_half_up(b),)


def hex_to_rgb(value: int) -> tuple[float, float, float]:
    return float((value >> 16) & 0xFF), float((value >> 8) & 0xFF), float(value & 0xFF)
