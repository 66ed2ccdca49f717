def xyz_to_yxy(x: float, y: float, z: float) -> tuple[float, float, float]:
    """
    Convert XYZ to Yxy chromaticity.

    Returns:
        Tuple[float, float, float]: (Y, x, y); black (X + Y + Z == 0) maps to (Y, 0, 0)
    """
    total = x + y + z
    if total == 0:
        return y, 0.0, 0.0
    return y, x / total, y / total


def yxy_to_xyz(big_y: float, x: float, y: float) -> tuple[float, float, float]:
    # y == 0 is what xyz_to_yxy emits when X + Y + Z == 0
    if big_y == 0 or y == 0:
        return 0.0, big_y, 0.0
    scale = big_y / y
    return x * scale, big_y, (1 - x - y) * scale
