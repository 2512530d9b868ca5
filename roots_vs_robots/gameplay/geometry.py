"""
Collision geometry.
NO UI DEPENDENCIES.
"""


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def circle_rect_overlap(
    cx: float, cy: float, radius: float,
    rx: float, ry: float, width: float, height: float,
) -> bool:
    """
    Check whether a circle touches an axis-aligned rectangle.

    (rx, ry) is the rectangle's top-left corner. The circle overlaps when
    the point of the rectangle closest to its centre lies within the
    radius. Touching exactly at the radius counts as a hit.
    """
    nearest_x = clamp(cx, rx, rx + width)
    nearest_y = clamp(cy, ry, ry + height)
    dx = cx - nearest_x
    dy = cy - nearest_y
    return dx * dx + dy * dy <= radius * radius
