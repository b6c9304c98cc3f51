"""
Point arithmetic helpers shared by the flocking rules.
"""

import math
from typing import Tuple

import pygame


def distance(p1: pygame.Vector2, p2: pygame.Vector2) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p1.x - p2.x, p1.y - p2.y)


def clamp(value, minimum, maximum):
    """
    Clamp a value into [minimum, maximum] using only ordering comparisons.

    Works for any ordered type (ints, floats, Decimals, ...).
    """
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def project_onto_segment(
    seg_start: pygame.Vector2, seg_end: pygame.Vector2, point: pygame.Vector2
) -> Tuple[pygame.Vector2, bool]:
    """
    Find the point on a segment closest to a given point.

    The point is projected onto the infinite line through the segment with
    parameter t (0 at seg_start, 1 at seg_end). Outside [0, 1] the closest
    point is the nearer endpoint.

    Args:
        seg_start: First endpoint of the segment
        seg_end: Second endpoint; must differ from seg_start
        point: Point to project

    Returns:
        Tuple of (closest point, whether the projection fell on the segment)
    """
    dx = point.x - seg_start.x
    dy = point.y - seg_start.y

    dxx = seg_end.x - seg_start.x
    dyy = seg_end.y - seg_start.y

    t = (dx * dxx + dy * dyy) / (dxx * dxx + dyy * dyy)

    if t < 0:
        closest = pygame.Vector2(seg_start)
    elif t > 1:
        closest = pygame.Vector2(seg_end)
    else:
        closest = pygame.Vector2(seg_start.x + dxx * t, seg_start.y + dyy * t)

    return closest, 0 <= t <= 1
