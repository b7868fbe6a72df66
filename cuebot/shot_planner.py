"""Selection of direct shots whose paths are not blocked by other balls."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .geometry import cos_angle, line_distance, magnitude

__all__ = ["is_path_obstructed", "select_clear_shots"]

_MAX_CUT_ANGLE = 110.0
_PI = 3.1415926
_SAME_BALL_TOLERANCE = 1e-9

Point = Sequence[float]


def is_path_obstructed(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    obstacles: Sequence[Point],
    bound_radius: float,
) -> bool:
    """Tell whether any obstacle lies close to the path from (x1, y1) to (x2, y2).

    An obstacle blocks the path when its perpendicular distance to the line is
    below ``bound_radius`` and it is nearer to the start than the end point is.
    Obstacles sitting exactly on either end point are ignored.
    """
    dx, dy = x2 - x1, y2 - y1
    for obstacle in obstacles:
        obs_x, obs_y = obstacle[0], obstacle[1]
        if (obs_x == x2 and obs_y == y2) or (obs_x == x1 and obs_y == y1):
            continue
        distance = line_distance(dx, dy, x1, y1, obs_x, obs_y)
        if abs(distance) < bound_radius:
            if magnitude(obs_x - x1, obs_y - y1) < magnitude(dx, dy):
                return True
    return False


def _angle_degrees(a: float, b: float, c: float, d: float) -> float:
    """Angle between (a, b) and (c, d) in degrees; nan when undefined."""
    cosine = cos_angle(a, b, c, d)
    if math.isnan(cosine) or not -1.0 <= cosine <= 1.0:
        return math.nan
    return abs(math.acos(cosine) * 180 / _PI)


def _same_ball(first: Point, second: Point) -> bool:
    return len(first) == len(second) and all(
        abs(p - q) <= _SAME_BALL_TOLERANCE for p, q in zip(first, second)
    )


def select_clear_shots(
    cueballs: Sequence[Point],
    holes: Sequence[Point],
    childballs: Sequence[Point],
    bound_radius: float,
) -> list[tuple[list[float], list[float]]]:
    """Return the (child ball, hole) pairs that make a playable direct shot.

    A pair qualifies when the child ball has a clear path to the hole, and the
    cue ball (``cueballs[0]``) has a clear path to that child ball with a cut
    angle below 110 degrees towards at least one hole.
    """
    child_hole = [
        (child, hole)
        for child in childballs
        for hole in holes
        if not is_path_obstructed(
            child[0], child[1], hole[0], hole[1], childballs, bound_radius
        )
    ]

    reachable: list[Point] = []
    if childballs and holes:
        if not cueballs:
            raise ValueError("no cue ball position given")
        cue_x, cue_y = cueballs[0][0], cueballs[0][1]
        for child in childballs:
            for hole in holes:
                if is_path_obstructed(
                    child[0], child[1], cue_x, cue_y, childballs, bound_radius
                ):
                    continue
                angle = _angle_degrees(
                    child[0] - cue_x,
                    child[1] - cue_y,
                    hole[0] - child[0],
                    hole[1] - child[1],
                )
                if angle < _MAX_CUT_ANGLE:
                    reachable.append(child)

    return [
        (list(child), list(hole))
        for child, hole in child_hole
        if any(_same_ball(child, candidate) for candidate in reachable)
    ]