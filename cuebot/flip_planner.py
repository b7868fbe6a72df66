"""Planning of bank shots that bounce the cue ball off a wall."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .geometry import line_distance, magnitude

__all__ = ["FlipShot", "evaluate_flip_shots"]

_SELF_TOLERANCE = 1e-5

Point = Sequence[float]


@dataclass
class FlipShot:
    """A wall-bounce shot: cue ball to wall contact point, then on to the target."""

    cue_to_wall_vector: tuple[float, float]
    wall_contact_point: tuple[float, float]
    wall_to_target_vector: tuple[float, float]
    target_coords: tuple[float, ...]
    hole_coords: tuple[float, float] = field(default=(0.0, 0.0))
    total_distance: float = 0.0


def evaluate_flip_shots(
    cueball_pos: Point,
    candidates: Sequence[Point],
    obstacles: Sequence[Point],
    walls: Sequence[Point],
    bound_radius: float,
) -> list[FlipShot]:
    """Return every unobstructed bank shot, walls in the outer order.

    Each target is mirrored through each wall point; the cue ball aims at the
    mirror image and meets the wall halfway. Both legs must stay at least
    ``bound_radius`` from every obstacle, except one lying on the cue ball.
    """
    cue_x, cue_y = cueball_pos[0], cueball_pos[1]
    shots = []
    for wall in walls:
        for target in candidates:
            mirror_x = 2 * wall[0] - target[0]
            mirror_y = 2 * wall[1] - target[1]
            vec_x, vec_y = mirror_x - cue_x, mirror_y - cue_y
            norm = magnitude(vec_x, vec_y)
            if norm == 0:
                continue
            unit_x, unit_y = vec_x / norm, vec_y / norm
            contact_x = cue_x + unit_x * (norm / 2)
            contact_y = cue_y + unit_y * (norm / 2)
            leg_x, leg_y = target[0] - contact_x, target[1] - contact_y

            if _blocked(
                (cue_x, cue_y),
                (unit_x, unit_y),
                (contact_x, contact_y),
                (leg_x, leg_y),
                obstacles,
                bound_radius,
            ):
                continue

            to_wall = (unit_x * norm / 2, unit_y * norm / 2)
            shots.append(
                FlipShot(
                    cue_to_wall_vector=to_wall,
                    wall_contact_point=(contact_x, contact_y),
                    wall_to_target_vector=(leg_x, leg_y),
                    target_coords=tuple(target),
                    hole_coords=(0.0, 0.0),
                    total_distance=magnitude(*to_wall) + magnitude(leg_x, leg_y),
                )
            )
    return shots


def _blocked(
    cue: tuple[float, float],
    direction: tuple[float, float],
    contact: tuple[float, float],
    leg: tuple[float, float],
    obstacles: Sequence[Point],
    bound_radius: float,
) -> bool:
    for obstacle in obstacles:
        obs_x, obs_y = obstacle[0], obstacle[1]
        if magnitude(obs_x - cue[0], obs_y - cue[1]) < _SELF_TOLERANCE:
            continue
        if abs(line_distance(*direction, *cue, obs_x, obs_y)) < bound_radius:
            return True
        if abs(line_distance(*leg, *contact, obs_x, obs_y)) < bound_radius:
            return True
    return False