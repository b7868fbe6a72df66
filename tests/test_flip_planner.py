import math

import pytest

from cuebot.flip_planner import FlipShot, evaluate_flip_shots


def test_single_bank_shot_geometry():
    shots = evaluate_flip_shots([0, 0], [[10, 10]], [], [[5, 0]], 15)
    assert len(shots) == 1
    shot = shots[0]
    assert shot.cue_to_wall_vector == pytest.approx((0, -5))
    assert shot.wall_contact_point == pytest.approx((0, -5))
    assert shot.wall_to_target_vector == pytest.approx((10, 15))
    assert shot.target_coords == (10, 10)
    assert shot.hole_coords == (0.0, 0.0)


@pytest.mark.parametrize(
    "cue, target, wall",
    [((0, 0), (10, 10), (5, 0)), ((3, -2), (40, 7), (20, 30)), ((1, 1), (-8, 4), (0, 9))],
)
def test_shot_invariants(cue, target, wall):
    (shot,) = evaluate_flip_shots(list(cue), [list(target)], [], [list(wall)], 1)
    mirror = (2 * wall[0] - target[0], 2 * wall[1] - target[1])
    midpoint = ((cue[0] + mirror[0]) / 2, (cue[1] + mirror[1]) / 2)
    assert shot.wall_contact_point == pytest.approx(midpoint)
    assert (
        cue[0] + shot.cue_to_wall_vector[0],
        cue[1] + shot.cue_to_wall_vector[1],
    ) == pytest.approx(shot.wall_contact_point)
    assert (
        shot.wall_contact_point[0] + shot.wall_to_target_vector[0],
        shot.wall_contact_point[1] + shot.wall_to_target_vector[1],
    ) == pytest.approx(target)
    assert shot.total_distance == pytest.approx(
        math.hypot(*shot.cue_to_wall_vector) + math.hypot(*shot.wall_to_target_vector)
    )


def test_cue_on_mirror_image_is_skipped():
    assert evaluate_flip_shots([0, 0], [[10, 10]], [], [[5, 5]], 15) == []


def test_target_among_obstacles_blocks_its_own_shot():
    target = [10, 10]
    assert evaluate_flip_shots([0, 0], [target], [target], [[5, 0]], 15) == []


def test_obstacle_on_cue_ball_is_ignored():
    shots = evaluate_flip_shots([0, 0], [[10, 10]], [[0, 0]], [[5, 0]], 15)
    assert [shot.target_coords for shot in shots] == [(10, 10)]


def test_obstacle_near_first_leg_blocks():
    assert evaluate_flip_shots([0, 0], [[10, 10]], [[1, -3]], [[5, 0]], 2) == []


def test_walls_are_the_outer_loop():
    walls = [[5, 0], [0, -20]]
    candidates = [[10, 10], [-10, 10]]
    shots = evaluate_flip_shots([0, 0], candidates, [], walls, 1)
    assert [shot.target_coords for shot in shots] == [
        (10, 10),
        (-10, 10),
        (10, 10),
        (-10, 10),
    ]


def test_flip_shot_defaults():
    shot = FlipShot((1.0, 0.0), (1.0, 0.0), (0.0, 1.0), (1.0, 1.0))
    assert shot.hole_coords == (0.0, 0.0)
    assert shot.total_distance == 0.0