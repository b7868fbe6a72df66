# cuebot

`cuebot` plans billiards shots from ball, hole and wall positions. It also
drives a robot arm that holds the cue and fires a striker.

The package has no dependencies outside the Python standard library.

## Installing

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install .[test]
pytest
```

## Geometry helpers: `cuebot.geometry`

- `inner_product(a, b, c, d)` gives the dot product of `(a, b)` and `(c, d)`.
- `magnitude(a, b)` gives the length of `(a, b)`.
- `cos_angle(a, b, c, d)` gives the cosine of the angle between two vectors.
  If either vector has zero length, the result is `nan`.
- `line_distance(vec_x, vec_y, pass_x, pass_y, x0, y0)` gives the signed
  perpendicular distance from `(x0, y0)` to a line. The line runs along
  `(vec_x, vec_y)` and passes through `(pass_x, pass_y)`. If the direction
  vector is zero, the result is `inf` or `nan` and no error is raised.

## Direct shots: `cuebot.shot_planner`

`is_path_obstructed(x1, y1, x2, y2, obstacles, bound_radius)` returns `True`
when some obstacle blocks the path. An obstacle blocks the path when both of
these hold:

- it lies closer than `bound_radius` to the line through the two points;
- it is nearer to the start point than the end point is.

Obstacles that sit exactly on either end point are ignored.

`select_clear_shots(cueballs, holes, childballs, bound_radius)` returns
`(ball, hole)` pairs as lists of coordinates. A pair is kept when both of
these hold:

- the path from the object ball to the hole is clear of the other balls;
- the cue ball, which is `cueballs[0]`, has a clear path to that ball with a
  cut angle below 110° towards at least one hole.

If there are balls and holes but no cue ball, `ValueError` is raised.

```python
from cuebot.shot_planner import select_clear_shots

shots = select_clear_shots([[0.0, 0.0]], [[100.0, 0.0]], [[50.0, 0.0]], 15)
# [([50.0, 0.0], [100.0, 0.0])]
```

## Bank shots: `cuebot.flip_planner`

`evaluate_flip_shots(cueball_pos, candidates, obstacles, walls, bound_radius)`
works through each wall point and each target:

1. It mirrors the target through the wall point.
2. It aims the cue ball at the mirror image, meeting the wall halfway there.
3. It drops the shot if either leg passes closer than `bound_radius` to an
   obstacle. Obstacles lying on the cue ball itself are ignored.

The result is a list of `FlipShot` records, in wall-major order. Each record
has these fields:

- `cue_to_wall_vector`
- `wall_contact_point`
- `wall_to_target_vector`
- `target_coords`
- `hole_coords` (always `(0.0, 0.0)`)
- `total_distance`, the sum of the two leg lengths

When you look for the shortest bank shot, use `total_distance` to rank the
records.

## Robot control: `cuebot.robot`

`RobotController(robot, sleep=time.sleep)` wraps a device object. The object
must provide the methods described by the `MotionDevice` protocol:

- `get_motion_state()`
- `ptp_pos(mode, pose)`
- `lin_pos(mode, smooth_value, pose)`
- `ptp_axis(mode, joints)`
- `set_digital_output(index, value)`

The controller has these methods:

- `wait()` polls until the motion state equals `MOTION_IDLE` (1).
- `move_to_pose(hit_position, distance)` makes a point-to-point move, then a
  linear move, to a six-value pose. It keeps x, y, z and yaw from
  `hit_position` and sets roll and pitch to zero. It raises `ValueError` if
  fewer than six values are given.
- `execute_strike(distance)` does the following:
  1. Sets the power outputs `POWER_OUTPUTS` (15 to 9) for the distance.
  2. Prints the distance and its range label.
  3. Pulses `STRIKER_OUTPUT` (16) off, on and off, with a pause of half a
     second after the first two steps.
  4. Waits for the motion to end.
- `return_to_home(home_pose)` moves the joints to `home_pose` and waits.

`strike_outputs(distance)` returns the final state of each power output for
that distance, as a mapping from output index to `bool`.

## What the package does not do

The package does not include these parts:

- **No input files.** It does not read ball, hole or wall positions from
  files. Pass the positions in as sequences of coordinates.
- **No full pipeline.** It does not run a complete plan-and-strike sequence,
  and there is no command-line program.
- **No robot connection.** It does not open a connection to a robot
  controller. You must supply an object with the methods listed above.