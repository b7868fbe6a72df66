"""Control of the robot arm that positions the cue and fires the striker."""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from typing import Protocol

__all__ = [
    "MOTION_IDLE",
    "MotionDevice",
    "POWER_OUTPUTS",
    "RobotController",
    "STRIKER_OUTPUT",
    "strike_outputs",
]

POWER_OUTPUTS = (15, 14, 13, 12, 11, 10, 9)
STRIKER_OUTPUT = 16
MOTION_IDLE = 1
_PULSE_SECONDS = 0.5


class MotionDevice(Protocol):
    """The controller commands the arm needs."""

    def get_motion_state(self) -> int: ...

    def ptp_pos(self, mode: int, pose: Sequence[float]) -> object: ...

    def lin_pos(self, mode: int, smooth_value: float, pose: Sequence[float]) -> object: ...

    def ptp_axis(self, mode: int, joints: Sequence[float]) -> object: ...

    def set_digital_output(self, index: int, value: bool) -> object: ...


def _strike_level(distance: float) -> tuple[list[str], int | None]:
    """Return the range labels for ``distance`` and the single power output to use.

    ``None`` as output means every power output stays on.
    """
    labels: list[str] = []
    active: int | None = None
    if distance <= 100:
        labels.append("really close")
        active = 15
    elif 100 <= distance < 150:
        labels.append("very close")
        active = 14
    elif 150 <= distance < 175:
        labels.append("close")
        active = 13

    if 175 <= distance < 200:
        labels.append("a little bit close")
        active = 13
    elif 200 <= distance < 250:
        labels.append("middle")
        active = 13
    elif 250 <= distance < 350:
        labels.append("a little bit far")
        active = 12
    elif 350 <= distance < 450:
        labels.append("far")
        active = 10
    else:
        labels.append("really far")
    return labels, active


def strike_outputs(distance: float) -> dict[int, bool]:
    """Final state of the power-selection outputs for a shot of ``distance``."""
    _, active = _strike_level(distance)
    return {index: active is None or index == active for index in POWER_OUTPUTS}


class RobotController:
    """Drives the arm through a positioning, strike and homing sequence."""

    def __init__(
        self, robot: MotionDevice, sleep: Callable[[float], object] = time.sleep
    ) -> None:
        self.robot = robot
        self._sleep = sleep

    def wait(self) -> None:
        """Block until the arm reports that its motion has finished."""
        while self.robot.get_motion_state() != MOTION_IDLE:
            pass

    def move_to_pose(self, hit_position: Sequence[float], distance: float) -> None:
        """Move above the hit position point-to-point, then settle with a linear move.

        Only x, y, z and yaw are taken from ``hit_position``; roll and pitch are zero.
        """
        if len(hit_position) < 6:
            raise ValueError("hit position needs six values")
        pose = [
            float(hit_position[0]),
            float(hit_position[1]),
            float(hit_position[2]),
            0.0,
            0.0,
            float(hit_position[5]),
        ]
        self.robot.ptp_pos(0, list(pose))
        self.wait()
        self.robot.lin_pos(0, 0, list(pose))
        self.wait()

    def execute_strike(self, distance: float) -> None:
        """Select the strike power for ``distance`` and pulse the striker."""
        for index in POWER_OUTPUTS:
            self.robot.set_digital_output(index, True)
        print(f"Distance: {distance:g}")
        labels, active = _strike_level(distance)
        for label in labels:
            print(label)
        if active is not None:
            for index in POWER_OUTPUTS:
                self.robot.set_digital_output(index, index == active)

        self.robot.set_digital_output(STRIKER_OUTPUT, False)
        self._sleep(_PULSE_SECONDS)
        self.robot.set_digital_output(STRIKER_OUTPUT, True)
        self._sleep(_PULSE_SECONDS)
        self.robot.set_digital_output(STRIKER_OUTPUT, False)
        self.wait()

    def return_to_home(self, home_pose: Sequence[float]) -> None:
        """Move the joints back to ``home_pose`` and wait for the motion to end."""
        self.robot.ptp_axis(0, [float(value) for value in home_pose])
        self.wait()