"""Shot planning geometry and strike control for a robotic billiards arm."""

__version__ = "0.1.0"
__all__ = ["flip_planner", "geometry", "robot", "shot_planner"]