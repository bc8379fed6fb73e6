"""
nbody: interactive 2D gravitational N-body simulator.

Point masses attract each other with an inverse-square force, are integrated with
semi-implicit Euler, and are drawn through a camera that looks at the world via a
nested Frame2D coordinate system.
"""

__version__ = "0.1.0"

from .vector import Vector2D
from .frame import Frame2D
from .data_models import PhysicsBody, PhysicsWorld
from .physics import apply_gravitational_forces, predict_trajectory, step, total_momentum
from .color import Color
from .scene import Drawable, Scene
from .drawables import BodyDrawable, FrameAxesDrawable, GridDrawable, TrajectoryDrawable
from .camera import Camera
from .errors import BackendInitError, SimulationError

__all__ = [
    "Vector2D",
    "Frame2D",
    "PhysicsBody",
    "PhysicsWorld",
    "apply_gravitational_forces",
    "predict_trajectory",
    "step",
    "total_momentum",
    "Color",
    "Drawable",
    "Scene",
    "BodyDrawable",
    "FrameAxesDrawable",
    "GridDrawable",
    "TrajectoryDrawable",
    "Camera",
    "BackendInitError",
    "SimulationError",
]
