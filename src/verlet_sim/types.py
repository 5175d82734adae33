# MIT License (see LICENSE)
"""
Core type definitions for the 2D point-mass simulation.

Defines the fundamental data structures:
- Vector: immutable 2D value type used for every position and force.
- Node: a point mass integrated with position Verlet.

Position Verlet keeps no explicit velocity state. Velocity is the
displacement over the previous tick:
  v(t)      = x(t) - x(t-1)
  x(t+1)    = x(t) + v(t) + a(t)·dt²
Momentum is carried by the position history, so there is no drift between
a separately integrated velocity and the position.
"""
from __future__ import annotations
import math
from dataclasses import dataclass, field

import numpy as np


# =============================================================================
# Vector
# =============================================================================

@dataclass(frozen=True)
class Vector:
    """
    Immutable 2D vector.

    Every operation returns a new instance; a Vector is never mutated in
    place, so it is safe to share between nodes and snapshots.

    Attributes:
        x: Horizontal component.
        y: Vertical component.
    """
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_any(cls, value) -> Vector:
        """
        Coerce a Vector, 2-sequence or numpy array of shape (2,) to a Vector.

        Raises:
            TypeError: If value cannot be read as a 2D point.
        """
        if isinstance(value, Vector):
            return value
        if isinstance(value, np.ndarray):
            if value.shape != (2,):
                raise TypeError(f"Expected array of shape (2,), got {value.shape}")
            return cls(float(value[0]), float(value[1]))
        if isinstance(value, (tuple, list)) and len(value) == 2:
            return cls(float(value[0]), float(value[1]))
        raise TypeError(f"Cannot convert {type(value).__name__} to Vector")

    @staticmethod
    def zero() -> Vector:
        return Vector(0.0, 0.0)

    # -- arithmetic -----------------------------------------------------------

    def add(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def subtract(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def multiply(self, other: Vector) -> Vector:
        """Component-wise product."""
        return Vector(self.x * other.x, self.y * other.y)

    def multiply_scalar(self, s: float) -> Vector:
        return Vector(self.x * s, self.y * s)

    def length2(self) -> float:
        """Squared magnitude. Avoids sqrt for comparisons."""
        return Vector.dot(self, self)

    def length(self) -> float:
        return math.sqrt(self.length2())

    def normal(self) -> Vector:
        """
        Unit vector in the same direction.

        Returns the zero vector when length() == 0. A NaN position can never
        be recovered once it enters a node, so coincident points must
        produce "no direction" instead of 0/0.
        """
        n = self.length()
        if n == 0.0:
            return Vector.zero()
        inv = 1.0 / n
        return Vector(self.x * inv, self.y * inv)

    @staticmethod
    def dot(a: Vector, b: Vector) -> float:
        return a.x * b.x + a.y * b.y

    @staticmethod
    def min(a: Vector, b: Vector) -> Vector:
        return Vector(min(a.x, b.x), min(a.y, b.y))

    @staticmethod
    def max(a: Vector, b: Vector) -> Vector:
        return Vector(max(a.x, b.x), max(a.y, b.y))

    @staticmethod
    def clamp(a: Vector, lo: Vector, hi: Vector) -> Vector:
        """Clamp a component-wise into [lo, hi]. lo wins if lo > hi."""
        return Vector.max(Vector.min(a, hi), lo)

    # -- operators ------------------------------------------------------------

    def __add__(self, other: Vector) -> Vector:
        return self.add(other)

    def __sub__(self, other: Vector) -> Vector:
        return self.subtract(other)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def __mul__(self, other) -> Vector:
        if isinstance(other, Vector):
            return self.multiply(other)
        return self.multiply_scalar(other)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y

    # -- conversion -----------------------------------------------------------

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


# =============================================================================
# Node
# =============================================================================

@dataclass(eq=False)
class Node:
    """
    A point mass integrated with position Verlet.

    Attributes:
        position: Current position. Hosts may overwrite it directly (dragging).
        is_static: Pinned nodes ignore forces and impulses and never move
                   during integration.
        position_last: Position at the previous tick. Defaults to position,
                       i.e. the node starts at rest.
        acceleration: Accumulated acceleration for this tick (cleared after
                      integration).
        velocity: Displacement over the previous tick, derived at the start
                  of update_position(). Read-only for callers.
        id: Stable identifier assigned by World.add_node().

    Note:
        Nodes compare by identity. Two nodes at the same position are still
        distinct point masses.
    """
    position: Vector | tuple[float, float] = (0.0, 0.0)
    is_static: bool = False
    position_last: Vector | tuple[float, float] | None = None

    # Runtime state (not user-specified)
    acceleration: Vector = field(default_factory=Vector.zero)
    velocity: Vector = field(default_factory=Vector.zero)
    id: int = -1

    def __post_init__(self) -> None:
        """Accept tuple/array inputs for the positions."""
        self.position = Vector.from_any(self.position)
        if self.position_last is None:
            self.position_last = self.position
        else:
            self.position_last = Vector.from_any(self.position_last)
        self.acceleration = Vector.from_any(self.acceleration)
        self.velocity = Vector.from_any(self.velocity)

    def apply_force(self, force: Vector) -> None:
        """Accumulate force (unit mass, so force == acceleration)."""
        if not self.is_static:
            self.acceleration = self.acceleration + force

    def apply_impulse(self, impulse: Vector) -> None:
        """Displace the node directly. Used by springs, constraints and dragging."""
        if not self.is_static:
            self.position = self.position + impulse

    def update_position(self, dt: float) -> None:
        """
        Advance one tick of position Verlet:
            velocity      = position - position_last
            position_last = position
            position      = position + velocity + acceleration·dt²
            acceleration  = 0

        A static node keeps its position and loses any residual velocity, so
        pinning a moving node stops it dead.
        """
        if self.is_static:
            self.velocity = Vector.zero()
            self.position_last = self.position
            self.acceleration = Vector.zero()
            return

        self.velocity = self.position - self.position_last
        self.position_last = self.position
        self.position = self.position + self.velocity + self.acceleration * (dt * dt)
        self.acceleration = Vector.zero()

    def displacement(self) -> Vector:
        """Pending displacement, position - position_last (the next tick's velocity)."""
        return self.position - self.position_last
