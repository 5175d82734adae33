# MIT License (see LICENSE)
"""
Hard positional constraints.

A constraint is any object with an ``apply(node)`` method that projects the
node back to a legal position. World applies every constraint to every node
right after integration, so springs relax against positions that are
already legal.

Provided constraints:
- RectangleConstraint: projection into an axis-aligned box, as an impulse.
- BoundaryFrictionConstraint: inelastic walls with Coulomb-like friction.

Boundary friction model (per crossed wall):
    1. Clamp the normal coordinate to the wall.
    2. Set position_last on the normal axis to the same value, so the next
       tick sees zero normal velocity (no bounce).
    3. With j = tangential velocity, k = |normal velocity · μ|:
         |j| <= k  →  tangential velocity is arrested (static friction)
         |j| >  k  →  tangential velocity shrinks by k (kinetic friction)
Friction only removes velocity, it never adds any.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol

from ..types import Node, Vector
from ..util import sign


class Constraint(Protocol):
    """Per-node positional corrector applied every step."""

    def apply(self, node: Node) -> None:
        ...


@dataclass
class RectangleConstraint:
    """
    Keep nodes inside the box [origin, origin + extent].

    The correction is applied through Node.apply_impulse(), so static nodes
    are never moved even if they sit outside the box.

    Attributes:
        origin: Top-left (minimum) corner.
        extent: Box size along x and y.
    """
    origin: Vector
    extent: Vector

    def __post_init__(self) -> None:
        self.origin = Vector.from_any(self.origin)
        self.extent = Vector.from_any(self.extent)

    def apply(self, node: Node) -> None:
        clamped = Vector.clamp(node.position, self.origin, self.origin + self.extent)
        node.apply_impulse(clamped - node.position)


def _tangential_last(last: float, pos: float, j: float, k: float) -> float:
    """
    New previous-position coordinate along the tangential axis.

    j is the tangential velocity, k the friction budget. Friction may stop
    the pending slide (pos - last) but never reverse it, which matters at a
    corner where the first wall has already zeroed part of the motion.
    """
    if j == 0.0:
        return last
    if abs(j) <= k:
        return pos
    if k == 0.0:
        return last
    t = sign(j)
    if (pos - last) * t <= k:
        return pos
    return last + k * t


@dataclass
class BoundaryFrictionConstraint:
    """
    Inelastic walls at ``margin`` from each edge of a width x height area.

    Walls are checked in the order left, right, top, bottom. A node in a
    corner is corrected by both walls within the same application.

    Attributes:
        width: Area width.
        height: Area height.
        margin: Inset of the walls from the area edges.
        friction_coefficient: μ. 0 is frictionless. Not validated.
    """
    width: float
    height: float
    margin: float = 0.0
    friction_coefficient: float = 0.0

    def apply(self, node: Node) -> None:
        if node.is_static:
            return

        lo_x, hi_x = self.margin, self.width - self.margin
        lo_y, hi_y = self.margin, self.height - self.margin

        if node.position.x < lo_x:
            self._stop_x(node, lo_x)
        if node.position.x > hi_x:
            self._stop_x(node, hi_x)
        if node.position.y < lo_y:
            self._stop_y(node, lo_y)
        if node.position.y > hi_y:
            self._stop_y(node, hi_y)

    def _stop_x(self, node: Node, wall: float) -> None:
        """Vertical wall: x is normal, y is tangential."""
        v = node.velocity
        k = abs(v.x * self.friction_coefficient)
        y_last = _tangential_last(node.position_last.y, node.position.y, v.y, k)
        node.position = Vector(wall, node.position.y)
        node.position_last = Vector(wall, y_last)

    def _stop_y(self, node: Node, wall: float) -> None:
        """Horizontal wall: y is normal, x is tangential."""
        v = node.velocity
        k = abs(v.y * self.friction_coefficient)
        x_last = _tangential_last(node.position_last.x, node.position.x, v.x, k)
        node.position = Vector(node.position.x, wall)
        node.position_last = Vector(x_last, wall)
