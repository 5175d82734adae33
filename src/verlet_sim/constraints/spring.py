# MIT License (see LICENSE)
"""
Spring (distance) constraints between two nodes.

Springs are relaxed once per step after the hard constraints, by moving the
endpoints directly (position-based, no velocity impulse). One relaxation
moves the pair a fraction ``stiffness`` of the way back to the rest length.

Impulse distribution, with movement = n̂ · stiffness · (|d| - rest_length)
and d = pos_a - pos_b:

    A static | B static | A receives        | B receives
    ---------+----------+-------------------+-----------
    no       | no       | -0.5 · movement   | +0.5 · movement
    yes      | no       | -                 | +movement
    no       | yes      | -0.2 · movement   | -
    yes      | yes      | -                 | -

Anchoring at B is deliberately softer than anchoring at A.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass

from ..constants import (
    SPRING_SHARE_FREE,
    SPRING_SHARE_SOFT_ANCHOR,
    STIFFNESS_MAX,
    STIFFNESS_MIN,
)
from ..types import Node

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Spring:
    """
    Distance constraint between two nodes.

    Attributes:
        node_a: First endpoint (not owned; the World owns nodes).
        node_b: Second endpoint (not owned).
        stiffness: Fraction of the length error corrected per relaxation.
                   [0, 1] is stable; larger values are accepted but can
                   diverge.
        rest_length: Target separation. Defaults to the separation of the
                     nodes at construction time.
    """
    node_a: Node
    node_b: Node
    stiffness: float
    rest_length: float | None = None

    def __post_init__(self) -> None:
        if self.rest_length is None:
            self.rest_length = self.length()
        if not STIFFNESS_MIN <= self.stiffness <= STIFFNESS_MAX:
            logger.warning(
                "Spring stiffness %s is outside [%s, %s]; relaxation may diverge",
                self.stiffness, STIFFNESS_MIN, STIFFNESS_MAX,
            )

    def length(self) -> float:
        """Current separation of the endpoints."""
        return (self.node_a.position - self.node_b.position).length()

    def strain(self) -> float:
        """Current length minus rest length (positive when stretched)."""
        return self.length() - self.rest_length

    def involves(self, node: Node) -> bool:
        return node is self.node_a or node is self.node_b

    def relax(self) -> None:
        """
        Move the endpoints toward the rest length by one relaxation.

        Coincident endpoints have no defined direction; they are left alone
        for this step.
        """
        a, b = self.node_a, self.node_b
        delta = a.position - b.position
        if delta.x == 0.0 and delta.y == 0.0:
            return

        movement = delta.normal() * (self.stiffness * (delta.length() - self.rest_length))

        if a.is_static:
            b.apply_impulse(movement)
        elif b.is_static:
            a.apply_impulse(movement * -SPRING_SHARE_SOFT_ANCHOR)
        else:
            a.apply_impulse(movement * -SPRING_SHARE_FREE)
            b.apply_impulse(movement * SPRING_SHARE_FREE)


def relax_springs(springs: list[Spring]) -> None:
    """
    Relax every spring once, in registration order.

    Order matters: each relaxation sees positions already moved by the
    previous springs (Gauss-Seidel style).
    """
    for s in springs:
        s.relax()
