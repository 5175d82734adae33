# MIT License (see LICENSE)
"""
Force behaviors for the point-mass simulation.

A behavior is any object with an ``apply(node)`` method that accumulates
force into the node. World runs every registered behavior over every node
once per step, before integration consumes the accumulated acceleration.

Key concepts:
- Behaviors only call Node.apply_force(); static nodes filter themselves out.
- Forces commute under addition, so registration order does not change the
  result of a step.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol

from ..types import Node, Vector


class Behavior(Protocol):
    """Per-node force generator applied every step."""

    def apply(self, node: Node) -> None:
        ...


@dataclass
class GravityBehavior:
    """
    Uniform acceleration applied to every node.

    Attributes:
        force: Acceleration vector. Screen-space hosts usually point +y down,
               e.g. Vector(0, 981).
    """
    force: Vector = Vector(0.0, 0.0)

    def __post_init__(self) -> None:
        self.force = Vector.from_any(self.force)

    def apply(self, node: Node) -> None:
        node.apply_force(self.force)
