# MIT License (see LICENSE)
"""
The simulation world and its fixed-timestep step.

The World class owns every node, spring, behavior and constraint and runs
one tick of the simulation in a fixed order:
    1. Behaviors: accumulate forces on every node.
    2. Integration: position Verlet for every node.
    3. Constraints: project every node back to a legal position.
    4. Springs: relax every spring once, in registration order.

Forces must exist before integration consumes them, and springs relax
against positions the constraints have already legalized. Reordering the
phases changes stability.

Structure:
    - Host creates a World (or World.boxed(...)).
    - Host registers nodes, springs, behaviors and constraints.
    - Host calls world.step() once per frame; the core never schedules
      itself and always advances by world.dt.
"""
from __future__ import annotations
import logging
from contextlib import nullcontext
from dataclasses import dataclass, field

import numpy as np

from .constants import DEFAULT_DT
from .constraints.bounds import BoundaryFrictionConstraint, Constraint
from .constraints.spring import Spring, relax_springs
from .core.behaviors import Behavior, GravityBehavior
from .profiler import Profiler
from .types import Node, Vector
from .util import f64

logger = logging.getLogger(__name__)


def _discard(items: list, obj) -> bool:
    """Remove obj from items by identity. Returns False if it was absent."""
    for i, item in enumerate(items):
        if item is obj:
            del items[i]
            return True
    return False


@dataclass
class World:
    """
    Point-mass simulation world.

    Attributes:
        dt: Fixed timestep used by every step (default 1/60).
        profiler: Optional Profiler timing each step phase.
        nodes: Registered nodes, in registration order.
        springs: Registered springs, relaxed in this order.
        behaviors: Registered force behaviors.
        constraints: Registered hard constraints, applied in this order.
        time: Simulated time, dt per step.
        step_count: Number of completed steps.

    Note:
        step() must not run concurrently with registration or with another
        step(). Hosts rendering on another thread read positions() between
        steps.
    """
    dt: float = DEFAULT_DT
    profiler: Profiler | None = None

    # Internal state
    nodes: list[Node] = field(default_factory=list)
    springs: list[Spring] = field(default_factory=list)
    behaviors: list[Behavior] = field(default_factory=list)
    constraints: list[Constraint] = field(default_factory=list)
    time: float = 0.0
    step_count: int = 0

    def __post_init__(self) -> None:
        self._next_id = 1
        # Registered nodes by identity (Node compares by identity).
        self._members: set[Node] = set(self.nodes)

    @classmethod
    def boxed(
        cls,
        width: float,
        height: float,
        gravity: Vector | tuple[float, float] = (0.0, 0.0),
        margin: float = 0.0,
        friction: float = 0.0,
        dt: float = DEFAULT_DT,
    ) -> World:
        """
        Create a world with gravity and walls around a width x height area.

        Args:
            width: Area width.
            height: Area height.
            gravity: Acceleration applied to every node.
            margin: Inset of the walls from the edges.
            friction: Wall friction coefficient.
            dt: Fixed timestep.
        """
        world = cls(dt=dt)
        world.add_behavior(GravityBehavior(Vector.from_any(gravity)))
        world.add_constraint(BoundaryFrictionConstraint(
            width=width, height=height, margin=margin, friction_coefficient=friction
        ))
        return world

    # -- registration ---------------------------------------------------------

    def add_node(self, node: Node | Vector | tuple[float, float], is_static: bool = False) -> Node:
        """
        Register a node, or create one at the given position.

        Args:
            node: An existing Node, or a position for a new node at rest.
            is_static: Pin state for a newly created node. Ignored when a
                       Node instance is passed.

        Returns:
            The registered node, with its id assigned.
        """
        if not isinstance(node, Node):
            node = Node(position=Vector.from_any(node), is_static=is_static)
        if self.has_node(node):
            return node
        node.id = self._next_id
        self._next_id += 1
        self.nodes.append(node)
        self._members.add(node)
        logger.debug("Added node %d at (%.3f, %.3f)", node.id, node.position.x, node.position.y)
        return node

    def has_node(self, node: Node) -> bool:
        return node in self._members

    def remove_node(self, node: Node) -> None:
        """
        Remove a node and every spring attached to it.

        Removing a node that is not registered does nothing.
        """
        if not self.has_node(node):
            return
        _discard(self.nodes, node)
        self._members.discard(node)
        kept = [s for s in self.springs if not s.involves(node)]
        dropped = len(self.springs) - len(kept)
        self.springs[:] = kept
        logger.debug("Removed node %d and %d attached spring(s)", node.id, dropped)

    def add_spring(
        self,
        a: Node,
        b: Node,
        stiffness: float,
        rest_length: float | None = None,
    ) -> Spring:
        """
        Connect two registered nodes with a spring.

        Args:
            a: First endpoint.
            b: Second endpoint. Anchoring b (static) gives a soft anchor.
            stiffness: Fraction of the length error corrected per step.
            rest_length: Target separation; defaults to the current one.

        Raises:
            ValueError: If either node is not registered in this world.
        """
        if not (self.has_node(a) and self.has_node(b)):
            raise ValueError(f"Spring references a node outside the world: {a.id} or {b.id}")
        spring = Spring(node_a=a, node_b=b, stiffness=stiffness, rest_length=rest_length)
        self.springs.append(spring)
        logger.debug(
            "Added spring %d-%d (rest_length=%.3f, stiffness=%.3f)",
            a.id, b.id, spring.rest_length, stiffness,
        )
        return spring

    def remove_spring(self, spring: Spring) -> None:
        """Remove a spring. Removing an unregistered spring does nothing."""
        if _discard(self.springs, spring):
            logger.debug("Removed spring %d-%d", spring.node_a.id, spring.node_b.id)

    def add_behavior(self, behavior: Behavior) -> Behavior:
        self.behaviors.append(behavior)
        logger.debug("Added behavior %s", type(behavior).__name__)
        return behavior

    def remove_behavior(self, behavior: Behavior) -> None:
        if _discard(self.behaviors, behavior):
            logger.debug("Removed behavior %s", type(behavior).__name__)

    def add_constraint(self, constraint: Constraint) -> Constraint:
        self.constraints.append(constraint)
        logger.debug("Added constraint %s", type(constraint).__name__)
        return constraint

    def remove_constraint(self, constraint: Constraint) -> None:
        if _discard(self.constraints, constraint):
            logger.debug("Removed constraint %s", type(constraint).__name__)

    # -- queries --------------------------------------------------------------

    def positions(self) -> np.ndarray:
        """
        Snapshot of all node positions as an (N, 2) float64 array.

        The array is a copy; later steps do not change it.
        """
        if not self.nodes:
            return np.zeros((0, 2), dtype=np.float64)
        return f64([n.position.as_tuple() for n in self.nodes])

    def nearest_node(self, point: Vector | tuple[float, float], radius: float) -> Node | None:
        """
        Find the node closest to point, strictly within radius.

        Used for picking nodes to drag or pin.

        Returns:
            The nearest node, or None if no node is close enough.
        """
        if not self.nodes:
            return None
        p = Vector.from_any(point).to_array()
        d = self.positions() - p
        dist2 = np.einsum("ij,ij->i", d, d)
        # a diverged node must not hide the others
        dist2 = np.where(np.isfinite(dist2), dist2, np.inf)
        i = int(np.argmin(dist2))
        if np.isfinite(dist2[i]) and dist2[i] < radius * radius:
            return self.nodes[i]
        return None

    # -- simulation -----------------------------------------------------------

    def _section(self, name: str):
        if self.profiler is None:
            return nullcontext()
        return self.profiler.section(name)

    def step(self) -> None:
        """
        Advance the simulation by one fixed tick of self.dt.
        """
        dt = self.dt

        with self._section("behaviors"):
            for behavior in self.behaviors:
                for node in self.nodes:
                    behavior.apply(node)

        with self._section("integrate"):
            for node in self.nodes:
                node.update_position(dt)

        with self._section("constraints"):
            for constraint in self.constraints:
                for node in self.nodes:
                    constraint.apply(node)

        with self._section("springs"):
            relax_springs(self.springs)

        self.time += dt
        self.step_count += 1
