# MIT License (see LICENSE)
"""
verlet_sim - A 2D point-mass simulation driven by position Verlet.

This package provides the simulation core: nodes integrated with Verlet,
force behaviors, springs, and hard boundary constraints with friction.
Drawing, input capture and the frame loop belong to the host.

Main entry points:
    - World: Owns the simulation state and runs step().
    - Node: A point mass.
    - Vector: Immutable 2D vector.
    - Spring: Distance constraint between two nodes.
    - GravityBehavior: Uniform force on every node.
    - RectangleConstraint, BoundaryFrictionConstraint: Hard bounds.

Submodules:
    - core: Behaviors and invariant diagnostics.
    - constraints: Springs and bounds.
    - interaction: Drag and pin from an explicit input snapshot.
    - renderer: Optional visualization adapters.
    - logging_config: setup_logging() for hosts that want console or file logs.

Example:
    from verlet_sim import World, Vector

    world = World.boxed(800, 600, gravity=(0, 981), friction=0.5)
    anchor = world.add_node((400, 100), is_static=True)
    bob = world.add_node((500, 100))
    world.add_spring(anchor, bob, stiffness=0.5)
    world.step()
"""
from .types import Node, Vector
from .world import World
from .core.behaviors import GravityBehavior
from .constraints import BoundaryFrictionConstraint, RectangleConstraint, Spring
from .interaction import DragInteraction, InputSnapshot, toggle_pin
from .logging_config import setup_logging

__all__ = [
    # Core simulation
    "World",
    "Node",
    "Vector",
    # Behaviors and constraints
    "GravityBehavior",
    "Spring",
    "RectangleConstraint",
    "BoundaryFrictionConstraint",
    # Interaction
    "InputSnapshot",
    "DragInteraction",
    "toggle_pin",
    # Logging
    "setup_logging",
]
