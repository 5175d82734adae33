# MIT License (see LICENSE)
"""
Core simulation components.

This subpackage provides:
    - Behaviors: per-node force generators (gravity).
    - Invariants: energy, strain and finiteness diagnostics.

Typical usage:
    from verlet_sim.core import GravityBehavior

    world.add_behavior(GravityBehavior(Vector(0, 981)))
"""
from .behaviors import Behavior, GravityBehavior
from .invariants import all_finite, kinetic_energy, max_spring_strain

__all__ = [
    # Behaviors
    "Behavior",
    "GravityBehavior",
    # Diagnostics
    "kinetic_energy",
    "max_spring_strain",
    "all_finite",
]
