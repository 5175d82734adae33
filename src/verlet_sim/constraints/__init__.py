# MIT License (see LICENSE)
"""
Positional constraints for the point-mass simulation.

This subpackage provides:
    - Spring: Distance constraint between two nodes, relaxed once per step.
    - RectangleConstraint: Projection of nodes into an axis-aligned box.
    - BoundaryFrictionConstraint: Inelastic walls with Coulomb-like friction.

Typical usage:
    from verlet_sim.constraints import Spring, BoundaryFrictionConstraint

    spring = Spring(a, b, stiffness=0.5)
    spring.relax()
"""
from .bounds import BoundaryFrictionConstraint, Constraint, RectangleConstraint
from .spring import Spring, relax_springs

__all__ = [
    # Springs
    "Spring",
    "relax_springs",
    # Hard constraints
    "Constraint",
    "RectangleConstraint",
    "BoundaryFrictionConstraint",
]
