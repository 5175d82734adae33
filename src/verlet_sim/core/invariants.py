# MIT License (see LICENSE)
"""
Diagnostics for checking simulation health.

Used by tests and hosts to verify that a configuration settles instead of
gaining energy, and that no NaN has entered the node state. All nodes are
treated as unit masses.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Iterable

import numpy as np

from ..types import Node
from ..util import f64

if TYPE_CHECKING:
    from ..constraints.spring import Spring


def _displacements(nodes: Iterable[Node]) -> np.ndarray:
    """Pending per-node displacement as an (N, 2) array."""
    rows = [n.displacement().as_tuple() for n in nodes]
    if not rows:
        return np.zeros((0, 2), dtype=np.float64)
    return f64(rows)


def kinetic_energy(nodes: Iterable[Node], dt: float) -> float:
    """
    Total kinetic energy of the free nodes.

    T = Σ 0.5 * |(x - x_last) / dt|²

    Static nodes are skipped.

    Args:
        nodes: Nodes to sum over.
        dt: Timestep used to turn per-tick displacement into velocity.
    """
    d = _displacements(n for n in nodes if not n.is_static)
    if d.size == 0:
        return 0.0
    v = d / dt
    return float(0.5 * np.sum(v * v))


def max_spring_strain(springs: Iterable[Spring]) -> float:
    """
    Largest absolute deviation of any spring from its rest length.

    Returns 0.0 for an empty collection.
    """
    strains = np.array([abs(s.strain()) for s in springs], dtype=np.float64)
    if strains.size == 0:
        return 0.0
    return float(strains.max())


def all_finite(nodes: Iterable[Node]) -> bool:
    """True if every position and previous position is finite (no NaN/Inf)."""
    return all(n.position.is_finite() and n.position_last.is_finite() for n in nodes)
