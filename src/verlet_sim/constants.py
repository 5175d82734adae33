# MIT License (see LICENSE)
"""
Fixed constants used throughout the simulation.

Units are abstract: positions are in canvas units (pixels for a typical
host) and time is measured in ticks of DEFAULT_DT.
"""
from __future__ import annotations

# Fixed simulation timestep. The host loop calls World.step() once per frame
# and is responsible for matching wall-clock time to this value.
DEFAULT_DT: float = 1 / 60

# Spring impulse distribution.
# Free/free: each endpoint takes half of the correction.
SPRING_SHARE_FREE: float = 0.5
# Anchored at B: the free endpoint A only takes a fifth of the correction.
# This soft anchor is intentionally weaker than the anchored-at-A case,
# where B takes the full correction.
SPRING_SHARE_SOFT_ANCHOR: float = 0.2

# Stable range for single-pass spring relaxation.
STIFFNESS_MIN: float = 0.0
STIFFNESS_MAX: float = 1.0

# Default pick radius for drag interaction, in position units.
DEFAULT_PICK_RADIUS: float = 30.0
