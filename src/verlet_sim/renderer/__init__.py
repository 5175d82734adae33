# MIT License (see LICENSE)
"""
Rendering adapters for visualization.

This subpackage provides abstract and concrete renderer implementations:
    - RendererAdapter: Abstract base class defining the drawing interface.
    - DebugRenderer: Text output for debugging.
    - NullRenderer: No-op renderer for benchmarking.
    - BufferedRenderer: Records frames for playback.

The simulation has no drawing dependency; these adapters are optional.

Typical usage:
    from verlet_sim.renderer import DebugRenderer

    DebugRenderer().render_world(world)
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
]
