# MIT License (see LICENSE)
"""
Renderer adapters for simulation visualization.

The simulation core never draws. These adapters walk the world state in
draw order (springs under nodes) and hand each item to a backend: a canvas,
a text stream or a frame buffer.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

from ..constraints.spring import Spring
from ..types import Node

if TYPE_CHECKING:
    from ..world import World


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        renderer.begin_frame(world.time)
        for spring in world.springs:
            renderer.draw_spring(spring)
        for node in world.nodes:
            renderer.draw_node(node)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_world(world)
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        ...

    @abstractmethod
    def draw_spring(self, spring: Spring) -> None:
        ...

    @abstractmethod
    def draw_node(self, node: Node) -> None:
        ...

    @abstractmethod
    def end_frame(self) -> None:
        ...

    def render_world(self, world: "World") -> None:
        """Draw every spring, then every node, as one frame."""
        self.begin_frame(world.time)
        for spring in world.springs:
            self.draw_spring(spring)
        for node in world.nodes:
            self.draw_node(node)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer for development.

    Output:
        === Frame t=0.0167 ===
        spring 1-2 len=101.25 rest=100.00
        [1] pinned @ (0.00, 0.00)
        [2] @ (101.25, 0.00) v=(-1.25, 0.00)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, time: float) -> None:
        self.output.write(f"=== Frame t={time:.4f} ===\n")

    def draw_spring(self, spring: Spring) -> None:
        if not self.verbose:
            return
        self.output.write(
            f"spring {spring.node_a.id}-{spring.node_b.id} "
            f"len={spring.length():.2f} rest={spring.rest_length:.2f}\n"
        )

    def draw_node(self, node: Node) -> None:
        pos = node.position
        pinned = " pinned" if node.is_static else ""
        line = f"[{node.id}]{pinned} @ ({pos.x:.2f}, {pos.y:.2f})"
        if self.verbose and not node.is_static:
            v = node.velocity
            line += f" v=({v.x:.2f}, {v.y:.2f})"
        self.output.write(line + "\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for benchmarking the step without drawing cost."""

    def begin_frame(self, time: float) -> None:
        pass

    def draw_spring(self, spring: Spring) -> None:
        pass

    def draw_node(self, node: Node) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Records frames as plain Python data.

    Each frame is a dict:
        {"time": float,
         "springs": [(id_a, id_b), ...],
         "nodes": [{"id", "position", "is_static"}, ...]}

    Frames hold copies, so they can be handed to another thread or
    replayed after the world has moved on.
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {"time": time, "springs": [], "nodes": []}

    def draw_spring(self, spring: Spring) -> None:
        if self._current_frame is None:
            return
        self._current_frame["springs"].append((spring.node_a.id, spring.node_b.id))

    def draw_node(self, node: Node) -> None:
        if self._current_frame is None:
            return
        self._current_frame["nodes"].append({
            "id": node.id,
            "position": node.position.as_tuple(),
            "is_static": node.is_static,
        })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()
