# MIT License (see LICENSE)
"""
Pointer interaction: dragging and pinning nodes.

The host collects pointer/touch events and hands the current state to the
simulation once per tick as an InputSnapshot. Nothing here reads events or
keeps global input state, so interaction is deterministic and testable.

Typical host loop:
    drag = DragInteraction()
    while running:
        drag.update(world, InputSnapshot(pointer_pos, pointer_down))
        world.step()
"""
from __future__ import annotations
import logging
from dataclasses import dataclass

from .constants import DEFAULT_PICK_RADIUS
from .types import Node, Vector
from .world import World

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InputSnapshot:
    """
    Pointer state for one tick.

    Attributes:
        position: Pointer position in world coordinates.
        pressed: True while the button is held or the screen is touched.
    """
    position: Vector
    pressed: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", Vector.from_any(self.position))


class DragInteraction:
    """
    Drag the nearest node with the pointer.

    While the pointer is pressed, the held node is moved onto the pointer
    through Node.apply_impulse(), so static nodes can be picked but do not
    move. The node keeps following until release, even if the pointer moves
    faster than the pick radius.
    """

    def __init__(self, pick_radius: float = DEFAULT_PICK_RADIUS):
        self.pick_radius = pick_radius
        self.held: Node | None = None

    def update(self, world: World, snapshot: InputSnapshot) -> None:
        if not snapshot.pressed:
            if self.held is not None:
                logger.debug("Released node %d", self.held.id)
            self.held = None
            return

        if self.held is not None and not world.has_node(self.held):
            self.held = None

        if self.held is None:
            self.held = world.nearest_node(snapshot.position, self.pick_radius)
            if self.held is None:
                return
            logger.debug("Picked node %d", self.held.id)

        self.held.apply_impulse(snapshot.position - self.held.position)


def toggle_pin(world: World, point: Vector | tuple[float, float],
               radius: float = DEFAULT_PICK_RADIUS) -> Node | None:
    """
    Flip is_static on the node nearest to point.

    Returns:
        The toggled node, or None if no node is within radius.
    """
    node = world.nearest_node(point, radius)
    if node is None:
        return None
    node.is_static = not node.is_static
    logger.debug("Node %d is_static=%s", node.id, node.is_static)
    return node
