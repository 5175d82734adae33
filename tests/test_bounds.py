import pytest
from verlet_sim.constraints.bounds import BoundaryFrictionConstraint, RectangleConstraint
from verlet_sim.types import Node, Vector


def _moving_node(position, velocity) -> Node:
    """Node as it looks right after integration with the given velocity."""
    p = Vector.from_any(position)
    v = Vector.from_any(velocity)
    n = Node(position=p, position_last=p - v)
    n.velocity = v
    return n


# =============================================================================
# RectangleConstraint
# =============================================================================

def test_rectangle_projects_inside():
    box = RectangleConstraint(origin=(10.0, 10.0), extent=(100.0, 50.0))

    n = Node((-5.0, 100.0))
    box.apply(n)
    assert n.position == Vector(10.0, 60.0)

    inside = Node((50.0, 30.0))
    box.apply(inside)
    assert inside.position == Vector(50.0, 30.0)


def test_rectangle_leaves_static_nodes_alone():
    box = RectangleConstraint(origin=(0.0, 0.0), extent=(10.0, 10.0))
    n = Node((50.0, 50.0), is_static=True)
    box.apply(n)
    assert n.position == Vector(50.0, 50.0)


# =============================================================================
# BoundaryFrictionConstraint
# =============================================================================

def test_left_wall_clamps_and_absorbs_normal_velocity():
    walls = BoundaryFrictionConstraint(width=100.0, height=100.0, margin=5.0)
    n = _moving_node((-3.0, 50.0), (-2.0, 0.0))

    walls.apply(n)

    assert n.position.x == 5.0
    assert n.position_last.x == 5.0
    # next tick sees no normal velocity
    n.update_position(1 / 60)
    assert n.velocity.x == 0.0
    assert n.position.x == 5.0


def test_each_wall_clamps_to_margin():
    walls = BoundaryFrictionConstraint(width=200.0, height=100.0, margin=10.0)

    right = _moving_node((250.0, 50.0), (5.0, 0.0))
    walls.apply(right)
    assert right.position == Vector(190.0, 50.0)

    top = _moving_node((50.0, -1.0), (0.0, -3.0))
    walls.apply(top)
    assert top.position == Vector(50.0, 10.0)

    bottom = _moving_node((50.0, 120.0), (0.0, 3.0))
    walls.apply(bottom)
    assert bottom.position == Vector(50.0, 90.0)


def test_inside_node_untouched():
    walls = BoundaryFrictionConstraint(width=100.0, height=100.0, margin=0.0, friction_coefficient=1.0)
    n = _moving_node((50.0, 50.0), (3.0, -4.0))
    last = n.position_last
    walls.apply(n)
    assert n.position == Vector(50.0, 50.0)
    assert n.position_last == last


def test_friction_fully_arrests_slow_slide():
    """
    Hitting the top wall with velocity (2, -3) and μ = 1:
      j = 2 (tangential), k = |−3 · 1| = 3 → |j| ≤ k, the slide stops.
    """
    walls = BoundaryFrictionConstraint(width=100.0, height=100.0, margin=0.0, friction_coefficient=1.0)
    n = Node(position=(10.0, 1.0), position_last=(8.0, 4.0))
    n.update_position(1 / 60)
    assert n.position == Vector(12.0, -2.0)

    walls.apply(n)
    assert n.position == Vector(12.0, 0.0)

    n.update_position(1 / 60)
    assert n.velocity == Vector(0.0, 0.0)
    assert n.position == Vector(12.0, 0.0)


def test_friction_partially_slows_fast_slide():
    """μ = 0.5: k = 1.5 < j = 2, residual slip of 0.5 per tick."""
    walls = BoundaryFrictionConstraint(width=100.0, height=100.0, margin=0.0, friction_coefficient=0.5)
    n = Node(position=(10.0, 1.0), position_last=(8.0, 4.0))
    n.update_position(1 / 60)

    walls.apply(n)

    n.update_position(1 / 60)
    assert n.velocity.x == pytest.approx(0.5)
    assert n.velocity.y == 0.0


def test_friction_opposes_negative_slide():
    walls = BoundaryFrictionConstraint(width=100.0, height=100.0, margin=0.0, friction_coefficient=0.5)
    n = _moving_node((40.0, 103.0), (-4.0, 4.0))

    walls.apply(n)

    assert n.position == Vector(40.0, 100.0)
    # k = 2, slide of -4 reduced to -2
    assert n.displacement().x == pytest.approx(-2.0)
    assert n.displacement().y == 0.0


def test_frictionless_wall_keeps_tangential_velocity():
    walls = BoundaryFrictionConstraint(width=100.0, height=100.0, margin=0.0, friction_coefficient=0.0)
    n = _moving_node((-1.0, 50.0), (-1.0, 7.0))
    walls.apply(n)
    assert n.displacement() == Vector(0.0, 7.0)


def test_corner_applies_both_walls_without_energy_gain():
    walls = BoundaryFrictionConstraint(width=100.0, height=100.0, margin=0.0, friction_coefficient=0.25)
    n = _moving_node((-4.0, -3.0), (-4.0, -3.0))

    walls.apply(n)

    assert n.position == Vector(0.0, 0.0)
    # the second wall must not push the node back out of the first one
    assert n.displacement() == Vector(0.0, 0.0)


def test_boundary_skips_static_nodes():
    walls = BoundaryFrictionConstraint(width=100.0, height=100.0, margin=0.0, friction_coefficient=1.0)
    n = Node((-50.0, -50.0), is_static=True)
    walls.apply(n)
    assert n.position == Vector(-50.0, -50.0)


def test_friction_above_one_stops_but_never_reverses_slide():
    """μ = 10: k = 30 far exceeds j = 5, so the slide just stops."""
    walls = BoundaryFrictionConstraint(width=100.0, height=100.0, margin=0.0, friction_coefficient=10.0)
    n = _moving_node((10.0, -2.0), (5.0, -3.0))

    walls.apply(n)

    assert n.position == Vector(10.0, 0.0)
    assert n.displacement() == Vector(0.0, 0.0)
    assert n.position.is_finite() and n.position_last.is_finite()

    corner = _moving_node((-4.0, -3.0), (-4.0, -3.0))
    walls.apply(corner)
    assert corner.position == Vector(0.0, 0.0)
    assert corner.displacement() == Vector(0.0, 0.0)


def test_negative_friction_acts_like_its_magnitude():
    """k = |v_n · μ| so μ = -0.5 slows the slide exactly like μ = 0.5."""
    walls = BoundaryFrictionConstraint(width=100.0, height=100.0, margin=0.0, friction_coefficient=-0.5)
    n = _moving_node((40.0, 103.0), (-4.0, 4.0))

    walls.apply(n)

    assert n.position == Vector(40.0, 100.0)
    assert n.displacement().x == pytest.approx(-2.0)
    assert n.displacement().y == 0.0
    assert n.position.is_finite() and n.position_last.is_finite()
