import logging
import math

import pytest
from verlet_sim.constraints.spring import Spring, relax_springs
from verlet_sim.types import Node, Vector
from verlet_sim.world import World


def test_rest_length_defaults_to_initial_separation():
    a = Node((0.0, 0.0))
    b = Node((3.0, 4.0))
    s = Spring(a, b, stiffness=0.5)
    assert s.rest_length == 5.0
    assert s.strain() == 0.0


def test_explicit_zero_rest_length_is_kept():
    s = Spring(Node((0.0, 0.0)), Node((3.0, 4.0)), stiffness=0.5, rest_length=0.0)
    assert s.rest_length == 0.0
    assert s.strain() == 5.0


def test_free_pair_shares_correction():
    """
    d = a - b = (-120, 0), rest 100, k = 0.5:
      movement = n̂ · k · (|d| - rest) = (-10, 0)
      a -= 0.5 · movement, b += 0.5 · movement
    """
    a = Node((0.0, 0.0))
    b = Node((120.0, 0.0))
    Spring(a, b, stiffness=0.5, rest_length=100.0).relax()

    assert a.position == Vector(5.0, 0.0)
    assert b.position == Vector(115.0, 0.0)
    # midpoint preserved
    assert (a.position.x + b.position.x) / 2 == 60.0


def test_anchor_at_a_pulls_b_with_full_strength():
    anchor = Node((0.0, 0.0), is_static=True)
    free = Node((120.0, 0.0))
    Spring(anchor, free, stiffness=0.5, rest_length=100.0).relax()

    assert anchor.position == Vector(0.0, 0.0)
    assert free.position.x == pytest.approx(110.0)
    assert free.position.y == 0.0


def test_anchor_at_b_is_soft():
    """The free endpoint A moves only 0.2x as far as in the anchored-at-A case."""
    a_anchor = Node((0.0, 0.0), is_static=True)
    b_free = Node((120.0, 0.0))
    Spring(a_anchor, b_free, stiffness=0.5, rest_length=100.0).relax()
    full = (b_free.position - Vector(120.0, 0.0)).length()

    a_free = Node((120.0, 0.0))
    b_anchor = Node((0.0, 0.0), is_static=True)
    Spring(a_free, b_anchor, stiffness=0.5, rest_length=100.0).relax()
    soft = (a_free.position - Vector(120.0, 0.0)).length()

    assert b_anchor.position == Vector(0.0, 0.0)
    # both move toward the anchor
    assert b_free.position.x < 120.0
    assert a_free.position.x < 120.0
    assert full == pytest.approx(10.0)
    assert soft == pytest.approx(0.2 * full)


def test_compressed_spring_pushes_apart():
    anchor = Node((0.0, 0.0), is_static=True)
    free = Node((50.0, 0.0))
    Spring(anchor, free, stiffness=1.0, rest_length=100.0).relax()
    assert free.position.x == pytest.approx(100.0)


def test_both_static_no_effect():
    a = Node((0.0, 0.0), is_static=True)
    b = Node((120.0, 0.0), is_static=True)
    Spring(a, b, stiffness=1.0, rest_length=10.0).relax()
    assert a.position == Vector(0.0, 0.0)
    assert b.position == Vector(120.0, 0.0)


def test_coincident_endpoints_do_not_produce_nan():
    a = Node((5.0, 5.0))
    b = Node((5.0, 5.0))
    s = Spring(a, b, stiffness=0.8, rest_length=10.0)
    for _ in range(10):
        s.relax()
    for n in (a, b):
        assert math.isfinite(n.position.x) and math.isfinite(n.position.y)
        assert n.position == Vector(5.0, 5.0)


def test_spring_equilibrium_is_stable():
    """A spring started at rest length with no forces never moves."""
    world = World()
    a = world.add_node((0.0, 0.0))
    b = world.add_node((3.0, 4.0))
    world.add_spring(a, b, stiffness=0.5)

    for _ in range(500):
        world.step()

    assert a.position == Vector(0.0, 0.0)
    assert b.position == Vector(3.0, 4.0)


def test_relax_springs_runs_in_order():
    """Each relaxation sees the previous one's result (chain anchored at a)."""
    a = Node((0.0, 0.0), is_static=True)
    b = Node((20.0, 0.0))
    c = Node((40.0, 0.0))
    s1 = Spring(a, b, stiffness=1.0, rest_length=10.0)
    s2 = Spring(b, c, stiffness=1.0, rest_length=10.0)

    relax_springs([s1, s2])

    # s1 snaps b to 10; s2 then sees |b - c| = 30 and splits the 20 error.
    assert b.position.x == pytest.approx(20.0)
    assert c.position.x == pytest.approx(30.0)


def test_involves_checks_endpoints_by_identity():
    a, b, c = Node((0.0, 0.0)), Node((1.0, 0.0)), Node((2.0, 0.0))
    s = Spring(a, b, stiffness=0.5)
    assert s.involves(a) and s.involves(b) and not s.involves(c)


def test_out_of_range_stiffness_is_accepted_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="verlet_sim"):
        s = Spring(Node((0.0, 0.0)), Node((1.0, 0.0)), stiffness=1.5)
    assert s.stiffness == 1.5
    assert "outside" in caplog.text
