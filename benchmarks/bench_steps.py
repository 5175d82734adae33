"""
Microbenchmark: time per step vs number of nodes in a cloth grid.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from verlet_sim.world import World
from verlet_sim.core.behaviors import GravityBehavior
from verlet_sim.constraints.bounds import BoundaryFrictionConstraint
from verlet_sim.profiler import Profiler
from verlet_sim.renderer import NullRenderer
from verlet_sim.types import Vector

def run(side: int, steps: int = 300):
    prof = Profiler()
    world = World(profiler=prof)
    world.add_behavior(GravityBehavior(Vector(0.0, 981.0)))
    world.add_constraint(BoundaryFrictionConstraint(width=2000.0, height=2000.0, margin=5.0,
                                                    friction_coefficient=0.3))
    renderer = NullRenderer()

    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)
    grid = []
    for j in range(side):
        row = []
        for i in range(side):
            x = 100.0 + 10.0 * i + 0.1 * float(rng.normal())
            y = 100.0 + 10.0 * j + 0.1 * float(rng.normal())
            row.append(world.add_node((x, y), is_static=(j == 0)))
        grid.append(row)
    for j in range(side):
        for i in range(side):
            if i + 1 < side:
                world.add_spring(grid[j][i], grid[j][i + 1], stiffness=0.9)
            if j + 1 < side:
                world.add_spring(grid[j][i], grid[j + 1][i], stiffness=0.9)

    # warmup
    for _ in range(30):
        world.step()
    prof.stats.reset()

    t0 = time.perf_counter()
    for _ in range(steps):
        world.step()
        renderer.render_world(world)
    t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    return per_step, prof.stats.summary()

if __name__ == "__main__":
    for side in [5, 10, 20, 40]:
        per_step, summary = run(side)
        print(f"N={side * side:5d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
        for k in ["behaviors", "integrate", "constraints", "springs"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
