from verlet_sim import World
from verlet_sim.renderer import DebugRenderer

world = World.boxed(800, 600, gravity=(0.0, 981.0), margin=8.0, friction=0.6)

cols, rows, spacing = 10, 6, 30.0
grid = []
for j in range(rows):
    row = []
    for i in range(cols):
        pinned = j == 0 and i in (0, cols - 1)
        row.append(world.add_node((250.0 + i * spacing, 60.0 + j * spacing), is_static=pinned))
    grid.append(row)

for j in range(rows):
    for i in range(cols):
        if i + 1 < cols:
            world.add_spring(grid[j][i], grid[j][i + 1], stiffness=0.9)
        if j + 1 < rows:
            world.add_spring(grid[j][i], grid[j + 1][i], stiffness=0.9)

for _ in range(240):
    world.step()

DebugRenderer(verbose=False).render_world(world)
