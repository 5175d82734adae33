# examples/hanging_rope.py
from verlet_sim import World
from verlet_sim.core.invariants import kinetic_energy, max_spring_strain

world = World.boxed(800, 600, gravity=(0.0, 981.0), margin=5.0, friction=0.4)

links = 12
nodes = [world.add_node((400.0, 50.0), is_static=True)]
for i in range(1, links + 1):
    nodes.append(world.add_node((400.0 + 25.0 * i, 50.0)))
    world.add_spring(nodes[i - 1], nodes[i], stiffness=0.8)

for _ in range(600):
    world.step()

print("t:", world.time)
print("tip:", nodes[-1].position)
print("kinetic energy:", kinetic_energy(world.nodes, world.dt))
print("max strain:", max_spring_strain(world.springs))
