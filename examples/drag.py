# Scripted pointer: drag the end of a pendulum sideways, then let go.
from verlet_sim import DragInteraction, InputSnapshot, Vector, World

world = World.boxed(800, 600, gravity=(0.0, 981.0), friction=0.2)
anchor = world.add_node((400.0, 100.0), is_static=True)
bob = world.add_node((400.0, 300.0))
world.add_spring(anchor, bob, stiffness=0.7)

drag = DragInteraction(pick_radius=30.0)
pointer = Vector(400.0, 300.0)
for tick in range(180):
    pressed = tick < 60
    if pressed:
        pointer = pointer + Vector(3.0, 0.0)
    drag.update(world, InputSnapshot(pointer, pressed))
    world.step()

print("bob:", bob.position, "length:", (bob.position - anchor.position).length())
