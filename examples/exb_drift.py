from lorentz_sim import Simulation, SimulationConfig
from lorentz_sim.renderer import BufferedRenderer
import numpy as np

# Crossed fields: E along +y, B along +z. Charges of both signs drift along
# E × B (+x) at roughly |E| * 10 / |B| in stored-velocity units.
sim = Simulation(config=SimulationConfig(electric_field=(0.0, 0.5), magnetic_field=(0.0, 0.0, 2.0)))
sim.spawn((200.0, 300.0), (0.0, 0.0), +1, 1.0)
sim.spawn((200.0, 200.0), (0.0, 0.0), -1, 1.0)
sim.start()

renderer = BufferedRenderer()
for _ in range(600):
    sim.tick()
    renderer.render_simulation(sim)

first, last = renderer.frames[0], renderer.frames[-1]
for a, b in zip(first["particles"], last["particles"]):
    dx = np.subtract(b["position"], a["position"])
    print("particle", a["id"], "displacement:", dx)
