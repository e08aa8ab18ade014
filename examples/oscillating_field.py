from lorentz_sim import Simulation, SimulationConfig
from lorentz_sim.renderer import DebugRenderer

# B pulses along z at 0.5 Hz; the orbit curvature reverses every half period.
sim = Simulation(config=SimulationConfig(magnetic_field=(0.0, 0.0, 3.0), magnetic_frequency=0.5))
sim.spawn((400.0, 300.0), (8.0, 0.0), +1, 1.0)
sim.spawn((400.0, 300.0), (0.0, 8.0), 0, 1.0)
sim.start()

print(sim.fields.describe())
renderer = DebugRenderer()
for i in range(200):
    sim.tick()
    if i % 50 == 0:
        renderer.render_simulation(sim)
