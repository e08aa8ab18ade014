# examples/cyclotron.py
from lorentz_sim import Simulation, SimulationConfig
import numpy as np

config = SimulationConfig(magnetic_field=(0.0, 0.0, 1.0), max_trail_length=200)
sim = Simulation(config=config)

pos_id = sim.spawn(position=(300.0, 300.0), velocity=(10.0, 0.0), charge_sign=+1, mass=1.0)
neg_id = sim.spawn(position=(500.0, 300.0), velocity=(10.0, 0.0), charge_sign=-1, mass=4.0)
sim.start()

omega = config.field_scale * 1.0 / 1.0
for _ in range(int(2 * np.pi / omega / config.time_step)):
    sim.tick()

for pid in (pos_id, neg_id):
    p = sim.get(pid)
    print(pid, "pos:", p.position, "speed:", float(np.linalg.norm(p.velocity)), "trail:", len(p.trail))
print("t:", sim.time)
