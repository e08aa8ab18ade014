"""
Microbenchmark: time per tick vs number of particles.
Run:
  python benchmarks/bench_ticks.py
"""
import time
import numpy as np
from lorentz_sim import Simulation, SimulationConfig
from lorentz_sim.profiler import Profiler


def run(n: int, ticks: int = 200):
    prof = Profiler()
    sim = Simulation(
        config=SimulationConfig(
            electric_field=(0.2, 0.1),
            magnetic_field=(0.0, 0.5, 1.0),
            magnetic_frequency=0.25,
            max_trail_length=100,
        ),
        profiler=prof,
    )

    rng = np.random.default_rng(12345)
    w, h = sim.config.viewport_size
    for _ in range(n):
        pos = (float(rng.uniform(0, w)), float(rng.uniform(0, h)))
        vel = (float(rng.normal(0, 5)), float(rng.normal(0, 5)))
        sim.spawn(pos, vel, int(rng.integers(-1, 2)), float(rng.uniform(0.5, 5.0)))
    sim.start()

    # warmup
    for _ in range(10):
        sim.tick()

    t0 = time.perf_counter()
    for _ in range(ticks):
        sim.tick()
    t1 = time.perf_counter()

    per_tick = (t1 - t0) / ticks
    return per_tick, sim.particle_count, prof.stats.summary()


if __name__ == "__main__":
    for n in [10, 100, 500, 1000, 5000]:
        per_tick, alive, summary = run(n)
        print(f"N={n:5d}  alive={alive:5d}  tick={1e3*per_tick:8.3f} ms  ticks/s={1/per_tick:8.1f}")
        for k in ["fields", "particles", "prune"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
