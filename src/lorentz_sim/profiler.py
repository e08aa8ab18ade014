# MIT License (see LICENSE)
"""
Lightweight per-section timing for simulation ticks.

Simulation.tick() records three sections when a profiler is attached:
"fields" (field evaluation), "particles" (force + integration + trail for
every particle) and "prune" (removal of flagged particles).

Example:
    profiler = Profiler()
    sim = Simulation(profiler=profiler)
    ...
    print(profiler.stats.summary()["particles"]["mean_ms"])
"""
from __future__ import annotations
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class ProfileStats:
    """Raw timing samples (seconds) keyed by section name."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, seconds: float) -> None:
        self.samples.setdefault(name, []).append(seconds)

    def total_ms(self, name: str) -> float:
        """Sum of all samples for a section, in milliseconds (0 if unseen)."""
        return 1e3 * sum(self.samples.get(name, ()))

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-section statistics.

        Returns:
            Mapping of section name to {'n', 'mean_ms', 'max_ms'}.
        """
        return {
            name: {
                "n": len(times),
                "mean_ms": 1e3 * sum(times) / len(times),
                "max_ms": 1e3 * max(times),
            }
            for name, times in self.samples.items()
            if times
        }


class Profiler:
    """Collects wall-clock timings of named code sections."""

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block and record it under name."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)

    def reset(self) -> None:
        """Discard all recorded samples."""
        self.stats = ProfileStats()
