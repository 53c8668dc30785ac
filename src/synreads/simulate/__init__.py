"""Simulation module for synthetic sequencing reads."""

from synreads.simulate.reads import run_read_simulation, simulate_records

__all__ = [
    "run_read_simulation",
    "simulate_records",
]
