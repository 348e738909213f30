"""Parallel Monte Carlo simulation."""

from core.simulation.report import RunResult, SummaryReport, summarize
from core.simulation.driver import SimulationPolicy, StopRule, play_run, run_simulations

__all__ = [
    "RunResult",
    "SummaryReport",
    "summarize",
    "SimulationPolicy",
    "StopRule",
    "play_run",
    "run_simulations",
]
