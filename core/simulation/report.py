"""Per-run results and the aggregate simulation report."""

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class RunResult:
    """Final state of one simulated run."""

    run_index: int
    starting_balance: int
    final_balance: int
    rounds: int
    wins: int
    losses: int
    pushes: int
    blackjacks: int
    bankrupt: bool

    @property
    def profit(self) -> int:
        """Return the run's earnings relative to its starting balance."""
        return self.final_balance - self.starting_balance


@dataclass(frozen=True)
class SummaryReport:
    """
    Aggregate of a simulation batch.

    ``total_runs`` counts every requested run; ``completed_runs`` and
    ``errored_runs`` always add up to it.
    """

    total_runs: int
    completed_runs: int
    errored_runs: int
    total_rounds: int
    wins: int
    losses: int
    pushes: int
    blackjacks: int
    bankrupt_runs: int
    total_earnings: int
    total_final_balance: int

    @property
    def average_earnings(self) -> float:
        """Return the mean profit per completed run."""
        if self.completed_runs == 0:
            return 0.0
        return self.total_earnings / self.completed_runs

    @property
    def average_final_balance(self) -> float:
        """Return the mean final balance per completed run."""
        if self.completed_runs == 0:
            return 0.0
        return self.total_final_balance / self.completed_runs

    @property
    def win_rate(self) -> float:
        """Return the fraction of rounds the player won."""
        if self.total_rounds == 0:
            return 0.0
        return self.wins / self.total_rounds


def summarize(results: Iterable[RunResult], errored_runs: int = 0) -> SummaryReport:
    """Fold per-run results into a report. Order of ``results`` does not matter."""
    results = list(results)
    return SummaryReport(
        total_runs=len(results) + errored_runs,
        completed_runs=len(results),
        errored_runs=errored_runs,
        total_rounds=sum(r.rounds for r in results),
        wins=sum(r.wins for r in results),
        losses=sum(r.losses for r in results),
        pushes=sum(r.pushes for r in results),
        blackjacks=sum(r.blackjacks for r in results),
        bankrupt_runs=sum(1 for r in results if r.bankrupt),
        total_earnings=sum(r.profit for r in results),
        total_final_balance=sum(r.final_balance for r in results),
    )
