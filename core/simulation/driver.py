"""Monte Carlo driver: many independent runs in parallel, folded into one report."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from enum import Enum, auto
from random import Random

from tqdm import tqdm

from core.exceptions import InsufficientFundsError
from core.simulation.report import RunResult, SummaryReport, summarize
from core.strategy.basic import BasicStrategy
from core.strategy.deciders import StrategyDecider
from core.table import Table

logger = logging.getLogger(__name__)


class StopRule(Enum):
    """When a simulated run stops."""

    FIXED_ROUNDS = auto()  # rounds_per_run rounds, or earlier if bankrupt
    UNTIL_BANKRUPT = auto()  # until the bet cannot be covered, capped at max_rounds


@dataclass(frozen=True)
class SimulationPolicy:
    """How each simulated run bets and when it stops."""

    starting_balance: int = 100
    bet: int = 10
    rounds_per_run: int = 100
    stop_rule: StopRule = StopRule.FIXED_ROUNDS
    max_rounds: int = 10_000
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.bet <= 0:
            raise ValueError("bet must be positive")
        if self.starting_balance < 0:
            raise ValueError("starting_balance cannot be negative")
        if self.rounds_per_run < 0 or self.max_rounds < 0:
            raise ValueError("round limits cannot be negative")

    @property
    def round_limit(self) -> int:
        """Return the most rounds a single run may play."""
        if self.stop_rule == StopRule.UNTIL_BANKRUPT:
            return self.max_rounds
        return self.rounds_per_run

    def rng_for(self, run_index: int) -> Random:
        """Return the run's private random generator."""
        if self.seed is None:
            return Random()
        return Random(self.seed + run_index)


def play_run(
    run_index: int,
    strategy: BasicStrategy,
    policy: SimulationPolicy,
) -> RunResult:
    """
    Play one simulated game from a fresh shoe and balance.

    Args:
        run_index: Position of the run in the batch (selects the seed)
        strategy: Shared, read-only strategy table
        policy: Betting and stopping policy

    Returns:
        The run's final balance and tallies
    """
    table = Table(
        rules=strategy.rules,
        starting_balance=policy.starting_balance,
        rng=policy.rng_for(run_index),
    )
    decider = StrategyDecider(strategy)

    rounds = 0
    bankrupt = False
    while rounds < policy.round_limit:
        try:
            table.play_round(policy.bet, decider)
        except InsufficientFundsError:
            bankrupt = True
            break
        rounds += 1

    stats = table.ledger.stats
    return RunResult(
        run_index=run_index,
        starting_balance=policy.starting_balance,
        final_balance=table.balance,
        rounds=rounds,
        wins=stats.wins,
        losses=stats.losses,
        pushes=stats.pushes,
        blackjacks=stats.blackjacks,
        bankrupt=bankrupt,
    )


def run_simulations(
    n: int,
    strategy: BasicStrategy | None = None,
    policy: SimulationPolicy | None = None,
    workers: int | None = None,
    progress: bool = False,
) -> SummaryReport:
    """
    Run ``n`` independent games on a thread pool and aggregate them.

    A run that raises is logged and counted in ``errored_runs``; the other
    runs are unaffected.

    Args:
        n: Number of runs
        strategy: Strategy table shared by all workers (default rules if None)
        policy: Betting and stopping policy (defaults if None)
        workers: Thread pool size (executor default if None)
        progress: Show a progress bar on stderr

    Returns:
        The aggregate report
    """
    if n < 0:
        raise ValueError("Number of runs cannot be negative")

    strategy = strategy or BasicStrategy()
    policy = policy or SimulationPolicy()

    logger.info(
        "Starting simulation of %d runs (stop rule %s, seed %s)",
        n,
        policy.stop_rule.name,
        policy.seed,
    )

    results: dict[int, RunResult] = {}
    errored = 0

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {
            executor.submit(play_run, index, strategy, policy): index
            for index in range(n)
        }
        for future in tqdm(
            as_completed(futures),
            total=n,
            desc="Simulating",
            unit="run",
            disable=not progress,
        ):
            index = futures[future]
            try:
                results[index] = future.result()
            except Exception:
                logger.exception("Simulated run %d failed", index)
                errored += 1

    report = summarize((results[i] for i in sorted(results)), errored_runs=errored)
    logger.info(
        "Simulation complete: %d completed, %d errored, earnings %d",
        report.completed_runs,
        report.errored_runs,
        report.total_earnings,
    )
    return report
