"""Command-line entry point: interactive game or bulk simulation."""

import argparse
import logging
import sys

from config import config
from core import __version__
from core.simulation import SimulationPolicy, StopRule, run_simulations
from core.strategy import BasicStrategy, RuleSet
from console.render import render_report
from console.session import InteractiveSession

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser, defaults taken from the environment config."""
    parser = argparse.ArgumentParser(
        prog="blackjack",
        description=(
            "Play Blackjack interactively, or simulate RUNS games played by "
            "basic strategy and report the aggregate earnings."
        ),
    )
    parser.add_argument(
        "runs",
        metavar="RUNS",
        nargs="?",
        type=int,
        default=-1,
        help="Number of simulated games; negative (default) starts the interactive game.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--seed",
        type=int,
        default=config.simulation.seed,
        help="Base random seed; run i uses seed + i.",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=config.simulation.rounds_per_run,
        help="Rounds per simulated game.",
    )
    parser.add_argument(
        "--until-bankrupt",
        action="store_true",
        help="Play each simulated game until the bet can no longer be covered.",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=config.simulation.workers,
        help="Worker threads for the simulation.",
    )
    parser.add_argument("--bet", type=int, default=config.game.default_bet, help="Bet per round.")
    parser.add_argument(
        "--balance",
        type=int,
        default=config.game.starting_balance,
        help="Starting credits.",
    )
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar.")
    parser.add_argument(
        "--log-level",
        default=config.effective_log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging verbosity.",
    )
    return parser


def configure_logging(level: str) -> None:
    """Route log records to stderr at the given level."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the chosen mode. Returns the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    rules = RuleSet(num_decks=config.game.num_decks, penetration=config.game.penetration)

    if args.runs < 0:
        logger.info("Starting interactive session")
        InteractiveSession(
            rules=rules,
            starting_balance=args.balance,
            default_bet=args.bet,
            show_hints=config.game.show_hints,
        ).run()
        return 0

    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be at least 1")

    try:
        policy = SimulationPolicy(
            starting_balance=args.balance,
            bet=args.bet,
            rounds_per_run=args.rounds,
            stop_rule=StopRule.UNTIL_BANKRUPT if args.until_bankrupt else StopRule.FIXED_ROUNDS,
            max_rounds=config.simulation.max_rounds,
            seed=args.seed,
        )
    except ValueError as exc:
        parser.error(str(exc))

    report = run_simulations(
        args.runs,
        BasicStrategy(rules),
        policy,
        workers=args.workers,
        progress=not args.no_progress,
    )
    print(render_report(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
