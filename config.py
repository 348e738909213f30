"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable."""
    return int(os.getenv(name, str(default)))


def _env_optional_int(name: str) -> int | None:
    """Read an integer environment variable that may be unset or empty."""
    value = os.getenv(name, "").strip()
    return int(value) if value else None


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean environment variable ("true"/"false")."""
    return os.getenv(name, str(default).lower()).lower() == "true"


@dataclass(frozen=True)
class GameConfig:
    """Table and betting defaults."""

    num_decks: int = field(default_factory=lambda: _env_int("BLACKJACK_DECKS", 6))
    penetration: float = field(
        default_factory=lambda: float(os.getenv("BLACKJACK_PENETRATION", "0.75"))
    )
    starting_balance: int = field(
        default_factory=lambda: _env_int("BLACKJACK_STARTING_BALANCE", 100)
    )
    default_bet: int = field(default_factory=lambda: _env_int("BLACKJACK_DEFAULT_BET", 10))
    show_hints: bool = field(default_factory=lambda: _env_flag("BLACKJACK_SHOW_HINTS", True))


@dataclass(frozen=True)
class SimulationConfig:
    """Monte Carlo simulation defaults."""

    rounds_per_run: int = field(
        default_factory=lambda: _env_int("BLACKJACK_ROUNDS_PER_RUN", 100)
    )
    max_rounds: int = field(default_factory=lambda: _env_int("BLACKJACK_MAX_ROUNDS", 10_000))
    workers: int | None = field(default_factory=lambda: _env_optional_int("BLACKJACK_WORKERS"))
    seed: int | None = field(default_factory=lambda: _env_optional_int("BLACKJACK_SEED"))


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: _env_flag("DEBUG", False))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())

    game: GameConfig = field(default_factory=GameConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)

    @property
    def effective_log_level(self) -> str:
        """DEBUG overrides the configured level."""
        return "DEBUG" if self.debug else self.log_level


# Global configuration instance
config = AppConfig()
