"""Configuration management with environment variable support."""

import os
import secrets
from dataclasses import dataclass, field
from decimal import Decimal

from blackjack_sim.rules import TableRules


def _parse_cors_origins() -> list[str]:
    """Parse CORS_ORIGINS environment variable."""
    origins = os.getenv("CORS_ORIGINS", "http://localhost:8000")
    return [o.strip() for o in origins.split(",") if o.strip()]


def _parse_log_path() -> str | None:
    """Parse BLACKJACK_LOG_PATH; an empty value turns the round log off."""
    path = os.getenv("BLACKJACK_LOG_PATH", "blackjack_log.txt").strip()
    return path or None


@dataclass(frozen=True)
class CORSConfig:
    """CORS configuration."""

    allowed_origins: list[str] = field(default_factory=_parse_cors_origins)
    allow_credentials: bool = True
    allow_methods: list[str] = field(default_factory=lambda: ["*"])
    allow_headers: list[str] = field(default_factory=lambda: ["*"])


@dataclass(frozen=True)
class SecurityConfig:
    """Security configuration."""

    secret_key: str = field(
        default_factory=lambda: os.getenv("SECRET_KEY", secrets.token_urlsafe(32))
    )


@dataclass(frozen=True)
class SimulatorConfig:
    """Simulation constants fixed at startup."""

    num_packs: int = 6
    reshuffle_threshold: int = 15
    bet_amount: Decimal = Decimal("10")
    initial_bankroll: Decimal = Decimal("1000")
    batch_rounds: int = 1000  # "Play many" default
    log_path: str | None = field(default_factory=_parse_log_path)

    def table_rules(self) -> TableRules:
        """Build the core table rules from this configuration."""
        return TableRules(
            num_packs=self.num_packs,
            reshuffle_threshold=self.reshuffle_threshold,
            bet_amount=self.bet_amount,
            initial_bankroll=self.initial_bankroll,
        )


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    session_ttl: int = 3600  # Session timeout in seconds

    simulator: SimulatorConfig = field(default_factory=SimulatorConfig)
    cors: CORSConfig = field(default_factory=CORSConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)


# Global configuration instance
config = AppConfig()
