"""
Application settings.

Read from environment variables once at startup. Anything not set falls back to a default that runs
the whole backend in-process (in-memory game registry, sqlite file only when the SQL backend is picked).
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Self

REPOSITORY_BACKENDS = ("memory", "sql")
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    repository: str = "memory"
    database_url: str = "sqlite:///./chess.db"
    database_echo: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    def __post_init__(self) -> None:
        if self.repository not in REPOSITORY_BACKENDS:
            raise ValueError(
                f"Unknown repository backend {self.repository!r}. Pick one from {', '.join(REPOSITORY_BACKENDS)}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Self:
        """Build settings from CHESS_* environment variables (or any mapping, handy for tests)."""
        env = os.environ if environ is None else environ
        defaults = cls()
        origins = env.get("CHESS_CORS_ORIGINS")
        return cls(
            repository=env.get("CHESS_REPOSITORY", defaults.repository).lower(),
            database_url=env.get("CHESS_DATABASE_URL", defaults.database_url),
            database_echo=_as_bool(env.get("CHESS_DATABASE_ECHO", "false")),
            log_level=env.get("CHESS_LOG_LEVEL", defaults.log_level).upper(),
            cors_origins=(
                [origin.strip() for origin in origins.split(",") if origin.strip()]
                if origins
                else defaults.cors_origins
            ),
        )


def configure_logging(level: str = "INFO") -> None:
    """Root logger setup. Modules just ask for `logging.getLogger(__name__)`."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
