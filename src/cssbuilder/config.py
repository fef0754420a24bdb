from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = frozenset({"1", "true", "yes", "on"})

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class BuilderConfig:
    strict_combinators: bool = False  # reject combinators outside " ", ">", "~", "+"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> BuilderConfig:
        """Create config from environment variables.

        Checks CSSBUILDER_STRICT_COMBINATORS and CSSBUILDER_LOG_LEVEL.
        Unset variables and unknown log levels keep their defaults.
        """
        strict = os.environ.get("CSSBUILDER_STRICT_COMBINATORS", "")
        level = os.environ.get("CSSBUILDER_LOG_LEVEL", "").strip().upper()
        return cls(
            strict_combinators=strict.strip().lower() in _TRUTHY,
            log_level=level if level in LOG_LEVELS else cls.log_level,
        )
