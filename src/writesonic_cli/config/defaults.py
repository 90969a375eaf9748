"""Run defaults: engine, language and copy count.

Each field resolves independently:
    explicit flag > persisted default > hard fallback

A copy count of zero or below is treated as "not set" rather than rejected,
both for the flag and for the persisted value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..constants import FALLBACK_COPIES, FALLBACK_ENGINE, FALLBACK_LANGUAGE, Engine
from .store import UserConfig

_logger = logging.getLogger("writesonic_api")


@dataclass(frozen=True)
class RunDefaults:
    """Settings sent as query parameters with every request."""

    engine: Engine
    language: str
    copies: int

    def query_params(self) -> dict[str, str]:
        """Query parameters shared by every operation."""
        return {
            "engine": self.engine.value,
            "language": self.language,
            "num_copies": str(self.copies),
        }


def resolve_defaults(
    config: UserConfig | None = None,
    engine: Engine | str | None = None,
    language: str | None = None,
    copies: int | None = None,
) -> RunDefaults:
    """Resolve run defaults from flags, config and fallbacks.

    Args:
        config: Persisted config (may be None)
        engine: --engine override
        language: --lang override
        copies: --copies override

    Returns:
        Fully populated RunDefaults.
    """
    config = config or UserConfig()

    if engine:
        resolved_engine = Engine(engine)
    elif config.default_engine:
        resolved_engine = config.default_engine
    else:
        resolved_engine = FALLBACK_ENGINE

    if language:
        resolved_language = language
    elif config.default_language:
        resolved_language = config.default_language
    else:
        resolved_language = FALLBACK_LANGUAGE

    if copies is not None and copies <= 0:
        _logger.warning(f"Ignoring non-positive copy count {copies}, using default")
        copies = None

    if copies is not None:
        resolved_copies = copies
    elif config.default_copies and config.default_copies > 0:
        resolved_copies = config.default_copies
    else:
        resolved_copies = FALLBACK_COPIES

    return RunDefaults(
        engine=resolved_engine,
        language=resolved_language,
        copies=resolved_copies,
    )
