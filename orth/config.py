from __future__ import annotations
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path

_TRUTHY = {"1", "true", "yes", "on"}

# Defaults
_DEFAULT_SOURCE = Path("test.orth")
_DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class EvalOptions:
    """Whether soft faults abort evaluation.

    strict_words: an unbound word raises OrthUnboundWord instead of being
        reported and skipped.
    strict_types: an operand of the wrong variant raises OrthTypeError instead
        of turning the primitive into a no-op.
    """
    strict_words: bool = False
    strict_types: bool = False

    def with_overrides(self, **overrides: bool | None) -> EvalOptions:
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def load_options() -> EvalOptions:
    strict = flag_from_env('ORTH_STRICT')
    return EvalOptions(
        strict_words=flag_from_env('ORTH_STRICT_WORDS', strict),
        strict_types=flag_from_env('ORTH_STRICT_TYPES', strict),
    )


def get_log_level() -> str:
    """ORTH_LOG_LEVEL if it names a logging level, else WARNING."""
    level = os.environ.get('ORTH_LOG_LEVEL', '').strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return _DEFAULT_LOG_LEVEL


def get_default_source() -> Path:
    raw = os.environ.get('ORTH_SOURCE')
    return Path(raw) if raw else _DEFAULT_SOURCE
