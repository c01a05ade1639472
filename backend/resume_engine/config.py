import logging
import os
from dataclasses import dataclass
from typing import Callable, Optional

logger = logging.getLogger(__name__)

_DEFAULT_MODEL = "claude-haiku-4-5-20251001"
_DEFAULT_TIMEOUT_SECONDS = 15.0
_DEFAULT_MAX_TOKENS = 1500


@dataclass(frozen=True)
class InsightConfig:
    provider: str
    api_key: Optional[str]
    model: str
    timeout_seconds: float = _DEFAULT_TIMEOUT_SECONDS
    max_tokens: int = _DEFAULT_MAX_TOKENS

    @property
    def remote_enabled(self) -> bool:
        return self.provider == "anthropic" and bool(self.api_key)


def _positive_env(name: str, cast: Callable, default):
    """Read a positive number from the environment; bad values fall back to the default."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = cast(raw)
    except ValueError:
        value = None
    if value is None or value <= 0:
        logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default
    return value


def load_insight_config() -> InsightConfig:
    provider = os.getenv("INSIGHT_PROVIDER", "anthropic").strip().lower()
    api_key = os.getenv("ANTHROPIC_API_KEY", "").strip() or None
    model = os.getenv("CLAUDE_MODEL", _DEFAULT_MODEL).strip()
    return InsightConfig(
        provider=provider,
        api_key=api_key,
        model=model,
        timeout_seconds=_positive_env("INSIGHT_TIMEOUT_SECONDS", float, _DEFAULT_TIMEOUT_SECONDS),
        max_tokens=_positive_env("INSIGHT_MAX_TOKENS", int, _DEFAULT_MAX_TOKENS),
    )
