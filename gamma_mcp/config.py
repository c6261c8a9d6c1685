"""Configuration management for the Gamma MCP tools.

Centralizes all environment variable access. GammaConfig is built once at
startup (GammaConfig.from_env) and passed to the client and poller; core
code never reads the environment itself.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Mapping, Optional, Tuple, Type

from gamma_mcp.core.errors import ConfigurationError
from gamma_mcp.core.retry_config import POLL_BACKOFF, SUBMIT_BACKOFF, PollConfig, RetryConfig
from gamma_mcp.models.generation import (
    CardDimension,
    CardSplit,
    ExportType,
    Format,
    ImageSource,
    TextAmount,
    TextMode,
)

API_KEY_PREFIX = "sk-gamma-"
DEFAULT_BASE_URL = "https://public-api.gamma.app"
DEFAULT_TIMEOUT_MS = 30000
DEFAULT_MAX_RETRIES = 3
DEFAULT_POLL_MAX_ATTEMPTS = 20
DEFAULT_NUM_CARDS = 10


def _parse_int(value: Optional[str], fallback: int, minimum: int) -> int:
    """Parse an integer override, falling back on anything invalid."""
    if not value:
        return fallback
    try:
        parsed = int(value.strip())
    except ValueError:
        return fallback
    return parsed if parsed >= minimum else fallback


def _parse_enum(value: Optional[str], enum_cls: Type[Enum]) -> Optional[str]:
    """Return value if it names a member of enum_cls, else None."""
    if not value:
        return None
    allowed = {member.value for member in enum_cls}
    value = value.strip()
    return value if value in allowed else None


def _parse_export_types(value: Optional[str]) -> Optional[Tuple[str, ...]]:
    """Parse a comma-separated export list, dropping invalid entries."""
    if not value:
        return None
    allowed = {member.value for member in ExportType}
    parsed = tuple(v.strip() for v in value.split(",") if v.strip() in allowed)
    return parsed or None


def validate_api_key(api_key: Optional[str]) -> str:
    """Reject missing or malformed credentials before any network activity.

    Raises:
        ConfigurationError: If the key is missing or lacks the known prefix
    """
    if not api_key:
        raise ConfigurationError("GAMMA_API_KEY environment variable is required")
    if not api_key.startswith(API_KEY_PREFIX):
        raise ConfigurationError(
            f'Invalid API key format. API key must start with "{API_KEY_PREFIX}"'
        )
    return api_key


@dataclass(frozen=True)
class GammaConfig:
    """Process-wide configuration: credential, limits, and request defaults."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    max_retries: int = DEFAULT_MAX_RETRIES
    poll_max_attempts: int = DEFAULT_POLL_MAX_ATTEMPTS

    # Request defaults, each applied independently when the caller omits it
    default_num_cards: int = DEFAULT_NUM_CARDS
    default_text_mode: Optional[str] = None
    default_format: Optional[str] = None
    default_card_split: Optional[str] = None
    default_text_amount: Optional[str] = None
    default_image_source: Optional[str] = None
    default_card_dimensions: Optional[str] = None
    default_export_as: Optional[Tuple[str, ...]] = field(default=None)

    def __post_init__(self):
        validate_api_key(self.api_key)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GammaConfig":
        """Build configuration from environment variables.

        Overrides are parsed defensively: invalid values fall back to the
        hard-coded defaults instead of raising.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Raises:
            ConfigurationError: If GAMMA_API_KEY is missing or malformed
        """
        env = os.environ if environ is None else environ

        return cls(
            api_key=validate_api_key(env.get("GAMMA_API_KEY")),
            base_url=env.get("GAMMA_BASE_URL") or DEFAULT_BASE_URL,
            timeout_ms=_parse_int(env.get("GAMMA_TIMEOUT_MS"), DEFAULT_TIMEOUT_MS, minimum=1),
            max_retries=_parse_int(env.get("GAMMA_MAX_RETRIES"), DEFAULT_MAX_RETRIES, minimum=0),
            poll_max_attempts=_parse_int(
                env.get("GAMMA_POLL_MAX_ATTEMPTS"), DEFAULT_POLL_MAX_ATTEMPTS, minimum=1
            ),
            default_num_cards=_parse_int(env.get("DEFAULT_NUM_CARDS"), DEFAULT_NUM_CARDS, minimum=1),
            default_text_mode=_parse_enum(env.get("DEFAULT_TEXT_MODE"), TextMode),
            default_format=_parse_enum(env.get("DEFAULT_FORMAT"), Format),
            default_card_split=_parse_enum(env.get("DEFAULT_CARD_SPLIT"), CardSplit),
            default_text_amount=_parse_enum(env.get("DEFAULT_TEXT_AMOUNT"), TextAmount),
            default_image_source=_parse_enum(env.get("DEFAULT_IMAGE_SOURCE"), ImageSource),
            default_card_dimensions=_parse_enum(env.get("DEFAULT_CARD_DIMENSIONS"), CardDimension),
            default_export_as=_parse_export_types(env.get("DEFAULT_EXPORT_AS")),
        )

    # Helper methods
    def submit_retry_config(self) -> RetryConfig:
        """Retry policy for the submission call."""
        return RetryConfig(max_retries=self.max_retries, backoff=SUBMIT_BACKOFF)

    def poll_config(self) -> PollConfig:
        """Schedule for the status polling loop."""
        return PollConfig(max_attempts=self.poll_max_attempts, backoff=POLL_BACKOFF)

    def get_default_export_as(self) -> Optional[List[str]]:
        return list(self.default_export_as) if self.default_export_as else None
