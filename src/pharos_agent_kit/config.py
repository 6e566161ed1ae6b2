"""Configuration for Pharos Agent Kit."""

import os
from dataclasses import dataclass
from typing import Literal

PriorityLevel = Literal["medium", "high", "veryHigh"]

PRIORITY_FEE_MULTIPLIERS: dict[str, float] = {
    "medium": 1.0,
    "high": 1.5,
    "veryHigh": 2.0,
}


@dataclass(frozen=True)
class AgentConfig:
    """Optional API keys and preferences shared by all action handlers."""

    openai_api_key: str | None = None
    perplexity_api_key: str | None = None
    priority_level: PriorityLevel = "medium"
    elfa_ai_api_key: str | None = None
    coingecko_pro_api_key: str | None = None
    coingecko_demo_api_key: str | None = None

    def __post_init__(self) -> None:
        if self.priority_level not in PRIORITY_FEE_MULTIPLIERS:
            raise ValueError(
                f"priority_level must be one of {', '.join(PRIORITY_FEE_MULTIPLIERS)}, "
                f"got {self.priority_level!r}"
            )

    @classmethod
    def from_env(cls) -> "AgentConfig":
        """Build a config from process environment variables."""
        return cls(
            openai_api_key=os.environ.get("OPENAI_API_KEY") or None,
            perplexity_api_key=os.environ.get("PERPLEXITY_API_KEY") or None,
            priority_level=os.environ.get("PRIORITY_LEVEL") or "medium",
            elfa_ai_api_key=os.environ.get("ELFA_AI_API_KEY") or None,
            coingecko_pro_api_key=os.environ.get("COINGECKO_PRO_API_KEY") or None,
            coingecko_demo_api_key=os.environ.get("COINGECKO_DEMO_API_KEY") or None,
        )

    @property
    def priority_fee_multiplier(self) -> float:
        return PRIORITY_FEE_MULTIPLIERS[self.priority_level]
