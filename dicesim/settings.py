"""Application configuration models."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from dicesim import config
from dicesim.models.dice import DiceVariant, DieSpec


class DiceConfig(BaseModel):
    """Configuration of the menu's die."""

    model_config = ConfigDict(validate_default=True)

    # Defaults are read from dicesim.config when each model is built
    side_count: int = Field(
        default_factory=lambda: config.DEFAULT_SIDE_COUNT, ge=1, description="Number of faces"
    )
    variant: DiceVariant = Field(
        default_factory=lambda: config.DEFAULT_DICE_VARIANT, description="fair or fixed"
    )
    seed: Optional[int] = Field(
        default_factory=lambda: config.DEFAULT_RNG_SEED, description="Seed for the fair die"
    )

    def to_spec(self) -> DieSpec:
        """Build the die description for this config."""
        return DieSpec(side_count=self.side_count, variant=self.variant, seed=self.seed)


class ConsoleConfig(BaseModel):
    """Configuration of the console menu."""

    model_config = ConfigDict(validate_default=True)

    max_input_length: int = Field(
        default_factory=lambda: config.DEFAULT_MAX_INPUT_LENGTH,
        ge=1,
        le=100000,
        description="Numeric answers are truncated to this length",
    )
    parse_failure_policy: Literal["reprompt", "fail"] = Field(
        default_factory=lambda: config.DEFAULT_PARSE_FAILURE_POLICY,
        description="Ask again on a non-numeric answer, or abort",
    )


class AppConfig(BaseModel):
    """Complete application configuration."""

    model_config = ConfigDict(validate_default=True)

    dice: DiceConfig = Field(default_factory=DiceConfig)
    console: ConsoleConfig = Field(default_factory=ConsoleConfig)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default_factory=lambda: config.DEFAULT_LOG_LEVEL, description="Root logging level"
    )


class AppConfigManager:
    """Manages application configuration."""

    def __init__(self, initial_config: Optional[AppConfig] = None) -> None:
        """Initialize with optional config."""
        self._config = initial_config or AppConfig()

    @property
    def config(self) -> AppConfig:
        """Get current config."""
        return self._config
