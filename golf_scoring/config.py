"""Optional defaults for callers that configure scoring from the environment.

Nothing in the engine reads these; callers build a Settings and pass the
values in explicitly.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .schemas import ScoringConfig


class Settings(BaseSettings):
    """
    League scoring defaults.

    All settings can be overridden via GOLF_* environment variables.
    """

    handicap_allowance: float = Field(default=100.0, ge=0, le=100)
    stroke_value: float = Field(default=1.0)
    one_putt_value: float = Field(default=1.0)

    model_config = SettingsConfigDict(
        env_prefix="GOLF_",
        frozen=True,
        extra="ignore",
    )

    def scoring_config(self) -> ScoringConfig:
        return ScoringConfig(
            stroke_value=self.stroke_value,
            one_putt_value=self.one_putt_value,
        )
