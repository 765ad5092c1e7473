"""Runtime configuration for the talentscout kernel tools."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from talentscout.scout.perception import PerceptionCurve


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="TALENTSCOUT_", env_file=".env", extra="ignore")

    app_name: str = "talentscout"
    log_level: str = "INFO"
    default_seed: str = Field(default="talentscout", description="Seed used when none is supplied.")
    state_path: str | None = Field(default=None, description="Default GameState JSON file for CLI commands.")

    perception_skill_weight: float = Field(default=0.5, ge=0.0, le=1.0)
    perception_duration_saturation: float = Field(default=10.0, gt=0.0)
    perception_ca_max_half_width: float = Field(default=4.0, ge=0.0)
    perception_pa_max_half_width: float = Field(default=6.0, ge=0.0)
    perception_confidence_floor: float = Field(default=0.15, gt=0.0, le=1.0)

    def perception_curve(self) -> PerceptionCurve:
        return PerceptionCurve(
            skill_weight=self.perception_skill_weight,
            duration_saturation=self.perception_duration_saturation,
            ca_max_half_width=self.perception_ca_max_half_width,
            pa_max_half_width=self.perception_pa_max_half_width,
            confidence_floor=self.perception_confidence_floor,
        )


settings = Settings()
