"""
Configuration management for PawScore.
Loads settings from environment variables and provides typed configuration access.
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PAWSCORE_",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Settings
    environment: str = Field(default="development", description="Environment: development, staging, production")
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Expiry warnings
    license_warning_days: int = Field(default=30, description="Days before license expiry to warn")
    license_urgent_days: int = Field(default=7, description="Days before license expiry that renewal is urgent")
    certification_warning_days: int = Field(default=30, description="Days before certification expiry to warn")

    # Employment
    probation_days: int = Field(default=90, description="Probation period length in days")
    benefits_min_days: int = Field(default=90, description="Days employed before benefits eligibility")
    full_time_weekly_hours: float = Field(default=40, description="Default weekly hours for full-time staff")
    part_time_weekly_hours: float = Field(default=20, description="Default weekly hours for part-time staff")
    volunteer_weekly_hours: float = Field(default=10, description="Default weekly hours for volunteers")
    other_weekly_hours: float = Field(default=30, description="Default weekly hours for other statuses")
    full_time_working_days: int = Field(default=5, description="Default working days for full-time staff")
    part_time_working_days: int = Field(default=3, description="Default working days for part-time staff")
    volunteer_working_days: int = Field(default=2, description="Default working days for volunteers")
    other_working_days: int = Field(default=4, description="Default working days for other statuses")

    # Pet thresholds
    long_stay_days: int = Field(default=90, description="Shelter stay beyond which a pet is a long stay")
    promotion_application_rate: float = Field(
        default=0.1,
        description="Applications per day below which a pet needs special promotion"
    )
    treat_calorie_limit: float = Field(default=10, description="Maximum share of calories from treats, in percent")
    behavior_evaluation_max_months: int = Field(default=6, description="Months before a behavioral evaluation is stale")
    performance_review_max_days: int = Field(default=365, description="Days before a performance review is stale")

    # Ranking
    recommendation_top_k: int = Field(default=10, description="Number of pets returned by adopter ranking")

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from environment (useful for testing)."""
    global _settings
    _settings = Settings()
    return _settings


# Convenience access
settings = get_settings()
