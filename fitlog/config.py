from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Reminder ticker: fires every N seconds while the session runs
    reminder_interval_seconds: float = Field(15.0, gt=0)
    reminder_message: str = "Reminder: Don't forget to log your activity today!"
    weekly_window_days: int = Field(7, ge=1)
    # Advisory only, shown as a prompt hint; any category text is accepted
    fitness_categories: list[str] = ["Cardio", "Strength", "Yoga", "Flexibility", "Running", "Walking"]
    log_level: str = "WARNING"
    debug: bool = False

    @property
    def category_hint(self) -> str:
        """Comma-separated category list for the add prompt."""
        return ", ".join(self.fitness_categories)


settings = Settings()
