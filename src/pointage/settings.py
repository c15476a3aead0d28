from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field(default='INFO')
    log_file: str | None = Field(default=None)
    week_min_year: int = Field(default=2020, ge=2)
    week_max_year: int = Field(default=2100, le=9998)
    years_back: int = Field(default=5, ge=0)
    years_ahead: int = Field(default=1, ge=0)

    model_config = SettingsConfigDict(
        env_file='.env',
        env_prefix='POINTAGE_',
        extra='ignore',
    )

    @model_validator(mode='after')
    def validate_year_bounds(self) -> 'Settings':
        if self.week_min_year > self.week_max_year:
            raise ValueError(
                f'POINTAGE_WEEK_MIN_YEAR ({self.week_min_year}) must not exceed '
                f'POINTAGE_WEEK_MAX_YEAR ({self.week_max_year}).'
            )
        return self


settings = Settings()
