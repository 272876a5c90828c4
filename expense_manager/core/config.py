from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App settings
    PROJECT_NAME: str = "ExpenseManager"
    API_PREFIX: str = "/api"
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")

    # Session defaults
    DEFAULT_CURRENCY: str = Field(default="USD")
    WELCOME_DELAY_SECONDS: float = Field(default=3.0, ge=0)

    # Analysis
    TOP_EXPENSE_COUNT: int = Field(default=3, ge=1)

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)


settings = Settings()
