from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ROFI_SCRIPT_LOG_LEVEL: str = "WARNING"


settings = Settings()
