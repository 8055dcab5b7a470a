from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # App
    APP_NAME: str = "DEX Data Contract"

    # Upstream does not always enforce min_size % lot_size == 0.
    # False: log and flag the market. True: reject it as a SchemaViolation.
    ENFORCE_MIN_SIZE_LOT_MULTIPLE: bool = False


settings = Settings()
