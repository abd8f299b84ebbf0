from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """
    Pipeline settings loaded from environment variables.
    """
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    # Logging
    LOG_LEVEL: str = "INFO"

    # Pagination
    DEFAULT_PAGE_SIZE: int = 10

    # Bounds of an unconstrained price filter
    PRICE_FILTER_MIN: float = 0
    PRICE_FILTER_MAX: float = 300

settings = Settings()
