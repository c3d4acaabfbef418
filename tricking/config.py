from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "Tricking API"
    debug: bool = False
    environment: str = "dev"
    log_level: str = "INFO"

    database_url: str = "postgresql+asyncpg://localhost:5432/tricking"


settings = Settings()


# =============================================================================
# COMBO SIZE LIMITS
# =============================================================================

# Smallest combo the generator will build
MIN_COMBO_SIZE = 1

# Largest combo a request may ask for (enforced at the HTTP boundary)
MAX_COMBO_SIZE = 20

# Separator used when rendering a combo as a single line
COMBO_NOTATION_SEPARATOR = " > "
