from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    APP_NAME: str = "StrideFit"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Local persistence
    DATABASE_URL: str = "sqlite:///./stridefit.db"
    STORAGE_KEY: str = "second_sole_medina_data"

    # Rotation
    DEFAULT_SHOE_THRESHOLD: float = 350.0

    # Checkout
    DELIVERY_FEE: float = 5.00

    # Store
    STORE_NAME: str = "Second Sole Medina"
    STORE_PHONE: str = "330-725-5918"
    STORE_LOCALITY: str = "Medina, OH"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
