from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Concrete Estimator"
    LOG_LEVEL: str = "INFO"

    # Defaults applied by the form layer when an input is left blank
    DEFAULT_STOCK_LENGTH_FT: float = 20.0
    DEFAULT_SLAB_COVER_IN: float = 2.0
    DEFAULT_COLUMN_COVER_IN: float = 1.5
    DEFAULT_SPACING_IN: float = 12.0
    DEFAULT_DUTY_LEVEL: str = "med"

    class Config:
        env_file = ".env"


settings = Settings()
