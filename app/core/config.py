from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Book Store API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Store
    SEED_SAMPLE_BOOKS: bool = True

    # Greeting served at GET /
    WELCOME_MESSAGE: str = "Welcome to the Book Store API!"

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
