from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    MONGO_URI: str = "mongodb://localhost:27017/mydb"
    # Falls back to the database named in MONGO_URI, then "mydb".
    MONGO_DB_NAME: str | None = None
    MONGO_TIMEOUT_MS: int = 5000

    HOST: str = "0.0.0.0"
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
