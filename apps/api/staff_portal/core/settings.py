from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # DB bootstrap (dev only)
    AUTO_DB_BOOTSTRAP: bool = False

    # Comma separated list of allowed browser origins
    CORS_ORIGINS: str = "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173,http://127.0.0.1:5173"

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
