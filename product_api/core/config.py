from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str
    DATABASE_SSL: bool = False
    SQL_ECHO: bool = False

    # CORS allow-list
    FRONTEND_URL: str | None = None
    API_URL: str | None = None

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 4000
    LOG_LEVEL: str = "INFO"

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="allow"
    )

    @property
    def allowed_origins(self) -> list[str]:
        return [o for o in (self.FRONTEND_URL, self.API_URL) if o]


settings = Settings()
