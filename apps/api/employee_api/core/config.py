from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    project_name: str = "Employee API"
    database_url: str = "sqlite:///./employees.db"
    log_level: str = "INFO"
    # Create missing tables on startup; production uses alembic instead
    auto_create_tables: bool = True

    # Comma-separated list, e.g.:
    # CORS_ORIGINS="http://localhost:8081,https://employees.example.com"
    cors_origins: str = ""

    def allowed_origins(self) -> list[str]:
        origins = [o.strip() for o in self.cors_origins.split(",") if o.strip()]
        # Safe fallback for local dev if env var not set
        if not origins:
            origins = [
                "http://localhost:8081",
                "http://127.0.0.1:8081",
                "http://localhost:3000",
                "http://127.0.0.1:3000",
            ]
        return origins

settings = Settings()
