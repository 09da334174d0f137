"""Service configuration."""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings (read from the environment or a .env file)."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # HTTP server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    
    # Route paths (dashboards are usually pointed at these)
    PLAYERS_PATH: str = "/players"
    LEADERS_PATH: str = "/leaders"
    KILLFEED_PATH: str = "/killfeed"
    
    # Events returned by the killfeed when lastn is missing or invalid
    KILLFEED_DEFAULT_LASTN: int = 10
    
    # CORS - comma-separated lists
    CORS_ORIGINS: str = "*"
    CORS_METHODS: str = "GET,PUT,POST,DELETE"
    CORS_MAX_AGE: int = 120  # seconds
    
    # Upstream game-session event stream (Socket.IO). Unset = no live connection.
    UPSTREAM_URL: Optional[str] = None
    UPSTREAM_TOKEN: Optional[str] = None
    UPSTREAM_WOUND_EVENT: str = "PLAYER_WOUNDED"
    UPSTREAM_PLAYERS_EVENT: str = "UPDATED_PLAYER_INFORMATION"
    
    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]
    
    @property
    def cors_methods_list(self) -> List[str]:
        return [method.strip().upper() for method in self.CORS_METHODS.split(",") if method.strip()]


# Global settings instance
settings = Settings()
