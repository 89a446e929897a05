"""
Configuration settings for LawyerMatch Backend
"""

from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Server Configuration
    APP_NAME: str = "LawyerMatch Backend"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8001
    LOG_LEVEL: str = "INFO"

    # CORS Configuration
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    @property
    def allowed_origins_list(self) -> List[str]:
        """Convert comma-separated origins to list"""
        origins = [origin.strip()
                   for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]
        # In development, explicitly add common localhost ports
        if self.DEBUG:
            localhost_ports = [3000, 5000, 5173]
            for port in localhost_ports:
                for host in ("localhost", "127.0.0.1"):
                    origin = f"http://{host}:{port}"
                    if origin not in origins:
                        origins.append(origin)
        return origins

    # Catalog Configuration
    SEED_ON_STARTUP: bool = True
    PAGE_SIZE: int = 9
    MAX_PAGE_SIZE: int = 100
    DEFAULT_MAX_PRICE: int = 500

    model_config = {"env_file": ".env",
                    "case_sensitive": True, "extra": "allow"}


# Global settings instance
settings = Settings()
