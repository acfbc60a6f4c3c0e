from pydantic_settings import BaseSettings
from typing import Optional, List
import os

class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Healthbook"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    TESTING: bool = os.getenv("TESTING", "0").lower() in ("1", "true", "t", "yes", "y")
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        "sqlite:///./healthbook.db"
    )
    TEST_DATABASE_URL: str = os.getenv(
        "TEST_DATABASE_URL",
        "sqlite:///./healthbook_test.db"
    )

    # Security
    SECRET_KEY: str = "your-secret-key-change-this-in-production"
    ALGORITHM: str = "HS256"
    # None means tokens are issued without an "exp" claim
    ACCESS_TOKEN_EXPIRE_MINUTES: Optional[int] = None
    BCRYPT_ROUNDS: int = 10

    # Authorization policy
    ENFORCE_LOGIN_ROLE: bool = True
    STRICT_APPOINTMENT_UPDATES: bool = True

    # CORS
    ALLOWED_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:3000", "http://testserver"]

    @property
    def get_database_url(self):
        """Return the appropriate database URL based on if we're testing"""
        if self.TESTING:
            return self.TEST_DATABASE_URL
        return self.DATABASE_URL

    class Config:
        env_file = ".env"
        case_sensitive = True

# Create settings instance
settings = Settings()

def get_settings() -> Settings:
    """Settings dependency; overridden in tests."""
    return settings
