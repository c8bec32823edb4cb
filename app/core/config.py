import os
from dotenv import load_dotenv
from urllib.parse import quote_plus

load_dotenv()


class Settings:
    ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

    # Clerk
    CLERK_SECRET_KEY = os.getenv("CLERK_SECRET_KEY")

    # PostgreSQL
    DB_HOST = os.getenv("DB_HOST", "localhost")
    DB_USER = os.getenv("DB_USER", "postgres")
    DB_PASSWORD = os.getenv("DB_PASSWORD", "")
    DB_NAME = os.getenv("DB_NAME", "recovery_planner")
    DB_PORT = os.getenv("DB_PORT", "5432")
    DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "10"))
    DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "20"))
    DB_ECHO = os.getenv("DB_ECHO", "false").lower() == "true"

    # Planner windows
    LOG_WINDOW_SIZE = int(os.getenv("LOG_WINDOW_SIZE", "14"))
    COMPLETION_HISTORY_LIMIT = int(os.getenv("COMPLETION_HISTORY_LIMIT", "30"))

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def DATABASE_URL(self) -> str:
        url = (
            f"postgresql+asyncpg://{self.DB_USER}:{quote_plus(self.DB_PASSWORD)}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )
        # Managed databases outside development require TLS
        return url if self.is_development else f"{url}?ssl=require"


settings = Settings()
