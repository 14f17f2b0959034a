from pydantic_settings import BaseSettings, SettingsConfigDict
from urllib.parse import quote_plus
from typing import Optional

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DB_DRIVER: str = "postgresql+asyncpg"
    DB_USER: str = "bookstore"
    DB_PASSWORD: str = ""
    DB_HOST: str = "127.0.0.1"
    DB_NAME: str = "bookstore-app"
    DB_PORT: int = 5432
    # Full SQLAlchemy URL, e.g. sqlite+aiosqlite:///./bookstore.db; wins over the DB_* parts
    DB_URL: Optional[str] = None
    DB_ECHO: bool = False
    STORE_TIMEOUT_SECONDS: Optional[float] = None

    HOST: str = "127.0.0.1"
    PORT: int = 3003

    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    @property
    def DATABASE_URL(self) -> str:
        if self.DB_URL:
            return self.DB_URL
        # It's crucial to URL-encode the password
        encoded_password = quote_plus(self.DB_PASSWORD)
        return f"{self.DB_DRIVER}://{self.DB_USER}:{encoded_password}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

settings = Settings()
