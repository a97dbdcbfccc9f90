import os
import tempfile

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    ENV: str = "local"

    database_url: str = "sqlite:///./bookstore.db"
    log_level: str = "INFO"

    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:8000",
    ]

    # client side
    api_base_url: str = "http://localhost:8000"
    request_timeout: float = 10
    cart_storage_key: str = "cart"
    session_dir: str = os.path.join(tempfile.gettempdir(), "bookstore_sessions")

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "allow"

settings = Settings()
