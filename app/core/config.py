from typing import List
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "Expense Tracker"
    VERSION: str = "1.0.0"

    # SQLite Config
    DATABASE_URL: str = "sqlite+aiosqlite:///./expense-tracker.db"
    SQL_ECHO: bool = False

    # Server Config
    HOST: str = "127.0.0.1"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    class Config:
        env_file = ".env"

settings = Settings()
