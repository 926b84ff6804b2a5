from typing import List

from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    DATABASE_URL: str
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30
    BCRYPT_ROUNDS: int = 12
    ENV: str = "local"  # Environment setting

    LOG_LEVEL: str = "INFO"

    # Frontend dev server
    CORS_ORIGINS: List[str] = ["http://localhost:5173"]

    HOST: str = "localhost"
    PORT: int = 8000

    class Config:
        env_file = ".env"

settings = Settings()
