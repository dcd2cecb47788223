import os
from typing import List

from dotenv import load_dotenv
from pydantic_settings import BaseSettings
from pydantic import computed_field

load_dotenv()


class Configs(BaseSettings):
    # base
    ENV: str = os.getenv("ENV", "dev")
    PROJECT_NAME: str = "faq-api"
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    PROJECT_ROOT: str = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

    # logging
    LOG_LEVEL: str = "INFO"

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = ["*"]

    # database
    DATABASE_URL: str = "sqlite+aiosqlite:///./faq.db"
    DB_ECHO: bool = False

    # uploads
    UPLOAD_DIR: str = "uploads"
    UPLOAD_CHUNK_SIZE: int = 1024 * 1024  # 1 MiB

    @computed_field
    @property
    def UPLOAD_PATH(self) -> str:
        if os.path.isabs(self.UPLOAD_DIR):
            return self.UPLOAD_DIR
        return os.path.join(self.PROJECT_ROOT, self.UPLOAD_DIR)

    class Config:
        case_sensitive = True


class TestConfigs(Configs):
    ENV: str = "test"
    DATABASE_URL: str = "sqlite+aiosqlite:///./test-faq.db"


configs = Configs()

if configs.ENV == "test":
    configs = TestConfigs()
