from functools import lru_cache

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env
load_dotenv()


class Settings(BaseSettings):
    app_name: str = "Student Records API"
    api_prefix: str = "/api"

    # reseed the three sample students on startup when the store is empty
    seed_sample_data: bool = True

    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    model_config = SettingsConfigDict(env_prefix="STUDENT_RECORDS_", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
