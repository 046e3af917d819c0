from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "File Record Service"
    log_level: str = "INFO"

    # Origins allowed by CORS; the React frontend runs on port 3000 in development
    cors_origins: List[str] = ["*"]

    max_upload_mb: int = 50
    allowed_extensions: List[str] = ["xlsx", "xls", "csv", "json", "docx", "doc"]

    model_config = {"env_file": ".env", "extra": "ignore"}

settings = Settings()
