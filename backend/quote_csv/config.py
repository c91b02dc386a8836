"""Application configuration module."""

from pathlib import Path
from pydantic_settings import BaseSettings

# 計算專案根目錄的絕對路徑（相對於此文件的位置）
_THIS_DIR = Path(__file__).parent  # backend/quote_csv/
_BACKEND_ROOT = _THIS_DIR.parent  # backend/
_PROJECT_ROOT = _BACKEND_ROOT.parent  # 專案根目錄
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    # Backend Configuration
    backend_host: str = "localhost"
    backend_port: int = 8000
    backend_debug: bool = False

    # CSV 匯入/匯出
    max_file_size_mb: int = 5
    csv_export_filename_prefix: str = "quote"

    # Logging
    log_level: str = "INFO"

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return self.max_file_size_mb * 1024 * 1024

    model_config = {
        "env_file": str(_ENV_FILE),
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
