"""
SkinTone Styler Configuration
Manages environment variables and defaults for the palette service.
"""
import os
from typing import List


class Config:
    """Configuration class for SkinTone Styler services."""

    # Service identity
    SERVICE_NAME: str = "skintone-styler"
    SERVICE_VERSION: str = os.environ.get("STYLER_SERVICE_VERSION", "1.0.0")

    # Logging
    LOG_LEVEL: str = os.environ.get("STYLER_LOG_LEVEL", "INFO")
    LOG_SERIALIZE: bool = bool(int(os.environ.get("STYLER_LOG_SERIALIZE", "0")))

    # Uploads
    MAX_FILE_MB: int = int(os.environ.get("STYLER_MAX_FILE_MB", "10"))

    # CORS settings
    ALLOWED_ORIGINS: str = os.environ.get(
        "STYLER_ALLOWED_ORIGINS",
        "http://localhost:3000,http://localhost:5173"
    )

    # Supported image formats (magic bytes are checked separately)
    SUPPORTED_MIME_TYPES = ["image/jpeg", "image/png", "image/gif", "image/webp"]

    @classmethod
    def allowed_origins(cls) -> List[str]:
        """Split the comma separated origin list, dropping blanks."""
        return [origin.strip() for origin in cls.ALLOWED_ORIGINS.split(",") if origin.strip()]

    @classmethod
    def max_file_bytes(cls) -> int:
        """Upload size limit in bytes."""
        return cls.MAX_FILE_MB * 1024 * 1024


# Global config instance
config = Config()
