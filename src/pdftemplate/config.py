"""Configuration management for PDF template rendering."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Fonts
    fallback_font_family: str = "Helvetica"
    default_font_size_pt: float = 10.0
    font_dirs: list[str] = []

    # Images
    default_image_dpi: int = 96

    # Repeating footer
    footer_page_stamp: bool = True
    page_stamp_font_size_pt: float = 8.0

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
