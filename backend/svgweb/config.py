"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgweb_env: str = "development"
    svgweb_log_level: str = "info"

    # Directory holding the SVG templates
    svg_dir: str = "static/svg"

    # Server
    svgweb_host: str = "0.0.0.0"
    port: int = 8082

    # CORS
    cors_origins: list[str] = ["*"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
