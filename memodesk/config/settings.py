"""
Configuration Settings.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # App info
    app_name: str = "Memo Desk"
    app_version: str = "1.0.0"
    debug: bool = True

    # Reports
    report_title: str = "Memo System Report"
    report_footer: str = "Generated by Memo Management System"
    report_archive_enabled: bool = False  # keep a server-side copy of every generated report
    report_archive_path: str = "./data/reports"

    # CSV import
    csv_import_max_bytes: int = 5 * 1024 * 1024  # 5 MB

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8080",
        "http://127.0.0.1:3000",
    ]

    # Logging configuration
    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file_path: str = "./logs/memodesk.log"
    log_file_enabled: bool = True
    log_console_enabled: bool = True
    log_json_format: bool = True  # JSON format for files, human-readable for console
    log_api_requests: bool = True  # Log all API requests/responses

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
