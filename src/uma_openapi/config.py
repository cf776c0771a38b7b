"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # API document
    api_version: str = "2025.06.16"
    environment: str = "prod"
    base_url: str = ""

    # Server
    host: str = "0.0.0.0"
    port: int = 34600
    log_level: str = "info"
    json_logs: bool = True

    # Report schemas that only land in the default category as spec errors
    strict_categories: bool = False

    # Feature flags
    feature_authentication: bool = False
    feature_bulk_operations: bool = True
    feature_websockets: bool = True
    feature_metrics: bool = True
    feature_zfs: bool = True
    feature_array_control: bool = True
    feature_vm_management: bool = True

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "UMA_",
    }


settings = Settings()
