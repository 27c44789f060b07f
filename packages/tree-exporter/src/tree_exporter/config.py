from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Exporter settings loaded from TREE_EXPORT_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TREE_EXPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Output, relative to the scanned root
    output_path: str = "assets/data/tree.json"
    json_indent: int = 2

    # Logging
    log_level: str = "INFO"


settings = Settings()
