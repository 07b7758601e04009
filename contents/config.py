from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    # JSON output settings
    json_ensure_ascii: bool = False
    json_indent: int | None = None

    # Logging settings
    log_level: str = "WARNING"
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_prefix="CONTENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
