from pydantic_settings import BaseSettings, SettingsConfigDict

from orderkit.configs import LoggingSettings
from orderkit.core.enums import TargetIndexCapture


class OrderingSettings(BaseSettings):
    TARGET_INDEX_CAPTURE: TargetIndexCapture = TargetIndexCapture.AFTER_REMOVAL
    logging: LoggingSettings = LoggingSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_default=True,
        env_nested_delimiter="__",
    )
