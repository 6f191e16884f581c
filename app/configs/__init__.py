from pydantic import Field
from pydantic_settings import SettingsConfigDict

from configs.feature import FetchConfig, LoggingConfig


class PackagedConfig(FetchConfig, LoggingConfig):
    PROJECT_NAME: str = Field(default="packaged")

    model_config = SettingsConfigDict(
        # PACKAGED_LOG_LEVEL, PACKAGED_DEFAULT_USER_AGENT, ...
        env_prefix="PACKAGED_",
        # read from dotenv format config file
        env_file=".env",
        env_file_encoding="utf-8",
        # ignore extra attributes
        extra="ignore",
    )


packaged_config: PackagedConfig = PackagedConfig()

__all__ = ["PackagedConfig", "packaged_config"]
