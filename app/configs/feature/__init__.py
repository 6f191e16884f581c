from pydantic import Field, PositiveInt
from pydantic_settings import BaseSettings


class FetchConfig(BaseSettings):
    """
    Configuration for request building and dispatching
    """

    DEFAULT_USER_AGENT: str = Field(
        description="User-Agent header value every new request builder starts with",
        default="Packaged/1.0",
    )

    FETCH_MAX_WORKERS: PositiveInt | None = Field(
        description="Size of the shared worker pool running fetches. "
        "Leave unset to use the executor default.",
        default=None,
    )

    FETCH_FOLLOW_REDIRECTS: bool = Field(
        description="Whether the transport follows redirects",
        default=True,
    )

    FETCH_VERIFY_SSL: bool = Field(
        description="Whether the transport verifies TLS certificates",
        default=True,
    )


class LoggingConfig(BaseSettings):
    """
    Configuration for logging
    """

    LOG_LEVEL: str = Field(
        description="Logging level, default to INFO. Set to ERROR for production environments.",
        default="INFO",
    )

    LOG_FILE: str | None = Field(
        description="File path for log output.",
        default=None,
    )

    LOG_FILE_MAX_SIZE: PositiveInt = Field(
        description="Maximum file size for file rotation retention, the unit is megabytes (MB)",
        default=20,
    )

    LOG_FILE_BACKUP_COUNT: PositiveInt = Field(
        description="Maximum file backup count file rotation retention",
        default=5,
    )

    LOG_FORMAT: str = Field(
        description="Format string for log messages",
        default=(
            "%(asctime)s.%(msecs)03d %(levelname)s [%(threadName)s] "
            "[%(filename)s:%(lineno)d] %(trace_id)s - %(message)s"
        ),
    )

    LOG_DATEFORMAT: str | None = Field(
        description="Date format string for log timestamps",
        default=None,
    )

    LOG_TZ: str | None = Field(
        description="Timezone for log timestamps (e.g., 'America/New_York')",
        default="UTC",
    )
