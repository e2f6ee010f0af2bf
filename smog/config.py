import logging
import os
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource
from typing_extensions import Self

from smog.domain.shared.error import ConfigurationError


# =============================================================================
# Upstream Configuration
# =============================================================================


class PollutionSourceConfig(BaseModel):
    """Pollution listing API (nested in Config, uses env_nested_delimiter)."""

    base_url: str = "https://be-recruitment-task.onrender.com"
    login_path: str = "/auth/login"
    listing_path: str = "/pollution"
    username: str = "testuser"
    password: str = "testpass"
    page_size: int = 50  # Records requested per listing page
    min_interval: float = 2.0  # Seconds between outbound calls, across all countries
    max_pages: int | None = None  # Safety cap on pages per full fetch; None = until empty
    timeout: float = 30.0


class EncyclopediaConfig(BaseModel):
    """Encyclopedia summary API used for city descriptions."""

    base_url: str = "https://en.wikipedia.org/api/rest_v1/page/summary"
    min_interval: float = 0.5  # Seconds between lookups, across all cities
    fallback_description: str = "Description not available."
    cache_fallback: bool = False  # Cache the fallback text for pages without a summary
    user_agent: str = "smog/0.1.0 (polluted cities service)"
    timeout: float = 10.0


class AggregatorConfig(BaseModel):
    """City aggregation and pagination."""

    page_size: int = 10
    single_flight: bool = False  # Share one build between concurrent first requests


# =============================================================================
# Application Configuration
# =============================================================================


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Load settings from YAML file specified by SMOG_CONFIG_FILE env var."""

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get the value for a field from the YAML config."""
        yaml_data = self._load_yaml_config()
        field_value = yaml_data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all settings from YAML file."""
        return self._load_yaml_config()

    def _load_yaml_config(self) -> dict[str, Any]:
        """Load config from YAML file if specified."""
        config_file = os.environ.get("SMOG_CONFIG_FILE")
        if config_file:
            path = Path(config_file)
            if path.exists():
                return yaml.safe_load(path.read_text()) or {}
        return {}


class Server(BaseModel):
    """Server configuration (nested in Config, uses env_nested_delimiter).

    ``port`` of 0 is a sentinel meaning "use $PORT, else 3000"; an explicit
    SMOG_SERVER__PORT wins over $PORT.
    """

    name: str = "Polluted Cities"
    version: str = "0.1.0"
    description: str = "Most polluted cities per country, with short descriptions"
    host: str = "0.0.0.0"
    port: int = 0
    cors_origins: list[str] = ["*"]


class LoggingConfig(BaseModel):
    """Logging configuration (nested in Config, uses env_nested_delimiter)."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def file(self) -> str | None:
        """Get log file path from SMOG_LOG_FILE env var."""
        return os.environ.get("SMOG_LOG_FILE")


class Config(BaseSettings):
    # These are BaseModel, so env_nested_delimiter handles their env vars
    server: Server = Server()
    logging: LoggingConfig = LoggingConfig()
    pollution: PollutionSourceConfig = PollutionSourceConfig()
    encyclopedia: EncyclopediaConfig = EncyclopediaConfig()
    aggregator: AggregatorConfig = AggregatorConfig()

    model_config = {
        "env_prefix": "SMOG_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",  # Allows SMOG_POLLUTION__PASSWORD override
        "extra": "ignore",
    }

    @model_validator(mode="after")
    def derive_server_port(self) -> Self:
        """Fall back to the conventional PORT env var, then 3000."""
        if not self.server.port:
            raw_port = os.environ.get("PORT") or "3000"
            try:
                port = int(raw_port)
            except ValueError:
                raise ConfigurationError(
                    f"PORT must be an integer, got {raw_port!r}", code="INVALID_PORT"
                ) from None
            self.server = self.server.model_copy(update={"port": port})
        return self

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include YAML config.

        Priority (highest to lowest):
        1. init_settings - values passed to Config()
        2. env_settings - environment variables
        3. dotenv_settings - .env file
        4. yaml_settings - SMOG_CONFIG_FILE yaml
        5. file_secret_settings - secrets from files
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


def configure_logging(config: LoggingConfig) -> None:
    """Configure Python logging based on config.

    Should be called early in application startup so all loggers pick up the
    configuration.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(config.level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(config.format, datefmt=config.date_format)

    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(config.level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.debug("Logging configured: level=%s, file=%s", config.level, config.file)
