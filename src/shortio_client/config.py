"""Client configuration and logging setup."""

import json
import logging
import os
import pathlib

import httpx
import pydantic
import structlog

from . import api

CONFIG_ENV_VAR = "SHORTIO_CONFIG_PATH"
API_KEY_ENV_VAR = "SHORTIO_API_KEY"
DEFAULT_CONFIG_PATH = "shortio.json"

logger = structlog.get_logger(__name__)


class ClientConfig(pydantic.BaseModel):
    """Configuration for a Short.io API client."""

    api_key: str | None = pydantic.Field(None, description="Secret API key")
    api_key_file: str | None = pydantic.Field(
        None,
        description="Path to file containing the API key",
    )
    base_url: str = pydantic.Field(
        api.DEFAULT_BASE_URL,
        description="Base URL for the REST API",
    )
    statistics_url: str = pydantic.Field(
        api.DEFAULT_STATISTICS_URL,
        description="Base URL for the statistics API",
    )
    timeout: float = pydantic.Field(
        api.DEFAULT_TIMEOUT,
        description="Request timeout in seconds",
        gt=0,
    )
    log_level: str = pydantic.Field("INFO", description="Logging level")

    @pydantic.model_validator(mode="after")
    def require_key(self) -> "ClientConfig":
        if not self.api_key and not self.api_key_file:
            msg = "either api_key or api_key_file must be set"
            raise ValueError(msg)
        return self


LOGFMT_PROCESSORS = (
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.EventRenamer("msg"),
    structlog.processors.format_exc_info,
    structlog.processors.LogfmtRenderer(key_order=("timestamp", "level", "msg")),
)


def configure_logging(log_level_name: str) -> None:
    """Print logfmt lines to stdout, dropping events below ``log_level_name``.

    Unknown level names fall back to INFO.
    """
    levels = logging.getLevelNamesMapping()
    structlog.configure(
        processors=list(LOGFMT_PROCESSORS),
        wrapper_class=structlog.make_filtering_bound_logger(
            levels.get(log_level_name.upper(), logging.INFO),
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def load_config(config_path: str | os.PathLike[str]) -> ClientConfig:
    """Read a JSON config file and validate it into a ``ClientConfig``."""
    path = pathlib.Path(config_path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        msg = f"Configuration file not found: {path}"
        raise FileNotFoundError(msg) from None

    client_config = ClientConfig.model_validate(json.loads(text))
    logger.debug("Loaded configuration", path=str(path))
    return client_config


def config_from_env() -> ClientConfig:
    """Build configuration from the environment.

    Reads the JSON file named by ``SHORTIO_CONFIG_PATH`` (default
    ``shortio.json``) when it exists, otherwise falls back to the key in
    ``SHORTIO_API_KEY``.
    """
    config_path = os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH)
    if pathlib.Path(config_path).exists():
        return load_config(config_path)
    if CONFIG_ENV_VAR in os.environ:
        msg = f"Configuration file not found: {config_path}"
        raise FileNotFoundError(msg)
    return ClientConfig(api_key=os.environ.get(API_KEY_ENV_VAR))


def create_client(
    config: ClientConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> api.ShortioRestApiClient:
    """Construct an API client from validated config."""
    client = api.ShortioRestApiClient(
        api_key=config.api_key,
        api_key_file=config.api_key_file,
        base_url=config.base_url,
        statistics_url=config.statistics_url,
        timeout=config.timeout,
        transport=transport,
    )
    logger.info(
        "Created REST client",
        base_url=client.base_url,
        statistics_url=client.statistics_url,
    )
    return client
