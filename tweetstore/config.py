"""Configuration management for the status archive."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml
from sqlalchemy.engine import URL

logger = logging.getLogger(__name__)


@dataclass
class DatabaseConfig:
    """Connection descriptor for the relational store.

    The driver is a SQLAlchemy ``dialect+driver`` string. Server databases
    get the charset appended as a URL query parameter; SQLite dialects only
    use the database name, which is the path of the database file.
    """

    driver: str = "mysql+pymysql"
    host: str = "localhost"
    port: Optional[int] = 3306
    database: str = "tweets"
    user: str = "tweetstore"
    password: str = "tweetstore"
    charset: Optional[str] = "utf8mb4"

    @property
    def is_sqlite(self) -> bool:
        return self.driver.split("+", 1)[0] == "sqlite"

    def url_for(self, name: str) -> URL:
        """Connection URL for the database called ``name`` on this server."""
        if self.is_sqlite:
            return URL.create(self.driver, database=name)
        return URL.create(
            self.driver,
            username=self.user or None,
            password=self.password or None,
            host=self.host or None,
            port=self.port,
            database=name,
            query={"charset": self.charset} if self.charset else {},
        )

    @property
    def url(self) -> URL:
        """Connection URL for the configured database."""
        return self.url_for(self.database)


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


@dataclass
class Config:
    """Main configuration container."""

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from YAML file with environment variable overrides.

    Args:
        config_path: Path to config file. Defaults to config/default.yaml

    Returns:
        Populated Config dataclass
    """
    if config_path is None:
        candidates = [
            Path("config/default.yaml"),
            Path(__file__).parent.parent / "config" / "default.yaml",
        ]
        for candidate in candidates:
            if candidate.exists():
                config_path = str(candidate)
                break

    config = Config()

    if config_path and Path(config_path).exists():
        with open(config_path) as f:
            data = yaml.safe_load(f)

        if data:
            if "database" in data:
                config.database = DatabaseConfig(**data["database"])
            if "logging" in data:
                config.logging = LoggingConfig(**data["logging"])

    # Environment variable overrides
    if os.environ.get("TWEETSTORE_DB_DRIVER"):
        config.database.driver = os.environ["TWEETSTORE_DB_DRIVER"]
    if os.environ.get("TWEETSTORE_DB_HOST"):
        config.database.host = os.environ["TWEETSTORE_DB_HOST"]
    if os.environ.get("TWEETSTORE_DB_PORT"):
        config.database.port = int(os.environ["TWEETSTORE_DB_PORT"])
    if os.environ.get("TWEETSTORE_DB_NAME"):
        config.database.database = os.environ["TWEETSTORE_DB_NAME"]
    if os.environ.get("TWEETSTORE_DB_USER"):
        config.database.user = os.environ["TWEETSTORE_DB_USER"]
    if os.environ.get("TWEETSTORE_DB_PASSWORD"):
        config.database.password = os.environ["TWEETSTORE_DB_PASSWORD"]
    if os.environ.get("TWEETSTORE_LOG_LEVEL"):
        config.logging.level = os.environ["TWEETSTORE_LOG_LEVEL"]

    return config


def setup_logging(config: LoggingConfig) -> None:
    """
    Configure logging based on configuration.

    Args:
        config: Logging configuration
    """
    level = getattr(logging, config.level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if config.file:
        log_path = Path(config.file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.file))

    logging.basicConfig(
        level=level,
        format=config.format,
        handlers=handlers,
    )

    # SQLAlchemy echoes every statement at INFO
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)

    logger.info(f"Logging configured at level {config.level}")
