"""
Configuration module for the transactions service.

All configuration values are loaded from environment variables with sensible defaults.
See .env.example for all available configuration options.
"""
import os
from dataclasses import dataclass, field


def _get_int(key: str, default: int) -> int:
    """Get int from environment variable."""
    return int(os.getenv(key, default))


def _get_bool(key: str, default: bool) -> bool:
    """Get bool from environment variable ("1", "true", "yes", "on")."""
    raw = os.getenv(key)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ServiceConfig:
    """HTTP service settings."""
    service_name: str = field(default_factory=lambda: os.getenv("SERVICE_NAME", "transactions"))
    port: int = field(default_factory=lambda: _get_int("PORT", 3000))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())


@dataclass
class DatabaseConfig:
    """Storage connection settings."""
    host: str = field(default_factory=lambda: os.getenv("DB_HOST", "localhost"))
    port: str = field(default_factory=lambda: os.getenv("DB_PORT", "5432"))
    user: str = field(default_factory=lambda: os.getenv("DB_USER", "postgres"))
    password: str = field(default_factory=lambda: os.getenv("DB_PASSWORD", "postgres"))
    name: str = field(default_factory=lambda: os.getenv("DB_NAME", "bank_app"))
    echo: bool = field(default_factory=lambda: _get_bool("DB_ECHO", False))
    explicit_url: str | None = field(default_factory=lambda: os.getenv("DATABASE_URL"))

    @property
    def url(self) -> str:
        """DATABASE_URL if set, otherwise built from the DB_* components."""
        if self.explicit_url:
            return self.explicit_url
        return f"postgresql+asyncpg://{self.user}:{self.password}@{self.host}:{self.port}/{self.name}"

    @property
    def safe_url(self) -> str:
        """Connection URL with the password masked, for logging."""
        if self.explicit_url:
            scheme, sep, rest = self.explicit_url.partition("://")
            creds, at, location = rest.rpartition("@")
            if not at:
                return self.explicit_url
            user = creds.split(":", 1)[0]
            return f"{scheme}{sep}{user}:***@{location}"
        return f"postgresql+asyncpg://{self.user}:***@{self.host}:{self.port}/{self.name}"


# Global config instances (lazy loaded)
_service_config = None
_database_config = None


def get_service_config() -> ServiceConfig:
    """Get HTTP service configuration."""
    global _service_config
    if _service_config is None:
        _service_config = ServiceConfig()
    return _service_config


def get_database_config() -> DatabaseConfig:
    """Get database configuration."""
    global _database_config
    if _database_config is None:
        _database_config = DatabaseConfig()
    return _database_config


def reload_config():
    """Force reload of all configuration from environment variables."""
    global _service_config, _database_config
    _service_config = ServiceConfig()
    _database_config = DatabaseConfig()
