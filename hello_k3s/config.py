import os
from dataclasses import dataclass

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


class ConfigError(ValueError):
    """Raised when an environment value can't be used."""


def _get(environ, name, default):
    # Kubernetes renders unset optional values as empty strings
    value = environ.get(name, "").strip()
    return value if value else default


def _get_int(environ, name, default, minimum, maximum=None):
    raw = _get(environ, name, None)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum or (maximum is not None and value > maximum):
        bounds = f"{minimum}..{maximum}" if maximum is not None else f">= {minimum}"
        raise ConfigError(f"{name} must be in {bounds}, got {value}")
    return value


@dataclass(frozen=True)
class Config:
    port: int = 8080
    host: str = "0.0.0.0"
    log_level: str = "info"
    threads: int = 4
    graceful_timeout: int = 30

    @property
    def bind(self):
        # gunicorn expects IPv6 literals in brackets
        if ":" in self.host and not self.host.startswith("["):
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"

    @classmethod
    def from_env(cls, environ=None):
        """Build a Config from environment variables.

        Recognized: PORT, HOST, LOG_LEVEL, THREADS, GRACEFUL_TIMEOUT.
        Unset or empty variables fall back to the defaults.
        """
        if environ is None:
            environ = os.environ

        log_level = _get(environ, "LOG_LEVEL", cls.log_level).lower()
        if log_level not in LOG_LEVELS:
            raise ConfigError(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
            )

        return cls(
            port=_get_int(environ, "PORT", cls.port, 1, 65535),
            host=_get(environ, "HOST", cls.host),
            log_level=log_level,
            threads=_get_int(environ, "THREADS", cls.threads, 1),
            graceful_timeout=_get_int(environ, "GRACEFUL_TIMEOUT", cls.graceful_timeout, 0),
        )
