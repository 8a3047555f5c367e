import logging
import os
from dataclasses import dataclass

from .exceptions import ConfigError

DEFAULT_WINDOW_BYTES = 8192
SYNC_BITS = 11
MIN_HEADER_SPAN_BITS = 26  # sync + every field up to and including channel mode
DEFAULT_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "WARNING"

ENV_WINDOW_BYTES = "MPEGSCAN_WINDOW_BYTES"
ENV_TIMEOUT = "MPEGSCAN_TIMEOUT"
ENV_LOG_LEVEL = "MPEGSCAN_LOG_LEVEL"


@dataclass(frozen=True)
class ScanConfig:
    window_bytes: int = DEFAULT_WINDOW_BYTES
    min_span_bits: int = MIN_HEADER_SPAN_BITS
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        if self.window_bytes <= 0:
            raise ConfigError(f"window_bytes must be positive, got {self.window_bytes}")
        if self.min_span_bits < MIN_HEADER_SPAN_BITS:
            raise ConfigError(
                f"min_span_bits must be at least {MIN_HEADER_SPAN_BITS}, got {self.min_span_bits}"
            )
        if self.timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls, environ=None) -> "ScanConfig":
        env = os.environ if environ is None else environ
        try:
            return cls(
                window_bytes=int(env.get(ENV_WINDOW_BYTES, DEFAULT_WINDOW_BYTES)),
                timeout=float(env.get(ENV_TIMEOUT, DEFAULT_TIMEOUT)),
                log_level=env.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL),
            )
        except ValueError as e:
            if isinstance(e, ConfigError):
                raise
            raise ConfigError(f"Invalid environment setting: {e}") from e
