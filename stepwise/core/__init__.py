"""Package providing the error types, protocols and logging shared by every schedule."""

from .errors import ConfigurationError
from .log import build_logger, logger

__all__ = [
    "ConfigurationError",
    "build_logger",
    "logger"
]
