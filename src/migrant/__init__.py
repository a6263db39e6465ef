"""
migrant

Per-environment database configuration for schema migrations.
"""

__version__ = "0.1.0"

from .config import ResolvedConfig, config_file_path, resolve
from .dialects import SqlDialect, dialect_by_name
from .drivers import DriverInfo, known_drivers, lookup
from .errors import ConfigError, ConfigLoadError, InvalidDriverError, MissingFieldError

__all__ = [
    "__version__",
    "ResolvedConfig",
    "resolve",
    "config_file_path",
    "SqlDialect",
    "dialect_by_name",
    "DriverInfo",
    "lookup",
    "known_drivers",
    "ConfigError",
    "ConfigLoadError",
    "MissingFieldError",
    "InvalidDriverError",
]
