"""
Configuration resolution exceptions
"""

from pathlib import Path
from typing import Any

from .drivers import DriverInfo


class ConfigError(Exception):
    """Base exception for configuration resolution failures"""

    code = "config_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_details(self) -> dict[str, Any]:
        """Machine-readable context for JSON envelopes"""
        return {}


class ConfigLoadError(ConfigError):
    """Raised when the environment config file is missing, unreadable, or not valid TOML"""

    code = "config_load_error"

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not load config file '{path}': {cause}")

    def to_details(self) -> dict[str, Any]:
        return {"path": str(self.path), "cause": str(self.cause)}


class MissingFieldError(ConfigError):
    """Raised when a required field is absent or not a string"""

    code = "missing_field"

    def __init__(self, field: str, path: Path):
        self.field = field
        self.path = path
        super().__init__(f"Missing or invalid field '{field}' in '{path}' (expected a string)")

    def to_details(self) -> dict[str, Any]:
        return {"field": self.field, "path": str(self.path)}


class InvalidDriverError(ConfigError):
    """Raised when a driver has no usable import path or dialect"""

    code = "invalid_driver"

    def __init__(self, driver: DriverInfo):
        self.driver = driver
        dialect = driver.dialect.value if driver.dialect else None
        super().__init__(
            f"Invalid driver '{driver.name}': "
            f"import={driver.import_path!r}, dialect={dialect!r}"
        )

    def to_details(self) -> dict[str, Any]:
        return self.driver.model_dump(mode="json", exclude={"dsn"})
