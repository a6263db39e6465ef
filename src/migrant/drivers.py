"""
Driver Registry

Static table of the database drivers migrant knows about. Looking up a name
never fails: unknown drivers come back without an import path or dialect and
are rejected later by the resolver's validation gate.
"""

from types import MappingProxyType

from pydantic import BaseModel

from .dialects import SqlDialect


class DriverInfo(BaseModel):
    """Everything needed to work with one database driver"""

    name: str  # Driver name from config (e.g., 'postgres', 'mysql')
    dsn: str = ""  # Connection string the driver opens
    import_path: str = ""  # Module implementing the driver, used by code generation
    dialect: SqlDialect | None = None

    def is_valid(self) -> bool:
        """Check that enough is known about this driver to proceed"""
        return len(self.import_path) > 0 and self.dialect is not None


# name -> (import path, dialect)
_DRIVERS = MappingProxyType(
    {
        "postgres": ("github.com/lib/pq", SqlDialect.POSTGRES),
        "mymysql": ("github.com/ziutek/mymysql/godrv", SqlDialect.MYSQL),
        "mysql": ("github.com/go-sql-driver/mysql", SqlDialect.MYSQL),
    }
)


def lookup(name: str, dsn: str = "") -> DriverInfo:
    """
    Build a DriverInfo for a driver name

    Args:
        name: Driver name, possibly unknown
        dsn: Connection string to attach to the driver

    Returns:
        Fresh DriverInfo; invalid when the name is not registered
    """
    info = DriverInfo(name=name, dsn=dsn)

    known = _DRIVERS.get(name)
    if known is not None:
        info.import_path, info.dialect = known

    return info


def known_drivers() -> list[str]:
    """Get all registered driver names in sorted order"""
    return sorted(_DRIVERS)
