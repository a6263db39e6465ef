"""
Connection string helpers

Environment expansion and Postgres URL normalization for the `db.dsn` value.
"""

import os
import re
from collections.abc import Mapping

from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

_SHELL_SPECIAL = frozenset("*#$@!?-0123456789")
_NAME_CHARS = frozenset("_0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_CONNINFO_SPECIAL = re.compile(r"([ '\\])")
_POSTGRES_SCHEMES = {"postgres", "postgresql"}


def _shell_name(text: str) -> tuple[str, int]:
    """Read the variable name following a '$'.

    Returns the name and how many characters it consumed. An empty name with
    a non-zero width marks bad syntax whose characters are dropped.
    """
    if text[0] == "{":
        if len(text) > 2 and text[1] in _SHELL_SPECIAL and text[2] == "}":
            return text[1], 3
        end = text.find("}", 1)
        if end == -1:
            return "", 1  # unclosed "${"
        if end == 1:
            return "", 2  # empty "${}"
        return text[1:end], end + 1

    if text[0] in _SHELL_SPECIAL:
        return text[0], 1

    width = 0
    while width < len(text) and text[width] in _NAME_CHARS:
        width += 1
    return text[:width], width


def expand_env(value: str, environ: Mapping[str, str] | None = None) -> str:
    """Replace ${VAR} and $VAR references the way a POSIX shell names them.

    `$` followed by one of ``*#$@!?-`` or a digit names a one-character
    variable, ``${...}`` reads up to the closing brace, and otherwise the name
    is the longest run of ASCII letters, digits and underscores. Undefined
    variables become empty strings. A `$` that starts no name is kept, and
    malformed ``${`` / ``${}`` sequences are dropped.
    """
    env = os.environ if environ is None else environ

    parts: list[str] = []
    start = 0
    i = 0
    while i < len(value):
        if value[i] == "$" and i + 1 < len(value):
            parts.append(value[start:i])
            name, width = _shell_name(value[i + 1 :])
            if name:
                parts.append(env.get(name, ""))
            elif width == 0:
                parts.append("$")
            i += width
            start = i + 1
        i += 1

    parts.append(value[start:])
    return "".join(parts)


def _escape_conninfo_value(value: str) -> str:
    return _CONNINFO_SPECIAL.sub(r"\\\1", value)


def normalize_postgres_url(dsn: str) -> str | None:
    """Convert a postgres:// URL into libpq key/value form.

    Produces sorted ``key=value`` pairs (user, password, host, port, dbname and
    any query parameters) joined by spaces, skipping empty values. Spaces,
    single quotes and backslashes inside values are backslash-escaped.

    Args:
        dsn: Connection string, usually a URL

    Returns:
        Normalized connection string, or None if the DSN is not a postgres URL
    """
    try:
        url = make_url(dsn)
    except (ArgumentError, ValueError):
        return None

    if url.drivername not in _POSTGRES_SCHEMES:
        return None

    pairs: list[str] = []

    def _accrue(key: str, value: object) -> None:
        if value is None or value == "":
            return
        pairs.append(f"{key}={_escape_conninfo_value(str(value))}")

    _accrue("user", url.username)
    _accrue("password", url.password)
    _accrue("host", url.host)
    _accrue("port", url.port)
    _accrue("dbname", url.database)

    for key, value in url.query.items():
        # Repeated query keys keep their first value
        if isinstance(value, tuple):
            value = value[0] if value else None
        _accrue(key, value)

    pairs.sort()
    return " ".join(pairs)
