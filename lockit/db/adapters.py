# lockit/db/adapters.py
"""
Database adapter resolution.

Maps a connection string (or a config object carrying a `url`) to the
database type and the Lockit adapter package that talks to it:

    http(s)://  → couchdb     (lockit-couchdb-adapter)
    mongodb://  → mongodb     (lockit-mongodb-adapter)
    postgres:// → postgresql  (lockit-sql-adapter)
    mysql://    → mysql       (lockit-sql-adapter)
    sqlite://   → sqlite      (lockit-sql-adapter)

Nothing is connected here - only the URL is inspected.
"""
import logging
from typing import Any, Mapping, Union

from pydantic import BaseModel
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from lockit.core.exceptions import UnrecognizedSchemeError

logger = logging.getLogger(__name__)

COUCHDB_ADAPTER = "lockit-couchdb-adapter"
MONGODB_ADAPTER = "lockit-mongodb-adapter"
SQL_ADAPTER = "lockit-sql-adapter"

# scheme → (type, adapter)
ADAPTERS = {
    "http": ("couchdb", COUCHDB_ADAPTER),
    "https": ("couchdb", COUCHDB_ADAPTER),
    "mongodb": ("mongodb", MONGODB_ADAPTER),
    "postgres": ("postgresql", SQL_ADAPTER),
    "mysql": ("mysql", SQL_ADAPTER),
    "sqlite": ("sqlite", SQL_ADAPTER),
}


class DatabaseAdapter(BaseModel):
    type: str
    adapter: str
    url: str


def _connection_string(db: Any) -> Any:
    # "http://..." or {"url": "postgres://...", "name": ...} or obj.url
    if isinstance(db, Mapping):
        return db.get("url")
    return getattr(db, "url", db)


def get_database(db: Union[str, Mapping[str, Any], Any]) -> DatabaseAdapter:
    """
    Resolve the database type and adapter for a connection descriptor.

    Args:
        db: connection string, or a mapping / object with a `url` field

    Raises:
        UnrecognizedSchemeError: unparseable URL or unsupported scheme
    """
    uri = _connection_string(db)
    if not isinstance(uri, str):
        raise UnrecognizedSchemeError("")

    try:
        scheme = make_url(uri.strip()).drivername.lower()
    except (ArgumentError, ValueError) as e:
        raise UnrecognizedSchemeError("") from e

    if scheme not in ADAPTERS:
        raise UnrecognizedSchemeError(scheme)

    db_type, adapter = ADAPTERS[scheme]
    logger.debug("Resolved %s database to %s", db_type, adapter)
    return DatabaseAdapter(type=db_type, adapter=adapter, url=uri)
