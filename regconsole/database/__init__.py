"""
Database module - MongoDB connection and collection definitions.
"""
from regconsole.database.connections import (
    Connection,
    create_mongo_client,
    open_connection,
    redact_uri,
)
from regconsole.database.databases import registrants_db

__all__ = [
    "Connection",
    "create_mongo_client",
    "open_connection",
    "redact_uri",
    "registrants_db",
]
