"""
Database definitions and collection constants.
"""
from regconsole.database.databases import registrants_db

__all__ = ["registrants_db"]
