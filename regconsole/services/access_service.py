"""
Access service: databases and collections visible to the current user.
"""
import logging

from pymongo import MongoClient
from pymongo.errors import OperationFailure, PyMongoError

from regconsole.schemas.diagnostics import (
    AccessReport,
    DatabaseAccess,
    DiagnosticStatus,
)

logger = logging.getLogger(__name__)


class AccessService:
    """Lists what the authenticated principal can see. Never raises driver errors."""

    def __init__(self, client: MongoClient):
        self.client = client

    def check_access(self) -> AccessReport:
        """
        List every visible database and, for each, its collections.

        A database whose collections cannot be listed is marked DENIED and the
        scan continues. If the database list itself is refused the report is
        DENIED with no databases.
        """
        try:
            db_names = self.client.list_database_names()
        except OperationFailure as e:
            logger.warning(f"listDatabases denied: {e}")
            return AccessReport(status=DiagnosticStatus.DENIED, error=str(e))
        except PyMongoError as e:
            logger.warning(f"Unable to list databases: {e}")
            return AccessReport(status=DiagnosticStatus.ERROR, error=str(e))

        return AccessReport(databases=[self._database_access(name) for name in db_names])

    def _database_access(self, db_name: str) -> DatabaseAccess:
        try:
            collections = self.client[db_name].list_collection_names()
        except OperationFailure as e:
            logger.warning(f"listCollections denied on {db_name}: {e}")
            return DatabaseAccess(name=db_name, status=DiagnosticStatus.DENIED, error=str(e))
        except PyMongoError as e:
            logger.warning(f"Unable to list collections in {db_name}: {e}")
            return DatabaseAccess(name=db_name, status=DiagnosticStatus.ERROR, error=str(e))
        return DatabaseAccess(name=db_name, collections=collections)
