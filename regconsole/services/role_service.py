"""
Role service: authenticated identity, role bindings and role privileges.
"""
import logging
from typing import Any

from pymongo.database import Database
from pymongo.errors import OperationFailure, PyMongoError

from regconsole.models.role import RoleBinding, RoleInfo
from regconsole.schemas.diagnostics import (
    ConnectionStatusReport,
    DiagnosticStatus,
    RolesInfoReport,
)

logger = logging.getLogger(__name__)

CONNECTION_STATUS_COMMAND = {"connectionStatus": 1}
ROLES_INFO_COMMAND = {"rolesInfo": 1, "showPrivileges": True}


def _failure_status(error: PyMongoError) -> DiagnosticStatus:
    if isinstance(error, OperationFailure):
        return DiagnosticStatus.DENIED
    return DiagnosticStatus.ERROR


def _documents(value: Any) -> list[dict[str, Any]]:
    """Keep only the sub-documents of a list field."""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


class RoleService:
    """Runs the administrative introspection commands."""

    def __init__(self, database: Database, admin_database: Database):
        """
        Args:
            database: The currently selected database
            admin_database: The admin database, queried first for roles
        """
        self.database = database
        self.admin_database = admin_database

    def connection_status(self) -> ConnectionStatusReport:
        """
        Run connectionStatus and extract the authenticated users and roles.

        A reply without an authInfo block is returned as unauthenticated, not
        as a failure.
        """
        try:
            reply = self.database.command(CONNECTION_STATUS_COMMAND)
        except PyMongoError as e:
            logger.warning(f"connectionStatus failed: {e}")
            return ConnectionStatusReport(status=_failure_status(e), error=str(e))

        auth_info = reply.get("authInfo")
        if not isinstance(auth_info, dict):
            return ConnectionStatusReport(authenticated=False)

        users = auth_info.get("authenticatedUsers")
        bindings = auth_info.get("authenticatedUserRoles")
        roles = None
        if isinstance(bindings, list):
            roles = [
                RoleBinding(role=r.get("role", ""), db=r.get("db"))
                for r in _documents(bindings)
            ]
        return ConnectionStatusReport(
            authenticated=True,
            users=_documents(users) if isinstance(users, list) else None,
            roles=roles,
        )

    def roles_info(self) -> RolesInfoReport:
        """
        Run rolesInfo with privileges against admin, falling back to the
        current database when admin returns no roles.
        """
        try:
            reply = self.admin_database.command(ROLES_INFO_COMMAND)
            roles = _documents(reply.get("roles"))
            source = self.admin_database.name
            fallback = not roles
            if fallback:
                logger.info(
                    f"No roles found in {source}, trying {self.database.name}"
                )
                reply = self.database.command(ROLES_INFO_COMMAND)
                roles = _documents(reply.get("roles"))
                source = self.database.name
        except PyMongoError as e:
            logger.warning(f"rolesInfo failed: {e}")
            return RolesInfoReport(status=_failure_status(e), error=str(e))

        return RolesInfoReport(
            source=source,
            fallback=fallback,
            roles=[RoleInfo.from_document(doc) for doc in roles],
        )
