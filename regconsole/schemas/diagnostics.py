"""
Result types for the startup diagnostics.

Each diagnostic call returns one of these instead of raising, so callers can
report a denial and carry on.
"""
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from regconsole.models.role import RoleBinding, RoleInfo


class DiagnosticStatus(str, Enum):
    """Outcome of a diagnostic call."""
    OK = "ok"
    DENIED = "denied"  # server refused the command (OperationFailure)
    ERROR = "error"  # any other driver failure


class DiagnosticResult(BaseModel):
    """Common status fields."""
    status: DiagnosticStatus = DiagnosticStatus.OK
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == DiagnosticStatus.OK


class DatabaseAccess(DiagnosticResult):
    """Collections visible in one database."""
    name: str
    collections: list[str] = Field(default_factory=list)


class AccessReport(DiagnosticResult):
    """Databases and collections visible to the authenticated principal."""
    databases: list[DatabaseAccess] = Field(default_factory=list)


class ConnectionStatusReport(DiagnosticResult):
    """Identity and role bindings from the connectionStatus command."""
    authenticated: bool = False
    users: Optional[list[dict[str, Any]]] = Field(
        None, description="authenticatedUsers, None when authInfo has no such list"
    )
    roles: Optional[list[RoleBinding]] = Field(
        None, description="authenticatedUserRoles, None when authInfo has no such list"
    )


class RolesInfoReport(DiagnosticResult):
    """Role definitions from the rolesInfo command."""
    source: Optional[str] = Field(None, description="Database the roles were read from")
    fallback: bool = Field(False, description="Admin had no roles, current database used")
    roles: list[RoleInfo] = Field(default_factory=list)
