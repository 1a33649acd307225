"""
Operator input and report schemas.
"""
from regconsole.schemas.diagnostics import (
    AccessReport,
    ConnectionStatusReport,
    DatabaseAccess,
    DiagnosticResult,
    DiagnosticStatus,
    RolesInfoReport,
)
from regconsole.schemas.registrant import (
    DomainCount,
    DomainHistogram,
    RegistrantCreate,
)

__all__ = [
    "AccessReport",
    "ConnectionStatusReport",
    "DatabaseAccess",
    "DiagnosticResult",
    "DiagnosticStatus",
    "RolesInfoReport",
    "DomainCount",
    "DomainHistogram",
    "RegistrantCreate",
]
