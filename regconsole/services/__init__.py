"""
Service layer for database operations.
"""
from regconsole.services.access_service import AccessService
from regconsole.services.aggregation_service import AggregationService
from regconsole.services.registrant_service import RegistrantService
from regconsole.services.role_service import RoleService

__all__ = [
    "AccessService",
    "AggregationService",
    "RegistrantService",
    "RoleService",
]
