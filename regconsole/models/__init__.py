"""
Pydantic models for database documents and data structures.
"""
from regconsole.models.registrant import GeoPoint, Registrant
from regconsole.models.role import Privilege, RoleBinding, RoleInfo

__all__ = [
    "GeoPoint",
    "Registrant",
    "Privilege",
    "RoleBinding",
    "RoleInfo",
]
