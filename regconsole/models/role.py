"""
Role and privilege models, rebuilt from the server on every request.
"""
from typing import Any, Optional

from pydantic import BaseModel, Field

CLUSTER_RESOURCE = "cluster"
WILDCARD = "*"


class RoleBinding(BaseModel):
    """A role granted to the authenticated user."""
    role: str = Field(..., description="Role name")
    db: Optional[str] = Field(None, description="Database the role is scoped to")


class Privilege(BaseModel):
    """Allowed actions on a resource."""
    resource: Optional[dict[str, Any]] = Field(None, description="Raw resource document")
    actions: list[str] = Field(default_factory=list)

    @property
    def is_cluster(self) -> bool:
        return bool(self.resource and self.resource.get("cluster") is True)

    def describe_resource(self) -> str:
        """
        Describe the resource as 'cluster' or 'db=<db>, coll=<collection>'.

        A missing database or collection name means the privilege applies to
        all of them and is shown as '*'.
        """
        if self.resource is None:
            return ""
        if self.is_cluster:
            return CLUSTER_RESOURCE
        db_name = self.resource.get("db") or WILDCARD
        collection = self.resource.get("collection") or WILDCARD
        return f"db={db_name}, coll={collection}"

    def describe_actions(self) -> str:
        return ", ".join(self.actions)


class RoleInfo(BaseModel):
    """A role definition with its privileges."""
    role: str
    db: Optional[str] = None
    privileges: list[Privilege] = Field(default_factory=list)

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "RoleInfo":
        privileges = [
            Privilege(resource=p.get("resource"), actions=p.get("actions") or [])
            for p in doc.get("privileges") or []
            if isinstance(p, dict)
        ]
        return cls(role=doc.get("role", ""), db=doc.get("db"), privileges=privileges)
