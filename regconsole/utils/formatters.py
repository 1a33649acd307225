"""
Console formatting for reports and records.
"""
from typing import Any, Mapping

from bson import json_util

from regconsole.schemas.diagnostics import (
    AccessReport,
    ConnectionStatusReport,
    RolesInfoReport,
)
from regconsole.schemas.registrant import DomainHistogram

SEPARATOR = "\n--------------------------"
RESOURCE_WIDTH = 30
ACTIONS_WIDTH = 50


def format_access_report(report: AccessReport) -> str:
    """Databases with their collections, or the reason they are missing."""
    lines = ["", "=== Checking accessible databases and collections for current user ==="]
    if not report.ok:
        lines.append("Unable to list databases. User may not have listDatabases privilege.")
        lines.append("Continuing...")
        return "\n".join(lines)

    for database in report.databases:
        lines.append(f"Database: {database.name}")
        if not database.ok:
            lines.append(f"   (No access to list collections in {database.name})")
            continue
        lines.extend(f"   Collection: {name}" for name in database.collections)
    return "\n".join(lines)


def format_connection_status(report: ConnectionStatusReport) -> str:
    """Authenticated users and their role bindings."""
    lines = ["", "=== Checking roles and privileges for current user ==="]
    if not report.ok:
        lines.append(f"Unable to run connectionStatus command: {report.error}")
        lines.append("Continuing without role/privilege info...")
        return "\n".join(lines)

    if not report.authenticated:
        lines.append("No authInfo returned. User may not be authenticated.")
        return "\n".join(lines)

    # Each header appears only when authInfo carried that list
    if report.users is not None:
        lines.append("Authenticated Users:")
        lines.extend(f"  {json_util.dumps(user)}" for user in report.users)
    if report.roles is not None:
        lines.append("")
        lines.append("Authenticated User Roles:")
        lines.extend(
            f"  Role: {binding.role:<20} | Database Scope: {binding.db}"
            for binding in report.roles
        )
    return "\n".join(lines)


def format_roles_info(report: RolesInfoReport) -> str:
    """Each role followed by a resource/actions table of its privileges."""
    lines = ["", "=== Detailed Roles Info (rolesInfo command) ==="]
    if not report.ok:
        lines.append(f"Unable to run rolesInfo command: {report.error}")
        lines.append("Continuing without detailed roles info...")
        return "\n".join(lines)

    if report.fallback:
        lines.append("[No roles found in admin. Trying current DB...]")
    else:
        lines.append(f"[Source: {report.source}]")

    for role in report.roles:
        lines.append("")
        lines.append(f"Role: {role.role} | DB: {role.db}")
        lines.append(f"  {'Resource':<{RESOURCE_WIDTH}} | {'Actions':<{ACTIONS_WIDTH}}")
        lines.append("  " + "-" * RESOURCE_WIDTH + "-+-" + "-" * ACTIONS_WIDTH)
        for privilege in role.privileges:
            resource = privilege.describe_resource()
            actions = privilege.describe_actions()
            lines.append(f"  {resource:<{RESOURCE_WIDTH}} | {actions:<{ACTIONS_WIDTH}}")
    return "\n".join(lines)


def format_registrant(doc: Mapping[str, Any]) -> str:
    """One 'key: value' line per stored field, in stored order."""
    lines = ["", "Registrant Details:"]
    lines.extend(f"{key}: {value}" for key, value in doc.items())
    return "\n".join(lines)


def format_domain_histogram(histogram: DomainHistogram) -> str:
    lines = ["Email Domains of Registrants with Counts (Descending Order):"]
    lines.extend(f"{d.domain}: {d.count}" for d in histogram.domains)
    lines.append("")
    lines.append(f"Total number of registrants: {histogram.total_registrants}")
    return "\n".join(lines)
