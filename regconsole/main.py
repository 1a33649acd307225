"""
Registrant Console - interactive MongoDB client.

Startup:
- Load the connection URI from the startup resource
- Connect and report visible databases, collections and roles
- List the collections of the target database

Then hands the open connection to the menu, which closes it on exit.
"""
import logging
import sys

from pymongo.errors import PyMongoError

from regconsole.cli.menu import RegistrantMenu
from regconsole.config import ConfigError, get_settings, load_connection_config
from regconsole.database.connections import open_connection, redact_uri
from regconsole.services import AccessService, RoleService
from regconsole.utils.formatters import format_access_report, format_connection_status


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def main() -> int:
    """Run one console session. Returns the process exit code."""
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        config = load_connection_config(settings.connection_file)
    except ConfigError as e:
        print(f"Failed to read the MongoDB connection details: {e}", file=sys.stderr)
        return 1

    print(f"Connecting with connection string: {redact_uri(config.uri)}")
    print(f"Database: {config.database_name}")

    try:
        connection = open_connection(config, settings)
    except PyMongoError as e:
        # SRV lookups and URI option checks happen when the client is built
        print(f"Connection failed: {e}", file=sys.stderr)
        return 1

    try:
        print(format_access_report(AccessService(connection.client).check_access()))
        roles = RoleService(connection.database, connection.admin)
        print(format_connection_status(roles.connection_status()))

        try:
            for name in connection.database.list_collection_names():
                print(f"Found collection: {name}")
        except PyMongoError as e:
            print(f"Connection failed: {e}", file=sys.stderr)
            return 1

        print("Connected successfully.")
        RegistrantMenu(connection).run()
    finally:
        connection.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
