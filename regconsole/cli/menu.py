"""
Interactive menu over the registrations collection.
"""
import logging
from enum import IntEnum
from typing import Callable, Optional

from bson.errors import BSONError
from pymongo.errors import PyMongoError

from regconsole.cli.prompts import OutputFunc, Prompter
from regconsole.database.connections import Connection
from regconsole.schemas.registrant import RegistrantCreate
from regconsole.services import (
    AggregationService,
    RegistrantService,
    RoleService,
)
from regconsole.utils.formatters import (
    SEPARATOR,
    format_domain_histogram,
    format_registrant,
    format_roles_info,
)

logger = logging.getLogger(__name__)


class MenuChoice(IntEnum):
    ADD = 1
    UPDATE = 2
    QUERY = 3
    DOMAINS = 4
    ROLES = 5
    EXIT = 6


MENU_TEXT = "\n".join([
    "Choose an operation:",
    "1. Add new registrant",
    "2. Update a registrant",
    "3. Query registrant by email",
    "4. Query email domains with counts (Descending Order)",
    "5. Show detailed rolesInfo",
    "6. Exit",
])


class RegistrantMenu:
    """
    Single-threaded read-eval loop.

    The connection is owned by the caller until the operator exits, at which
    point the menu closes it.
    """

    def __init__(
        self,
        connection: Connection,
        prompter: Optional[Prompter] = None,
        write: Optional[OutputFunc] = None,
    ):
        self.connection = connection
        self.write = write or print
        self.prompter = prompter or Prompter(write=self.write)
        self.registrants = RegistrantService(connection.registrations)
        self.aggregations = AggregationService(connection.registrations)
        self.roles = RoleService(connection.database, connection.admin)
        self._actions: dict[MenuChoice, Callable[[], None]] = {
            MenuChoice.ADD: self.add_registrant,
            MenuChoice.UPDATE: self.update_registrant,
            MenuChoice.QUERY: self.query_registrant,
            MenuChoice.DOMAINS: self.show_email_domains,
            MenuChoice.ROLES: self.show_roles_info,
        }

    def run(self) -> None:
        """Show the menu until the operator exits or input ends."""
        try:
            while True:
                self.write(SEPARATOR)
                self.write(MENU_TEXT)
                choice = self._read_choice()
                if choice is MenuChoice.EXIT:
                    break
                if choice is None:
                    self.write("Invalid choice. Please try again.")
                    continue
                self._dispatch(choice)
        except EOFError:
            logger.debug("End of input, leaving menu")
        self.write("Exiting program. Goodbye.")
        self.connection.close()

    def _read_choice(self) -> Optional[MenuChoice]:
        raw = self.prompter.read("Enter your choice: ").strip()
        try:
            return MenuChoice(int(raw))
        except ValueError:
            return None

    def _dispatch(self, choice: MenuChoice) -> None:
        try:
            self._actions[choice]()
        except (PyMongoError, BSONError) as e:
            logger.error(f"Operation {choice.name.lower()} failed: {e}")
            self.write(f"Operation failed: {e}")

    def add_registrant(self) -> None:
        self.write(SEPARATOR)
        ask = self.prompter
        request = RegistrantCreate(
            name=ask.ask_text("Enter name: "),
            age=ask.ask_int("Enter age: "),
            city=ask.ask_text("Enter city: "),
            email=ask.ask_text("Enter email: "),
            latitude=ask.ask_float("Enter latitude: "),
            longitude=ask.ask_float("Enter longitude: "),
        )
        self.registrants.add_registrant(request)
        self.write(f"Added new registrant: {request.name}")

    def update_registrant(self) -> None:
        self.write(SEPARATOR)
        email = self.prompter.ask_text("Enter the email address of the registrant to update: ")
        notes = self.prompter.ask_text("Enter the notes to add: ")
        # Reported as updated whether or not a registrant matched
        self.registrants.add_note(email, notes)
        self.write(f"Updated registrant with email: {email}")

    def query_registrant(self) -> None:
        self.write(SEPARATOR)
        email = self.prompter.ask_text("Enter the email address to query: ")
        registrant = self.registrants.find_by_email(email)
        if registrant is None:
            self.write(f"No registrant found with the email address: {email}")
            return
        self.write(format_registrant(registrant))

    def show_email_domains(self) -> None:
        self.write(SEPARATOR)
        self.write(format_domain_histogram(self.aggregations.email_domain_histogram()))

    def show_roles_info(self) -> None:
        self.write(format_roles_info(self.roles.roles_info()))
