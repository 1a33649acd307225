"""
Registrant service for insert, update and lookup by email.
"""
import logging
from typing import Any, Optional

from pymongo.collection import Collection
from pymongo.results import UpdateResult

from regconsole.database.databases.registrants_db import Fields
from regconsole.schemas.registrant import RegistrantCreate

logger = logging.getLogger(__name__)


class RegistrantService:
    """Service for registrant record operations."""

    def __init__(self, collection: Collection):
        """Initialize with the registrations collection."""
        self.collection = collection

    def add_registrant(self, request: RegistrantCreate) -> str:
        """
        Insert a new registrant.

        Args:
            request: Operator input, latitude and longitude in prompt order

        Returns:
            The inserted document id as a string
        """
        doc = request.to_registrant().to_document()
        result = self.collection.insert_one(doc)
        logger.debug(f"Inserted registrant {result.inserted_id}")
        return str(result.inserted_id)

    def add_note(self, email: str, notes: str) -> UpdateResult:
        """
        Set the notes field on the first registrant with this email.

        No document is created when nothing matches, and a match is not
        required for the call to succeed.
        """
        result = self.collection.update_one(
            {Fields.EMAIL: email},
            {"$set": {Fields.NOTES: notes}},
        )
        logger.debug(
            f"Update for {email}: matched={result.matched_count} "
            f"modified={result.modified_count}"
        )
        return result

    def find_by_email(self, email: str) -> Optional[dict[str, Any]]:
        """Return the first registrant with exactly this email, or None."""
        return self.collection.find_one({Fields.EMAIL: email})
