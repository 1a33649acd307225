"""
Aggregation service: registrant counts per email domain.
"""
from collections import Counter
from typing import Any, Iterable, Optional

from pymongo.collection import Collection

from regconsole.database.databases.registrants_db import Fields
from regconsole.schemas.registrant import DomainCount, DomainHistogram


def email_domain(email: Any) -> Optional[str]:
    """Text after the first '@', up to any further '@'. None if not an address."""
    if not isinstance(email, str) or "@" not in email:
        return None
    return email.split("@")[1]


def count_email_domains(documents: Iterable[dict[str, Any]]) -> list[DomainCount]:
    """
    Count documents per email domain, most common first.

    Documents without an email, or whose email has no '@', are skipped.
    Domains with equal counts keep the order they were first seen in.
    """
    counts: Counter[str] = Counter()
    for doc in documents:
        domain = email_domain(doc.get(Fields.EMAIL))
        if domain is not None:
            counts[domain] += 1

    ordered = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [DomainCount(domain=domain, count=count) for domain, count in ordered]


class AggregationService:
    """Reports over the whole registrations collection."""

    def __init__(self, collection: Collection):
        self.collection = collection

    def email_domain_histogram(self) -> DomainHistogram:
        """
        Scan the collection once for domain counts, then count all documents.

        The total is a separate count_documents call, so it includes
        registrants without a usable email.
        """
        cursor = self.collection.find({}, {Fields.EMAIL: 1, "_id": 0})
        domains = count_email_domains(cursor)
        total = self.collection.count_documents({})
        return DomainHistogram(domains=domains, total_registrants=total)
