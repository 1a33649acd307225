"""
regconsole - interactive console for a MongoDB registrations collection.

Connects with the URI from a one-line startup resource, reports what the
authenticated user can access, then offers a numbered menu to add, update and
query registrants and to count registrants per email domain.
"""

__version__ = "0.1.0"
