"""
Registrant collection configuration.
The database itself is the one named in the connection URI.
"""


class Collections:
    """Collection names used by the console."""
    REGISTRATIONS = "registrations"


class Fields:
    """Registrant fields used as query keys and update targets."""
    EMAIL = "email"
    NOTES = "notes"
