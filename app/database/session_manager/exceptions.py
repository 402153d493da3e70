"""
Database exceptions.
"""


class DatabaseNotInitialized(Exception):
    """Raised when the session manager is used before Database.init()."""
    pass


class DatabaseTransactionError(Exception):
    """Raised when committing a database transaction fails."""
    pass
