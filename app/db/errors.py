"""
Translation of storage-level errors into the application error taxonomy.

This is the only place that looks at SQLAlchemy / DBAPI error internals.
"""

from sqlalchemy import exc as sa_exc

from app.utils.exceptions import AppError, ConnectivityError, DuplicateError

DUPLICATE_EMAIL_MESSAGE = "The email already exists in the database"
CONNECTIVITY_MESSAGE = (
    "Could not connect to the database. "
    "Please make sure the database server is running."
)

# SQLSTATE for unique_violation (PostgreSQL) and MySQL duplicate entry errno
_UNIQUE_VIOLATION_CODES = {"23505", 1062}

_CONNECTION_MARKERS = (
    "could not connect",
    "connection refused",
    "connection to server",
    "server closed the connection",
    "can't connect",
    "unable to open database",
    "name or service not known",
    "timeout expired",
)


def _is_unique_violation(error: sa_exc.IntegrityError) -> bool:
    orig = error.orig
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code is None and getattr(orig, "args", None):
        code = orig.args[0]
    if code in _UNIQUE_VIOLATION_CODES:
        return True
    message = str(orig).lower()
    return "unique" in message or "duplicate" in message


def _is_connection_failure(error: Exception) -> bool:
    if isinstance(error, (sa_exc.InterfaceError, sa_exc.DisconnectionError, sa_exc.TimeoutError)):
        return True
    if isinstance(error, sa_exc.DBAPIError) and error.connection_invalidated:
        return True
    if isinstance(error, sa_exc.OperationalError):
        message = str(error.orig).lower()
        return any(marker in message for marker in _CONNECTION_MARKERS)
    return False


def translate_storage_error(error: Exception) -> Exception:
    """
    Map a storage error to its application error.

    Returns the error itself when there is no better classification, so the
    caller can re-raise it unchanged.
    """
    if isinstance(error, AppError):
        return error
    if isinstance(error, sa_exc.IntegrityError) and _is_unique_violation(error):
        return DuplicateError(DUPLICATE_EMAIL_MESSAGE, "Storage")
    if _is_connection_failure(error):
        return ConnectivityError(CONNECTIVITY_MESSAGE, "Storage")
    return error
