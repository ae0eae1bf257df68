"""Translation of database integrity errors into domain errors."""

import re

from sqlalchemy.exc import IntegrityError

from atrium.domain.error import UniquenessViolation

UNIQUE_VIOLATION_SQLSTATE = "23505"

# Unique constraint name -> key reported to the domain
CONSTRAINT_KEYS = {
    "uq_accounts_username": "username",
    "uq_accounts_email": "email",
    "uq_linked_accounts_provider_identity": "provider_identity",
    "uq_linked_accounts_account_provider": "account_provider",
}

_CONSTRAINT_IN_MESSAGE = re.compile(r'unique constraint "([^"]+)"')


def _constraint_name(exc: IntegrityError) -> str | None:
    driver_error = exc.orig
    # asyncpg's exception is chained behind SQLAlchemy's DBAPI adapter
    for candidate in (driver_error, getattr(driver_error, "__cause__", None)):
        name = getattr(candidate, "constraint_name", None)
        if name:
            return name

    match = _CONSTRAINT_IN_MESSAGE.search(str(driver_error))
    return match.group(1) if match else None


def _sqlstate(exc: IntegrityError) -> str | None:
    driver_error = exc.orig
    for candidate in (driver_error, getattr(driver_error, "__cause__", None)):
        code = getattr(candidate, "sqlstate", None) or getattr(
            candidate, "pgcode", None
        )
        if code:
            return code
    return None


def to_uniqueness_violation(exc: IntegrityError) -> UniquenessViolation | None:
    """Map a unique-constraint IntegrityError to UniquenessViolation.

    Returns:
        The domain error, or None when ``exc`` is some other integrity error
    """
    sqlstate = _sqlstate(exc)
    if sqlstate is not None and sqlstate != UNIQUE_VIOLATION_SQLSTATE:
        return None

    name = _constraint_name(exc)
    if name is None:
        return None

    return UniquenessViolation(CONSTRAINT_KEYS.get(name, name))
