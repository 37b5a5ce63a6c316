"""
Translation of SQLAlchemy errors into domain exceptions.
"""

import re
from typing import Mapping, Optional, Union

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from talardnad.domain.exceptions import DuplicateEntityError, RepositoryError

# PostgreSQL unique_violation
_UNIQUE_VIOLATION = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """Tell whether an IntegrityError comes from a unique constraint."""
    orig = exc.orig
    if getattr(orig, "sqlstate", None) == _UNIQUE_VIOLATION:
        return True
    if getattr(orig, "pgcode", None) == _UNIQUE_VIOLATION:
        return True
    return "UNIQUE constraint failed" in str(orig)


def violated_column(exc: IntegrityError, columns) -> Optional[str]:
    """
    Find which of the given columns a unique violation was raised for.

    Matches the constraint name (PostgreSQL, e.g. ``ix_users_email``) or
    the error text (SQLite, e.g. ``users.email``).

    Returns:
        The column name, or None if none of them can be identified
    """
    orig = exc.orig
    text = f"{getattr(orig, 'constraint_name', None) or ''} {orig}"
    for column in columns:
        if re.search(rf"(?<![a-z]){re.escape(column)}(?![a-z])", text):
            return column
    return None


def translate_write_error(
    exc: SQLAlchemyError,
    entity_type: str,
    identifier: Union[str, Mapping[str, str]],
) -> Exception:
    """
    Map a failed write to DuplicateEntityError or RepositoryError.

    Args:
        exc: The error raised by the flush or commit
        entity_type: Entity name for the message
        identifier: Identifier for the message, or a mapping of unique
            column to identifier when the table has several

    Returns the exception for the caller to raise.
    """
    if isinstance(exc, IntegrityError) and is_unique_violation(exc):
        if isinstance(identifier, Mapping):
            column = violated_column(exc, identifier.keys())
            if column is None:
                identifier = " or ".join(identifier.values())
            else:
                identifier = identifier[column]
        return DuplicateEntityError(entity_type, identifier)
    reason = str(getattr(exc, "orig", None) or exc)
    return RepositoryError(f"{entity_type.lower()} write", reason)
