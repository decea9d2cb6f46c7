"""
Store error classification and the structured result returned by services.
"""
import enum
from dataclasses import dataclass
from typing import Any, Optional
from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError, NoResultFound

# Postgres SQLSTATE codes surfaced by the managed backend
INSUFFICIENT_PRIVILEGE = "42501"
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


class ErrorKind(str, enum.Enum):
    """Classes of store failures."""
    PERMISSION_DENIED = "permission_denied"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    UNKNOWN = "unknown"


@dataclass
class ServiceError:
    kind: ErrorKind
    message: str
    cause: Optional[BaseException] = None


@dataclass
class Result:
    """
    Either `data` or `error`.

    `notice` carries a benign informational message (e.g. an idempotent
    insert that already happened) on an otherwise successful result.
    """
    data: Any = None
    error: Optional[ServiceError] = None
    notice: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: Any = None, notice: Optional[str] = None) -> "Result":
        return cls(data=data, notice=notice)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str, cause: Optional[BaseException] = None) -> "Result":
        return cls(error=ServiceError(kind=kind, message=message, cause=cause))


def _sqlstate(exc: BaseException) -> Optional[str]:
    orig = getattr(exc, "orig", None)
    if orig is None:
        return None
    # psycopg2 exposes pgcode, psycopg 3 exposes sqlstate
    return getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)


def classify_store_error(exc: BaseException) -> ErrorKind:
    """Map an exception raised by the store to an ErrorKind."""
    if isinstance(exc, NoResultFound):
        return ErrorKind.NOT_FOUND

    code = _sqlstate(exc)
    # driver message only; the wrapped SQLAlchemy text also echoes bound parameters
    text = str(getattr(exc, "orig", None) or exc).lower()

    if code == INSUFFICIENT_PRIVILEGE or "row-level security" in text or "permission denied" in text:
        return ErrorKind.PERMISSION_DENIED

    if isinstance(exc, IntegrityError):
        if code == UNIQUE_VIOLATION or "unique" in text or "duplicate key" in text:
            return ErrorKind.CONFLICT
        if code == FOREIGN_KEY_VIOLATION or "foreign key" in text:
            # the referenced row (user, post) does not exist
            return ErrorKind.NOT_FOUND

    return ErrorKind.UNKNOWN


_STATUS_BY_KIND = {
    ErrorKind.PERMISSION_DENIED: status.HTTP_403_FORBIDDEN,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.UNKNOWN: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def raise_for_error(result: Result) -> Any:
    """Return result data, or raise the HTTPException matching its error kind."""
    if result.error is None:
        return result.data
    raise HTTPException(
        status_code=_STATUS_BY_KIND[result.error.kind],
        detail=result.error.message
    )
