# app/services/errors.py
"""
Error taxonomy shared by every service, plus the translation of SQLAlchemy
failures into it. app/main.py maps each kind to an HTTP status code.
"""

from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session
from app.utils.logger import get_logger

logger = get_logger(__name__)

# PostgreSQL SQLSTATEs
PG_QUERY_CANCELED = "57014"
PG_FOREIGN_KEY_VIOLATION = "23503"


class InspectionAppError(Exception):
    """Base class for errors surfaced to API callers."""


class NotFoundError(InspectionAppError):
    def __init__(self, entity: str, entity_id=None):
        self.entity = entity
        self.entity_id = entity_id
        if entity_id is None:
            super().__init__(f"{entity} not found")
        else:
            super().__init__(f"{entity} with id {entity_id} not found")


class ValidationError(InspectionAppError):
    """Input violates a field or cross-field constraint. Raised before any storage call."""


class ConflictError(InspectionAppError):
    """Uniqueness violation reported by the store."""


class StorageError(InspectionAppError):
    """Any other record-store failure. Never retried here."""


class StorageTimeoutError(StorageError):
    """The store cancelled an in-flight statement because it ran past its timeout."""


def _is_foreign_key_violation(exc: IntegrityError) -> bool:
    if getattr(exc.orig, "pgcode", None) == PG_FOREIGN_KEY_VIOLATION:
        return True
    return "FOREIGN KEY constraint failed" in str(exc.orig)  # sqlite


def _is_statement_timeout(exc: OperationalError) -> bool:
    return getattr(exc.orig, "pgcode", None) == PG_QUERY_CANCELED


@contextmanager
def storage_errors(db: Session, action: str):
    """
    Run a block of storage calls, rolling back and re-raising any SQLAlchemy
    failure. A foreign-key violation means a referenced row is gone (NotFoundError),
    any other integrity failure is a uniqueness clash (ConflictError).
    Domain errors raised inside the block pass through after the rollback.
    """
    try:
        yield
    except IntegrityError as e:
        db.rollback()
        if _is_foreign_key_violation(e):
            logger.warning(f"[STORE] Referenced row missing while trying to {action}: {e.orig}")
            raise NotFoundError("Referenced record") from e
        logger.warning(f"[STORE] Conflict while trying to {action}: {e.orig}")
        raise ConflictError(f"Could not {action}: {e.orig}") from e
    except OperationalError as e:
        db.rollback()
        if _is_statement_timeout(e):
            logger.error(f"[STORE] Timed out while trying to {action}")
            raise StorageTimeoutError(f"Timed out while trying to {action}") from e
        logger.error(f"[STORE] Failed to {action}: {e}", exc_info=True)
        raise StorageError(f"Failed to {action}") from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"[STORE] Failed to {action}: {e}", exc_info=True)
        raise StorageError(f"Failed to {action}") from e
    except InspectionAppError:
        db.rollback()
        raise
