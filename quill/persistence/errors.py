"""Translation of driver errors into domain errors.

Repositories wrap every statement in ``store_errors`` so the domain layer
only ever sees ConflictError and TransientStoreError.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from sqlalchemy.exc import DBAPIError, IntegrityError, InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.error import ConflictError, TransientStoreError


@asynccontextmanager
async def store_errors(session: AsyncSession, operation: str) -> AsyncIterator[None]:
    """Translate SQLAlchemy errors raised inside the block.

    Connection-level failures roll the session back so the whole operation
    can be retried on a fresh transaction.

    Args:
        session: Session the block runs on
        operation: Name used in log records
    """
    try:
        yield
    except IntegrityError as e:
        logfire.info("Unique constraint rejected write", operation=operation)
        raise ConflictError(str(e.orig)) from e
    except DBAPIError as e:
        transient = isinstance(e, (OperationalError, InterfaceError))
        if not (transient or e.connection_invalidated):
            raise
        logfire.warn("Store connection failure", operation=operation, error=str(e))
        await session.rollback()
        raise TransientStoreError() from e
