"""Shared plumbing for PostgreSQL repositories."""

from typing import Any

import logfire
from sqlalchemy.sql.expression import Executable
from sqlalchemy.engine import Result
from sqlalchemy.exc import DBAPIError, IntegrityError, InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from resdir.domain.error import DuplicateNameError, StoreUnavailableError


class PostgresRepository:
    """Base class holding the request session.

    Connection-level failures are reported as ``StoreUnavailableError``;
    everything else (constraint violations included) propagates unchanged,
    except where a write names the slug index it may collide with.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def _execute(self, stmt: Executable, params: Any = None) -> Result[Any]:
        try:
            return await self.session.execute(stmt, params)
        except (OperationalError, InterfaceError) as e:
            logfire.error("Database unavailable", error=str(e))
            raise StoreUnavailableError() from e
        except DBAPIError as e:
            if e.connection_invalidated:
                logfire.error("Database connection invalidated", error=str(e))
                raise StoreUnavailableError() from e
            raise
        except OSError as e:
            # Raised by the driver when the server cannot be reached at all
            logfire.error("Database unreachable", error=str(e))
            raise StoreUnavailableError() from e

    async def _execute_unique_slug(
        self, stmt: Executable, index_name: str, entity: str, values: dict[str, Any]
    ) -> Result[Any]:
        """Execute a write guarded by a unique slug index.

        A concurrent create can pass the service's duplicate check and still
        lose at the index; that loss is reported as ``DuplicateNameError``.

        Args:
            stmt: Insert or update statement
            index_name: Name of the partial unique slug index
            entity: Entity name for the error message
            values: Written column values, ``name`` and ``slug`` included
        """
        try:
            return await self._execute(stmt)
        except IntegrityError as e:
            if index_name not in str(e.orig):
                raise
            logfire.warn(
                "Slug taken by a concurrent write",
                entity=entity,
                slug=values["slug"],
            )
            raise DuplicateNameError(entity, values["name"], values["slug"]) from e
