"""Connection provider protocol."""

from typing import AsyncContextManager, Protocol

from sqlalchemy.ext.asyncio import AsyncSession


class ConnectionFactory(Protocol):
    """
    Supplies one database session per repository operation.

    Calling the factory returns an async context manager; the session is
    released when the block exits, whether the operation succeeded or not.
    ``async_sessionmaker`` satisfies this interface.
    """

    def __call__(self) -> AsyncContextManager[AsyncSession]:
        ...
