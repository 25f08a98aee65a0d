from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable

from sqlalchemy.ext.asyncio import AsyncSession


SessionFactory = Callable[..., AsyncContextManager[AsyncSession]]


class SessionAwareRepo:
    """
    Repositories run in two modes:
    - UoW mode: the UoW injects its session; commit is the UoW's job
    - standalone mode: a short-lived session per call from session_factory (read paths)
    """

    def __init__(
        self,
        session_factory: SessionFactory | None = None,
        *,
        session: AsyncSession | None = None,
    ) -> None:
        self.session_factory = session_factory
        self.session = session

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session is not None:
            # Session injected by UoW - use directly (no context manager needed)
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')
