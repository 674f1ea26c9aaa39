# This software is provided to the United States Government (USG) with SBIR Data Rights as defined at Federal Acquisition Regulation 52.227-14, "Rights in Data-SBIR Program" (May 2014) SBIR Rights Notice (Dec 2023-2024) These SBIR data are furnished with SBIR rights under Contract No. H9241522D0001. For a period of 19 years, unless extended in accordance with FAR 27.409(h), after acceptance of all items to be delivered under this contract, the Government will use these data for Government purposes only, and they shall not be disclosed outside the Government (including disclosure for procurement purposes) during such period without permission of the Contractor, except that, subject to the foregoing use and disclosure prohibitions, these data may be disclosed for use by support Contractors. After the protection period, the Government has a paid-up license to use, and to authorize others to use on its behalf, these data for Government purposes, but is relieved of all disclosure prohibitions and assumes no liability for unauthorized use of these data by third parties. This notice shall be affixed to any reproductions of these data, in whole or in part.
from __future__ import annotations
from contextlib import asynccontextmanager
from logging import getLogger
from sqlalchemy import MetaData
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, async_sessionmaker
from sqlalchemy.ext.asyncio.session import AsyncSession

logger = getLogger(__name__)


# -------------------------------------------------------------------------------------------
# BASE ADAPTER
# -------------------------------------------------------------------------------------------
class DatabaseAdapter:
    engine: AsyncEngine
    connection_uri: str

    def __init__(
        self, connection_uri="", pool_size=4, max_overflow=64, echo=False, **kwargs
    ):
        self.connection_uri = connection_uri
        # sqlite pools take no sizing arguments
        if make_url(connection_uri).get_backend_name() != "sqlite":
            kwargs.update(pool_size=pool_size, max_overflow=max_overflow)
        self.engine = create_async_engine(
            self.connection_uri,
            echo=echo,
            **kwargs,
        )
        self.asyncSession = self.asyncSessionGenerator()

    def asyncSessionGenerator(self):
        return async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def getSession(self):
        async with self.asyncSession() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def createTables(self, metadata: MetaData) -> None:
        logger.info("creating tables=%s", ",".join(metadata.tables))
        async with self.engine.begin() as connection:
            await connection.run_sync(metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()
