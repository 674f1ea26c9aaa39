# This software is provided to the United States Government (USG) with SBIR Data Rights as defined at Federal Acquisition Regulation 52.227-14, "Rights in Data-SBIR Program" (May 2014) SBIR Rights Notice (Dec 2023-2024) These SBIR data are furnished with SBIR rights under Contract No. H9241522D0001. For a period of 19 years, unless extended in accordance with FAR 27.409(h), after acceptance of all items to be delivered under this contract, the Government will use these data for Government purposes only, and they shall not be disclosed outside the Government (including disclosure for procurement purposes) during such period without permission of the Contractor, except that, subject to the foregoing use and disclosure prohibitions, these data may be disclosed for use by support Contractors. After the protection period, the Government has a paid-up license to use, and to authorize others to use on its behalf, these data for Government purposes, but is relieved of all disclosure prohibitions and assumes no liability for unauthorized use of these data by third parties. This notice shall be affixed to any reproductions of these data, in whole or in part.
from __future__ import annotations
from contextlib import asynccontextmanager
from logging import getLogger
from fastapi import FastAPI
from gqlbridge.main import create_app
from todo_app.adapters.database import DatabaseAdapter
from todo_app.config.database import database_settings
from todo_app.interfaces.models import Base
from todo_app.repositories.todos import ToDoRepository
from todo_app.schema.resolvers import build_todo_schema
from todo_app.schema.root import ToDoRootBuilder

logger = getLogger(__name__)


def create_todo_app(database: DatabaseAdapter) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await database.createTables(Base.metadata)
        logger.info("todo store ready uri=%s", database.engine.url.render_as_string())
        try:
            yield
        finally:
            await database.dispose()

    return create_app(
        schema=build_todo_schema(),
        root_builder=ToDoRootBuilder(ToDoRepository(database)),
        lifespan=lifespan,
    )


database = DatabaseAdapter(
    connection_uri=database_settings.DATABASE_URI,
    pool_size=database_settings.DATABASE_POOL_SIZE,
    max_overflow=database_settings.DATABASE_MAX_OVERFLOW,
    pool_pre_ping=True,
    echo=database_settings.DATABASE_ECHO,
)

app = create_todo_app(database)
