# This software is provided to the United States Government (USG) with SBIR Data Rights as defined at Federal Acquisition Regulation 52.227-14, "Rights in Data-SBIR Program" (May 2014) SBIR Rights Notice (Dec 2023-2024) These SBIR data are furnished with SBIR rights under Contract No. H9241522D0001. For a period of 19 years, unless extended in accordance with FAR 27.409(h), after acceptance of all items to be delivered under this contract, the Government will use these data for Government purposes only, and they shall not be disclosed outside the Government (including disclosure for procurement purposes) during such period without permission of the Contractor, except that, subject to the foregoing use and disclosure prohibitions, these data may be disclosed for use by support Contractors. After the protection period, the Government has a paid-up license to use, and to authorize others to use on its behalf, these data for Government purposes, but is relieved of all disclosure prohibitions and assumes no liability for unauthorized use of these data by third parties. This notice shall be affixed to any reproductions of these data, in whole or in part.
from __future__ import annotations
from logging import getLogger
from sqlalchemy import select, delete
from todo_app.adapters.database import DatabaseAdapter
from todo_app.interfaces.models import ToDo

logger = getLogger(__name__)


class ToDoRepository:
    database: DatabaseAdapter

    def __init__(self, database: DatabaseAdapter):
        self.database = database

    async def find_all(self) -> list[ToDo]:
        async with self.database.getSession() as session:
            result = await session.execute(select(ToDo).order_by(ToDo.id))
            return list(result.scalars().all())

    async def find_by_id(self, id: int) -> ToDo | None:
        async with self.database.getSession() as session:
            return await session.get(ToDo, id)

    async def save(self, title: str) -> ToDo:
        todo = ToDo(title=title, completed=False)
        async with self.database.getSession() as session:
            session.add(todo)
            await session.flush()
        logger.info("created todo id=%s", todo.id)
        return todo

    async def complete(self, id: int) -> bool:
        async with self.database.getSession() as session:
            todo = await session.get(ToDo, id)
            if todo is None:
                return False
            todo.completed = True
        return True

    async def delete(self, id: int) -> bool:
        async with self.database.getSession() as session:
            result = await session.execute(delete(ToDo).where(ToDo.id == id))
            deleted = result.rowcount > 0  # type: ignore
        if deleted:
            logger.info("deleted todo id=%s", id)
        return deleted
