# This software is provided to the United States Government (USG) with SBIR Data Rights as defined at Federal Acquisition Regulation 52.227-14, "Rights in Data-SBIR Program" (May 2014) SBIR Rights Notice (Dec 2023-2024) These SBIR data are furnished with SBIR rights under Contract No. H9241522D0001. For a period of 19 years, unless extended in accordance with FAR 27.409(h), after acceptance of all items to be delivered under this contract, the Government will use these data for Government purposes only, and they shall not be disclosed outside the Government (including disclosure for procurement purposes) during such period without permission of the Contractor, except that, subject to the foregoing use and disclosure prohibitions, these data may be disclosed for use by support Contractors. After the protection period, the Government has a paid-up license to use, and to authorize others to use on its behalf, these data for Government purposes, but is relieved of all disclosure prohibitions and assumes no liability for unauthorized use of these data by third parties. This notice shall be affixed to any reproductions of these data, in whole or in part.
from __future__ import annotations
from os.path import join, dirname, abspath
from graphql import GraphQLError, GraphQLResolveInfo, GraphQLSchema, build_schema
from todo_app.interfaces.models import ToDo
from todo_app.schema.root import ToDoRoot

SCHEMA_PATH = join(dirname(abspath(__file__)), "todo.graphql")


def parse_id(id: str) -> int:
    try:
        return int(id)
    except ValueError as e:
        raise GraphQLError(f"Invalid to-do id: {id!r}") from e


async def resolve_to_dos(root: ToDoRoot, info: GraphQLResolveInfo) -> list[ToDo]:
    return await root.repository.find_all()


async def resolve_to_do(root: ToDoRoot, info: GraphQLResolveInfo, id: str) -> ToDo | None:
    return await root.repository.find_by_id(parse_id(id))


async def create_to_do(root: ToDoRoot, info: GraphQLResolveInfo, title: str) -> ToDo:
    return await root.repository.save(title)


async def complete_to_do(root: ToDoRoot, info: GraphQLResolveInfo, id: str) -> bool:
    return await root.repository.complete(parse_id(id))


async def delete_to_do(root: ToDoRoot, info: GraphQLResolveInfo, id: str) -> bool:
    return await root.repository.delete(parse_id(id))


def build_todo_schema() -> GraphQLSchema:
    with open(SCHEMA_PATH, encoding="utf-8") as schema_file:
        schema = build_schema(schema_file.read())
    query_fields = schema.query_type.fields  # type: ignore
    query_fields["toDos"].resolve = resolve_to_dos
    query_fields["toDo"].resolve = resolve_to_do
    mutation_fields = schema.mutation_type.fields  # type: ignore
    mutation_fields["createToDo"].resolve = create_to_do
    mutation_fields["completeToDo"].resolve = complete_to_do
    mutation_fields["deleteToDo"].resolve = delete_to_do
    return schema
