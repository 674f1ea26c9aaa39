import pytest
from fastapi.testclient import TestClient
from todo_app.adapters.database import DatabaseAdapter
from todo_app.main import create_todo_app


@pytest.fixture
def todo_client(tmp_path):
    database = DatabaseAdapter(connection_uri=f"sqlite+aiosqlite:///{tmp_path}/todo.db")
    with TestClient(create_todo_app(database)) as client:
        yield client


def execute(client, query, variables=None):
    response = client.post("/graphql", json={"query": query, "variables": variables})
    assert response.status_code == 200
    return response.json()


def create(client, title):
    body = execute(
        client,
        "mutation Create($title: String!) { createToDo(title: $title) { id title completed } }",
        {"title": title},
    )
    return body["data"]["createToDo"]


def test_starts_empty(todo_client):
    assert execute(todo_client, "{ toDos { id } }") == {"data": {"toDos": []}}


def test_create_and_list(todo_client):
    first = create(todo_client, "Write the docs")
    second = create(todo_client, "Ship it")
    assert first == {"id": "1", "title": "Write the docs", "completed": False}
    assert second["id"] == "2"

    body = execute(todo_client, "{ toDos { id title } }")
    assert body["data"]["toDos"] == [
        {"id": "1", "title": "Write the docs"},
        {"id": "2", "title": "Ship it"},
    ]


def test_complete(todo_client):
    todo = create(todo_client, "Water the plants")
    body = execute(
        todo_client,
        "mutation Complete($id: ID!) { completeToDo(id: $id) }",
        {"id": todo["id"]},
    )
    assert body == {"data": {"completeToDo": True}}

    response = todo_client.get(
        "/graphql", params={"query": f'{{ toDo(id: "{todo["id"]}") {{ completed }} }}'}
    )
    assert response.json() == {"data": {"toDo": {"completed": True}}}


def test_complete_unknown_todo(todo_client):
    body = execute(todo_client, 'mutation { completeToDo(id: "99") }')
    assert body == {"data": {"completeToDo": False}}


def test_delete(todo_client):
    todo = create(todo_client, "Take out the trash")
    body = execute(
        todo_client,
        "mutation Delete($id: ID!) { deleteToDo(id: $id) }",
        {"id": todo["id"]},
    )
    assert body == {"data": {"deleteToDo": True}}
    assert execute(todo_client, "{ toDos { id } }") == {"data": {"toDos": []}}
    body = execute(todo_client, f'mutation {{ deleteToDo(id: "{todo["id"]}") }}')
    assert body == {"data": {"deleteToDo": False}}


def test_unknown_todo_is_null(todo_client):
    assert execute(todo_client, '{ toDo(id: "7") { id } }') == {"data": {"toDo": None}}


def test_invalid_id_is_reported_by_the_engine(todo_client):
    body = execute(todo_client, '{ toDo(id: "abc") { id } }')
    assert body["data"] == {"toDo": None}
    assert body["errors"][0]["message"] == "Invalid to-do id: 'abc'"
    assert body["errors"][0]["path"] == ["toDo"]


def test_raw_graphql_mutation(todo_client):
    response = todo_client.post(
        "/graphql",
        content='mutation { createToDo(title: "Raw") { title } }',
        headers={"Content-Type": "application/graphql"},
    )
    assert response.json() == {"data": {"createToDo": {"title": "Raw"}}}
