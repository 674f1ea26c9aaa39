import json
from fastapi.testclient import TestClient
from graphql import parse, build_ast_schema
from gqlbridge.main import create_app


class FixedRootBuilder:
    def __init__(self):
        self.requests = []

    def build(self, request):
        self.requests.append(request)
        return "fixed-root"


def test_default_invocation_executes_against_schema(hello_schema, settings):
    with TestClient(create_app(schema=hello_schema, settings=settings)) as client:
        response = client.get("/graphql", params={"query": "{ hello }"})
    assert response.status_code == 200
    assert response.json() == {"data": {"hello": "world"}}


def test_variables_and_operation_name_reach_the_engine(hello_schema, settings):
    query = """
        query Hello { hello }
        query Greet($name: String!) { greet(name: $name) }
    """
    with TestClient(create_app(schema=hello_schema, settings=settings)) as client:
        response = client.get(
            "/graphql",
            params={
                "query": query,
                "operationName": "Greet",
                "variables": json.dumps({"name": "Ada"}),
            },
        )
    assert response.json() == {"data": {"greet": "Hello Ada!"}}


def test_validation_errors_come_back_in_the_body(hello_schema, settings):
    with TestClient(create_app(schema=hello_schema, settings=settings)) as client:
        response = client.post("/graphql", json={"query": "{ nope }"})
    assert response.status_code == 200
    body = response.json()
    assert body["data"] is None
    assert len(body["errors"]) == 1
    assert "nope" in body["errors"][0]["message"]


def test_empty_query_is_a_syntax_error_not_a_transport_error(hello_schema, settings):
    with TestClient(create_app(schema=hello_schema, settings=settings)) as client:
        response = client.post("/graphql", json={})
    assert response.status_code == 200
    assert response.json()["data"] is None
    assert response.json()["errors"][0]["message"].startswith("Syntax Error")


def test_root_builder_seeds_execution(hello_schema, settings):
    root_builder = FixedRootBuilder()
    app = create_app(schema=hello_schema, root_builder=root_builder, settings=settings)
    with TestClient(app) as client:
        response = client.post(
            "/graphql",
            content="{ root }",
            headers={"Content-Type": "application/graphql"},
        )
    assert response.json() == {"data": {"root": "'fixed-root'"}}
    assert len(root_builder.requests) == 1
    assert root_builder.requests[0].url.path == "/graphql"


def test_default_root_is_none(hello_schema, settings):
    with TestClient(create_app(schema=hello_schema, settings=settings)) as client:
        response = client.get("/graphql", params={"query": "{ root }"})
    assert response.json() == {"data": {"root": "None"}}


def test_schema_download(hello_schema, settings):
    with TestClient(create_app(schema=hello_schema, settings=settings)) as client:
        response = client.get("/graphql/schema")
    assert response.status_code == 200
    assert 'filename="schema.graphql"' in response.headers["content-disposition"]
    downloaded = build_ast_schema(parse(response.text))
    assert set(downloaded.query_type.fields) == {"hello", "greet", "root"}


def test_schema_download_can_be_disabled(hello_schema, settings):
    hidden = settings.model_copy(update={"SCHEMA_ENABLED": False})
    with TestClient(create_app(schema=hello_schema, settings=hidden)) as client:
        assert client.get("/graphql/schema").status_code == 404
