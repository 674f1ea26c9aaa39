import pytest
from fastapi.testclient import TestClient
from graphql import build_schema
from gqlbridge.config.graphql import GraphQLSettings
from gqlbridge.main import create_app
from fakes import RecordingInvocation


HELLO_SDL = """
type Query {
    hello: String
    greet(name: String!): String
    root: String
}
"""


@pytest.fixture
def hello_schema():
    schema = build_schema(HELLO_SDL)
    fields = schema.query_type.fields
    fields["hello"].resolve = lambda root, info: "world"
    fields["greet"].resolve = lambda root, info, name: f"Hello {name}!"
    fields["root"].resolve = lambda root, info: repr(root)
    return schema


@pytest.fixture
def settings():
    return GraphQLSettings(GRAPHIQL_ENABLED=True, GRAPHIQL_PAGE_TITLE="Test GraphiQL")


@pytest.fixture
def invocation():
    return RecordingInvocation()


@pytest.fixture
def client(invocation, settings):
    app = create_app(invocation=invocation, settings=settings)
    with TestClient(app) as test_client:
        yield test_client
