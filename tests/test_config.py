import pytest
from pydantic import ValidationError
from gqlbridge.config.general import General
from gqlbridge.config.graphql import GraphQLSettings
from todo_app.config.database import Database


def test_graphql_defaults():
    settings = GraphQLSettings()
    assert settings.ENABLED is True
    assert settings.PATH == "/graphql"
    assert settings.GRAPHIQL_PATH == "/graphiql"


def test_graphql_settings_from_environment(monkeypatch):
    monkeypatch.setenv("GQLBRIDGE_PATH", "/api/graphql/")
    monkeypatch.setenv("GQLBRIDGE_GRAPHIQL_ENABLED", "true")
    settings = GraphQLSettings()
    assert settings.PATH == "/api/graphql"
    assert settings.GRAPHIQL_ENABLED is True


@pytest.mark.parametrize("path", ["graphql", "/", ""])
def test_graphql_path_must_be_absolute_and_not_root(path):
    with pytest.raises(ValidationError):
        GraphQLSettings(PATH=path)


def test_root_mount_path_is_blank():
    assert General(MOUNT_PATH="/").MOUNT_PATH == ""
    assert General(MOUNT_PATH="/api").MOUNT_PATH == "/api"


def test_database_defaults_to_local_sqlite():
    assert Database(DATABASE_NAME="todo").DATABASE_URI == "sqlite+aiosqlite:///./todo.db"


def test_database_assembles_postgres_dsn(monkeypatch):
    monkeypatch.setenv("TODO_POSTGRES_HOST", "db")
    monkeypatch.setenv("TODO_POSTGRES_USER", "todo")
    monkeypatch.setenv("TODO_POSTGRES_PASSWORD", "secret")
    settings = Database(DATABASE_NAME="todo")
    assert settings.DATABASE_URI == "postgresql+asyncpg://todo:secret@db:5432/todo"


def test_database_uri_wins():
    settings = Database(DATABASE_URI="sqlite+aiosqlite:///:memory:", POSTGRES_HOST="db")
    assert settings.DATABASE_URI == "sqlite+aiosqlite:///:memory:"
