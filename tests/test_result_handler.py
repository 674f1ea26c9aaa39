import asyncio
from graphql import ExecutionResult, GraphQLError
from gqlbridge.handlers.execution_result import GraphQLExecutionResultHandler


async def resolved(result):
    return result


def handle(result):
    handler = GraphQLExecutionResultHandler()
    return asyncio.run(handler.handle_execution_result(resolved(result)))


def test_empty_errors_are_omitted():
    body = handle(ExecutionResult(data={"hello": "world"}, errors=[]))
    assert body == {"data": {"hello": "world"}}


def test_missing_errors_are_omitted():
    body = handle(ExecutionResult(data={"hello": "world"}))
    assert body == {"data": {"hello": "world"}}


def test_errors_are_kept_alongside_null_data():
    body = handle(ExecutionResult(data=None, errors=[GraphQLError("bad field")]))
    assert body == {"data": None, "errors": [{"message": "bad field"}]}


def test_error_order_and_detail_are_preserved():
    errors = [
        GraphQLError("first", path=["a", 0]),
        GraphQLError("second", extensions={"code": "FORBIDDEN"}),
    ]
    body = handle(ExecutionResult(data={"a": [None]}, errors=errors))
    assert body["errors"] == [
        {"message": "first", "path": ["a", 0]},
        {"message": "second", "extensions": {"code": "FORBIDDEN"}},
    ]


def test_extensions_are_forwarded():
    body = handle(ExecutionResult(data={}, extensions={"cost": 3}))
    assert body == {"data": {}, "extensions": {"cost": 3}}


def test_engine_failure_propagates():
    async def failing():
        raise RuntimeError("engine unavailable")

    handler = GraphQLExecutionResultHandler()
    try:
        asyncio.run(handler.handle_execution_result(failing()))
    except RuntimeError as e:
        assert str(e) == "engine unavailable"
    else:
        raise AssertionError("engine failure was swallowed")
