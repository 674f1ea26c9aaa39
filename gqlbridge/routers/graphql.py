# This software is provided to the United States Government (USG) with SBIR Data Rights as defined at Federal Acquisition Regulation 52.227-14, "Rights in Data-SBIR Program" (May 2014) SBIR Rights Notice (Dec 2023-2024) These SBIR data are furnished with SBIR rights under Contract No. H9241522D0001. For a period of 19 years, unless extended in accordance with FAR 27.409(h), after acceptance of all items to be delivered under this contract, the Government will use these data for Government purposes only, and they shall not be disclosed outside the Government (including disclosure for procurement purposes) during such period without permission of the Contractor, except that, subject to the foregoing use and disclosure prohibitions, these data may be disclosed for use by support Contractors. After the protection period, the Government has a paid-up license to use, and to authorize others to use on its behalf, these data for Government purposes, but is relieved of all disclosure prohibitions and assumes no liability for unauthorized use of these data by third parties. This notice shall be affixed to any reproductions of these data, in whole or in part.
from __future__ import annotations
from typing import Any, Annotated
from enum import Enum
from json import loads
from io import BytesIO
from logging import getLogger
from fastapi import Request, Depends, APIRouter, Query
from fastapi.responses import JSONResponse, StreamingResponse
from graphql import get_introspection_query, build_client_schema, print_schema
from pydantic import ValidationError
from gqlbridge.handlers.execution_result import GraphQLExecutionResultHandler
from gqlbridge.interfaces.errors import InvalidRequest
from gqlbridge.interfaces.protocols import GraphQLInvocation
from gqlbridge.interfaces.schemas import GraphQLInvocationData, GraphQLRequest

logger = getLogger(__name__)

APPLICATION_JSON = "application/json"
APPLICATION_GRAPHQL = "application/graphql"
FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


class RequestShape(Enum):
    QUERY_PARAMS = "query-params"
    JSON_BODY = "json-body"
    GRAPHQL_BODY = "graphql-body"
    FORM_BODY = "form-body"


class GraphQLDispatcher:
    invocation: GraphQLInvocation
    result_handler: GraphQLExecutionResultHandler

    def __init__(
        self,
        invocation: GraphQLInvocation,
        result_handler: GraphQLExecutionResultHandler,
    ):
        self.invocation = invocation
        self.result_handler = result_handler

    async def dispatch(self, invocation_data: GraphQLInvocationData) -> dict[str, Any]:
        execution_result = self.invocation.invoke(invocation_data)
        return await self.result_handler.handle_execution_result(execution_result)


def get_dispatcher(request: Request) -> GraphQLDispatcher:
    return request.app.state.graphql_dispatcher


def media_type(request: Request) -> str:
    content_type = request.headers.get("content-type", "")
    return content_type.split(";", 1)[0].strip().lower()


def resolve_shape(request: Request) -> RequestShape:
    if request.method == "GET":
        return RequestShape.QUERY_PARAMS
    content_type = media_type(request)
    if content_type == APPLICATION_GRAPHQL:
        return RequestShape.GRAPHQL_BODY
    if content_type == APPLICATION_JSON or content_type.endswith("+json"):
        return RequestShape.JSON_BODY
    if content_type in FORM_CONTENT_TYPES:
        return RequestShape.FORM_BODY
    if "query" in request.query_params:
        return RequestShape.QUERY_PARAMS
    return RequestShape.JSON_BODY


def decode_variables(variables: Any) -> dict[str, Any] | None:
    if variables is None or variables == "":
        return None
    if not isinstance(variables, str):
        raise InvalidRequest("Parameter variables must be a JSON encoded string")
    try:
        decoded = loads(variables)
    except ValueError as e:
        raise InvalidRequest(
            "Could not convert variables parameter: expected a JSON map"
        ) from e
    if not isinstance(decoded, dict):
        raise InvalidRequest(
            "Could not convert variables parameter: expected a JSON map"
        )
    return decoded


def from_parameters(request: Request, parameters: Any) -> GraphQLInvocationData:
    query = parameters.get("query")
    if query is None:
        raise InvalidRequest("Missing required parameter: query")
    operation_name = parameters.get("operationName") or None
    if not isinstance(query, str) or not isinstance(operation_name, (str, type(None))):
        raise InvalidRequest("Parameters query and operationName must be strings")
    return GraphQLInvocationData(
        query=query,
        operation_name=operation_name,
        variables=decode_variables(parameters.get("variables")),
        request=request,
    )


async def from_json_body(request: Request) -> GraphQLInvocationData:
    try:
        body = GraphQLRequest.model_validate_json(await request.body())
    except ValidationError as e:
        raise InvalidRequest(
            "Could not parse request body: expected a GraphQL request JSON object"
        ) from e
    variables = body.variables
    if isinstance(variables, str):
        variables = decode_variables(variables)
    return GraphQLInvocationData(
        query=body.query if body.query is not None else "",
        operation_name=body.operationName or None,
        variables=variables,
        request=request,
    )


async def from_graphql_body(request: Request) -> GraphQLInvocationData:
    try:
        query = (await request.body()).decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidRequest("Could not read request body as UTF-8 text") from e
    return GraphQLInvocationData(query=query, request=request)


async def extract_invocation_data(
    shape: RequestShape, request: Request
) -> GraphQLInvocationData:
    if shape is RequestShape.JSON_BODY:
        return await from_json_body(request)
    if shape is RequestShape.GRAPHQL_BODY:
        return await from_graphql_body(request)
    if shape is RequestShape.FORM_BODY:
        async with request.form() as form:
            return from_parameters(request, form)
    return from_parameters(request, request.query_params)


async def execute_request(
    request: Request, dispatcher: GraphQLDispatcher
) -> JSONResponse:
    shape = resolve_shape(request)
    logger.debug("graphql request method=%s shape=%s", request.method, shape.value)
    invocation_data = await extract_invocation_data(shape, request)
    body = await dispatcher.dispatch(invocation_data)
    return JSONResponse(content=body)


router = APIRouter()


@router.get("", response_class=JSONResponse)
async def graphql_get(
    request: Request,
    dispatcher: Annotated[GraphQLDispatcher, Depends(get_dispatcher)],
    query: Annotated[str, Query()],
    operationName: Annotated[str | None, Query()] = None,
    variables: Annotated[str | None, Query()] = None,
):
    return await execute_request(request, dispatcher)


@router.post("", response_class=JSONResponse)
async def graphql_post(
    request: Request,
    dispatcher: Annotated[GraphQLDispatcher, Depends(get_dispatcher)],
):
    return await execute_request(request, dispatcher)


schema_router = APIRouter()


@schema_router.get("/schema")
async def graphql_schema(
    request: Request,
    dispatcher: Annotated[GraphQLDispatcher, Depends(get_dispatcher)],
):
    query_intros = get_introspection_query(descriptions=True)
    intros_result = await dispatcher.invocation.invoke(
        GraphQLInvocationData(query=query_intros, request=request)
    )
    if intros_result.errors or intros_result.data is None:
        raise RuntimeError(f"Introspection query failed: {intros_result.errors}")
    client_schema = build_client_schema(intros_result.data)  # type: ignore
    headers = {"Content-Disposition": 'attachment; filename="schema.graphql"'}
    return StreamingResponse(
        BytesIO(print_schema(client_schema).encode()),
        media_type="text/plain",
        headers=headers,
    )
