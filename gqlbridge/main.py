# This software is provided to the United States Government (USG) with SBIR Data Rights as defined at Federal Acquisition Regulation 52.227-14, "Rights in Data-SBIR Program" (May 2014) SBIR Rights Notice (Dec 2023-2024) These SBIR data are furnished with SBIR rights under Contract No. H9241522D0001. For a period of 19 years, unless extended in accordance with FAR 27.409(h), after acceptance of all items to be delivered under this contract, the Government will use these data for Government purposes only, and they shall not be disclosed outside the Government (including disclosure for procurement purposes) during such period without permission of the Contractor, except that, subject to the foregoing use and disclosure prohibitions, these data may be disclosed for use by support Contractors. After the protection period, the Government has a paid-up license to use, and to authorize others to use on its behalf, these data for Government purposes, but is relieved of all disclosure prohibitions and assumes no liability for unauthorized use of these data by third parties. This notice shall be affixed to any reproductions of these data, in whole or in part.
from __future__ import annotations
from typing import Any, Callable
from logging import getLogger
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi_offline import FastAPIOffline
from graphql import GraphQLSchema
from gqlbridge.adapters.graphql import DefaultGraphQLInvocation
from gqlbridge.config.general import general
from gqlbridge.config.graphql import GraphQLSettings, graphql_settings
from gqlbridge.handlers.execution_result import GraphQLExecutionResultHandler
from gqlbridge.interfaces.errors import InvalidRequest
from gqlbridge.interfaces.protocols import GraphQLInvocation, GraphQLRootBuilder
from gqlbridge.middleware.requestlogger import RequestLogger
from gqlbridge.routers.application import application_router
from gqlbridge.routers.graphql import GraphQLDispatcher

logger = getLogger(__name__)


async def invalid_request_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.warning(
        "rejected graphql request method=%s path=%s reason=%s",
        request.method,
        request.url.path,
        exc,
    )
    return JSONResponse(status_code=400, content={"errors": [{"message": str(exc)}]})


def create_app(
    schema: GraphQLSchema | None = None,
    invocation: GraphQLInvocation | None = None,
    root_builder: GraphQLRootBuilder | None = None,
    result_handler: GraphQLExecutionResultHandler | None = None,
    settings: GraphQLSettings = graphql_settings,
    lifespan: Callable[[FastAPI], Any] | None = None,
) -> FastAPI:
    """Build the HTTP application serving GraphQL.

    Pass either a graphql-core schema, executed by the default invocation, or
    a custom ``invocation``. The collaborators are wired once here and shared
    by every request through ``app.state``.
    """
    if invocation is None:
        if schema is None:
            raise TypeError("Either a GraphQL schema or a GraphQL invocation is required")
        invocation = DefaultGraphQLInvocation(schema, root_builder=root_builder)

    app = FastAPIOffline(
        title=general.PROJECT_NAME,
        version=general.API_VERSION,
        root_path=general.MOUNT_PATH,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=general.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLogger)
    app.add_exception_handler(InvalidRequest, invalid_request_handler)

    app.state.graphql_settings = settings
    app.state.graphql_dispatcher = GraphQLDispatcher(
        invocation=invocation,
        result_handler=result_handler or GraphQLExecutionResultHandler(),
    )
    app.include_router(application_router(settings))
    logger.info(
        "graphql endpoint path=%s enabled=%s graphiql=%s",
        settings.PATH,
        settings.ENABLED,
        settings.GRAPHIQL_PATH if settings.GRAPHIQL_ENABLED else "disabled",
    )
    return app
