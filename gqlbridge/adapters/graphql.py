# This software is provided to the United States Government (USG) with SBIR Data Rights as defined at Federal Acquisition Regulation 52.227-14, "Rights in Data-SBIR Program" (May 2014) SBIR Rights Notice (Dec 2023-2024) These SBIR data are furnished with SBIR rights under Contract No. H9241522D0001. For a period of 19 years, unless extended in accordance with FAR 27.409(h), after acceptance of all items to be delivered under this contract, the Government will use these data for Government purposes only, and they shall not be disclosed outside the Government (including disclosure for procurement purposes) during such period without permission of the Contractor, except that, subject to the foregoing use and disclosure prohibitions, these data may be disclosed for use by support Contractors. After the protection period, the Government has a paid-up license to use, and to authorize others to use on its behalf, these data for Government purposes, but is relieved of all disclosure prohibitions and assumes no liability for unauthorized use of these data by third parties. This notice shall be affixed to any reproductions of these data, in whole or in part.
from __future__ import annotations
from typing import Any
from logging import getLogger
from fastapi import Request
from graphql import ExecutionResult, GraphQLSchema, graphql
from gqlbridge.interfaces.protocols import GraphQLRootBuilder
from gqlbridge.interfaces.schemas import GraphQLInvocationData

logger = getLogger(__name__)


class NullRootBuilder:
    def build(self, request: Request | None) -> Any:
        return None


class DefaultGraphQLInvocation:
    """Hands invocation data to graphql-core and returns its execution result.

    Syntax, validation and resolver errors come back inside the result. Only
    failures of the engine call itself raise.
    """

    schema: GraphQLSchema
    root_builder: GraphQLRootBuilder

    def __init__(
        self, schema: GraphQLSchema, root_builder: GraphQLRootBuilder | None = None
    ):
        self.schema = schema
        self.root_builder = root_builder if root_builder else NullRootBuilder()

    def build_context(self, invocation_data: GraphQLInvocationData) -> Any:
        return {"request": invocation_data.request}

    async def invoke(self, invocation_data: GraphQLInvocationData) -> ExecutionResult:
        logger.debug(
            "executing operation=%s", invocation_data.operation_name or "<anonymous>"
        )
        return await graphql(
            self.schema,
            source=invocation_data.query,
            root_value=self.root_builder.build(invocation_data.request),
            context_value=self.build_context(invocation_data),
            variable_values=invocation_data.variables,
            operation_name=invocation_data.operation_name,
        )
