# This software is provided to the United States Government (USG) with SBIR Data Rights as defined at Federal Acquisition Regulation 52.227-14, "Rights in Data-SBIR Program" (May 2014) SBIR Rights Notice (Dec 2023-2024) These SBIR data are furnished with SBIR rights under Contract No. H9241522D0001. For a period of 19 years, unless extended in accordance with FAR 27.409(h), after acceptance of all items to be delivered under this contract, the Government will use these data for Government purposes only, and they shall not be disclosed outside the Government (including disclosure for procurement purposes) during such period without permission of the Contractor, except that, subject to the foregoing use and disclosure prohibitions, these data may be disclosed for use by support Contractors. After the protection period, the Government has a paid-up license to use, and to authorize others to use on its behalf, these data for Government purposes, but is relieved of all disclosure prohibitions and assumes no liability for unauthorized use of these data by third parties. This notice shall be affixed to any reproductions of these data, in whole or in part.
from __future__ import annotations
from typing import Any, Awaitable, Mapping
from graphql import ExecutionResult, GraphQLError
from gqlbridge.interfaces.schemas import GraphQLResponseBody


def format_error(error: Any) -> dict[str, Any]:
    if isinstance(error, GraphQLError):
        return dict(error.formatted)
    if isinstance(error, Mapping):
        return dict(error)
    return {"message": str(error)}


class GraphQLExecutionResultHandler:
    """Turns the engine's execution result into the JSON response body.

    The engine's split between data and errors is kept as is; an empty error
    list is left out of the body.
    """

    async def handle_execution_result(
        self, execution_result: Awaitable[ExecutionResult]
    ) -> dict[str, Any]:
        result = await execution_result
        fields: dict[str, Any] = {"data": result.data}
        if result.errors:
            fields["errors"] = [format_error(error) for error in result.errors]
        if result.extensions:
            fields["extensions"] = dict(result.extensions)
        return GraphQLResponseBody(**fields).model_dump(exclude_unset=True)
