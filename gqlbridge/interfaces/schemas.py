# This software is provided to the United States Government (USG) with SBIR Data Rights as defined at Federal Acquisition Regulation 52.227-14, "Rights in Data-SBIR Program" (May 2014) SBIR Rights Notice (Dec 2023-2024) These SBIR data are furnished with SBIR rights under Contract No. H9241522D0001. For a period of 19 years, unless extended in accordance with FAR 27.409(h), after acceptance of all items to be delivered under this contract, the Government will use these data for Government purposes only, and they shall not be disclosed outside the Government (including disclosure for procurement purposes) during such period without permission of the Contractor, except that, subject to the foregoing use and disclosure prohibitions, these data may be disclosed for use by support Contractors. After the protection period, the Government has a paid-up license to use, and to authorize others to use on its behalf, these data for Government purposes, but is relieved of all disclosure prohibitions and assumes no liability for unauthorized use of these data by third parties. This notice shall be affixed to any reproductions of these data, in whole or in part.
from typing import Any
from pydantic import BaseModel, ConfigDict, Field
from pydantic.types import JsonValue


class GraphQLRequest(BaseModel):
    operationName: str | None = None
    query: str | None = None
    # some clients send variables as a JSON encoded string
    variables: dict[str, JsonValue] | str | None = None


class GraphQLInvocationData(BaseModel):
    """One normalized GraphQL request, built once per HTTP request.

    ``request`` is the originating HTTP request handle. It is excluded from
    dumps so two invocations can be compared on what the engine sees.
    """

    model_config = ConfigDict(frozen=True)

    query: str
    operation_name: str | None = None
    variables: dict[str, Any] | None = None
    request: Any = Field(default=None, exclude=True, repr=False)


class GraphQLResponseBody(BaseModel):
    data: Any = None
    errors: list[dict[str, Any]] | None = None
    extensions: dict[str, Any] | None = None
