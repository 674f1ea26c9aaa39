# This software is provided to the United States Government (USG) with SBIR Data Rights as defined at Federal Acquisition Regulation 52.227-14, "Rights in Data-SBIR Program" (May 2014) SBIR Rights Notice (Dec 2023-2024) These SBIR data are furnished with SBIR rights under Contract No. H9241522D0001. For a period of 19 years, unless extended in accordance with FAR 27.409(h), after acceptance of all items to be delivered under this contract, the Government will use these data for Government purposes only, and they shall not be disclosed outside the Government (including disclosure for procurement purposes) during such period without permission of the Contractor, except that, subject to the foregoing use and disclosure prohibitions, these data may be disclosed for use by support Contractors. After the protection period, the Government has a paid-up license to use, and to authorize others to use on its behalf, these data for Government purposes, but is relieved of all disclosure prohibitions and assumes no liability for unauthorized use of these data by third parties. This notice shall be affixed to any reproductions of these data, in whole or in part.
from __future__ import annotations
from typing import Any
from pydantic import field_validator
from gqlbridge.config._base import Base


class GraphQLSettings(Base):
    ENABLED: bool = True
    PATH: str = "/graphql"
    # GET {PATH}/schema streams the printed SDL
    SCHEMA_ENABLED: bool = True
    GRAPHIQL_ENABLED: bool = False
    GRAPHIQL_PATH: str = "/graphiql"
    GRAPHIQL_VERSION: str = "3.0.10"
    GRAPHIQL_PAGE_TITLE: str = "GraphiQL"

    @field_validator("PATH", "GRAPHIQL_PATH")
    @classmethod
    def valid_path(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.startswith("/"):
            raise ValueError(f"path must start with '/': {value!r}")
        path = value.rstrip("/")
        if not path:
            raise ValueError("path must not be the application root")
        return path


graphql_settings = GraphQLSettings()
