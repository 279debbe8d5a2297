from typing import Iterator, List, Optional, Tuple

from pydantic import Field, field_validator

from ..base import ObjectExtended
from .._types import HTTPMethodType
from ..identifiers import Path

from .components import Components
from .general import ExternalDocumentation
from .info import Info
from .paths import Operation, Paths, validate_Paths
from .security import SecurityRequirement
from .servers import Server
from .tag import Tag


class Document(ObjectExtended):
    """
    This class represents the root of the OpenAPI description document, as defined
    in `the spec`_

    Cross references are not validated - duplicate tags or operationIds and
    unresolvable references are accepted.

    .. _the spec: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#openapi-object
    """

    openapi: str = Field(...)
    info: Info = Field(...)
    paths: Paths = Field(...)
    servers: Optional[List[Server]] = Field(default=None)
    components: Optional[Components] = Field(default=None)
    security: Optional[List[SecurityRequirement]] = Field(default=None)
    tags: Optional[List[Tag]] = Field(default=None)
    externalDocs: Optional[ExternalDocumentation] = Field(default=None)

    @field_validator("paths", mode="before")
    @classmethod
    def validate_Document_paths(cls, values):
        return validate_Paths(values)

    def operations(self) -> Iterator[Tuple[Path, HTTPMethodType, Operation]]:
        for path, item in self.paths.items():
            for method, op in item.operations():
                yield path, method, op
