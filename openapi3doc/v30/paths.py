from typing import Union, Optional, Any, Dict, Iterator, List, Tuple

from pydantic import Field, model_validator, field_validator, RootModel

from ..base import ObjectExtended, HTTP_METHODS, freeze, strip_extensions
from .._types import Doc, URI, HTTPMethodType
from ..identifiers import Path
from .general import ExternalDocumentation
from .general import Reference
from .media import MediaType
from .parameter import Header, Parameter
from .servers import Server
from .security import SecurityRequirement


class RequestBody(ObjectExtended):
    """
    A `RequestBody`_ object describes a single request body.

    .. _RequestBody: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#request-body-object
    """

    content: Dict[str, MediaType] = Field(...)
    description: Optional[Doc] = Field(default=None)
    required: Optional[bool] = Field(default=None)


class Link(ObjectExtended):
    """
    A `Link Object`_ describes a single Link from an API Operation Response to an API Operation Request

    .. _Link Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#link-object
    """

    operationRef: Optional[URI] = Field(default=None)
    operationId: Optional[str] = Field(default=None)
    parameters: Optional[Dict[str, Any]] = Field(default=None)
    requestBody: Optional[Any] = Field(default=None)
    description: Optional[Doc] = Field(default=None)
    server: Optional[Server] = Field(default=None)

    @model_validator(mode="after")
    def validate_Link_operation(self) -> "Link":
        if self.operationId is not None and self.operationRef is not None:
            raise ValueError("operationId and operationRef are mutually exclusive, only one of them is allowed")
        return self


class Response(ObjectExtended):
    """
    A `Response Object`_ describes a single response from an API Operation,
    including design-time, static links to operations based on the response.

    .. _Response Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#response-object
    """

    description: Doc = Field(...)
    headers: Optional[Dict[str, Union[Header, Reference]]] = Field(default=None)
    content: Optional[Dict[str, MediaType]] = Field(default=None)
    links: Optional[Dict[str, Union[Link, Reference]]] = Field(default=None)


Responses = Dict[str, Union[Response, Reference]]
"""
HTTP status code ("200", "4XX") or "default" to the expected response
"""


def _responses(values):
    values = strip_extensions(values, "Responses")
    if isinstance(values, dict):
        values = {str(k): v for k, v in values.items()}
    return values


class Operation(ObjectExtended):
    """
    An Operation object as defined `here`_

    .. _here: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#operation-object
    """

    operationId: str = Field(...)
    responses: Responses = Field(...)
    tags: Optional[List[str]] = Field(default=None)
    summary: Optional[str] = Field(default=None)
    description: Optional[Doc] = Field(default=None)
    externalDocs: Optional[ExternalDocumentation] = Field(default=None)
    parameters: Optional[List[Union[Parameter, Reference]]] = Field(default=None)
    requestBody: Optional[Union[RequestBody, Reference]] = Field(default=None)
    callbacks: Optional[Dict[str, Union["Callback", Reference]]] = Field(default=None)
    deprecated: Optional[bool] = Field(default=None)
    security: Optional[List[SecurityRequirement]] = Field(default=None)
    servers: Optional[List[Server]] = Field(default=None)

    @field_validator("responses", mode="before")
    @classmethod
    def validate_Operation_responses(cls, values):
        return _responses(values)


class PathItem(ObjectExtended):
    """
    A Path Item, as defined `here`_.
    Describes the operations available on a single path.

    .. _here: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#path-item-object
    """

    ref: Optional[str] = Field(default=None, alias="$ref")
    summary: Optional[str] = Field(default=None)
    description: Optional[Doc] = Field(default=None)
    get: Optional[Operation] = Field(default=None)
    put: Optional[Operation] = Field(default=None)
    post: Optional[Operation] = Field(default=None)
    delete: Optional[Operation] = Field(default=None)
    options: Optional[Operation] = Field(default=None)
    head: Optional[Operation] = Field(default=None)
    patch: Optional[Operation] = Field(default=None)
    trace: Optional[Operation] = Field(default=None)
    servers: Optional[List[Server]] = Field(default=None)
    parameters: Optional[List[Union[Parameter, Reference]]] = Field(default=None)

    def operations(self) -> Iterator[Tuple[HTTPMethodType, Operation]]:
        """
        the operations defined, in declaration order of the Path Item fields
        """
        for name in type(self).model_fields.keys():
            if name in HTTP_METHODS and (op := getattr(self, name)) is not None:
                yield name, op


Paths = Dict[Path, PathItem]


def validate_Paths(values):
    return strip_extensions(values, "Paths")


class Callback(RootModel[Dict[str, PathItem]]):
    """
    A map of possible out-of band callbacks related to the parent operation.

    .. _here: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#callback-object

    This object MAY be extended with Specification Extensions.
    """

    model_config = dict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def validate_Callback(cls, values):
        return strip_extensions(values, "Callback")

    @model_validator(mode="after")
    def validate_Callback_frozen(self):
        self.__dict__["root"] = freeze(self.root)
        return self

    def __getitem__(self, item: str) -> PathItem:
        return self.root[item]

    def __iter__(self):
        return iter(self.root)

    def __len__(self):
        return len(self.root)

    def items(self):
        return self.root.items()

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


RequestBodyOrReference = Union[RequestBody, Reference]
ResponseOrReference = Union[Response, Reference]
LinkOrReference = Union[Link, Reference]
CallbackOrReference = Union[Callback, Reference]
