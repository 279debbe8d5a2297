from typing import Dict, Optional, Union

from pydantic import Field

from ..base import ObjectExtended
from ..identifiers import Key

from .example import Example
from .paths import RequestBody, Link, Response, Callback
from .general import Reference
from .parameter import Header, Parameter
from .schemas import Schema
from .security import SecurityScheme


class Components(ObjectExtended):
    """
    A `Components Object`_ holds a reusable set of different aspects of the OAS
    spec.

    .. _Components Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#components-object
    """

    schemas: Optional[Dict[Key, Union[Schema, Reference]]] = Field(default=None)
    responses: Optional[Dict[Key, Union[Response, Reference]]] = Field(default=None)
    parameters: Optional[Dict[Key, Union[Parameter, Reference]]] = Field(default=None)
    examples: Optional[Dict[Key, Union[Example, Reference]]] = Field(default=None)
    requestBodies: Optional[Dict[Key, Union[RequestBody, Reference]]] = Field(default=None)
    headers: Optional[Dict[Key, Union[Header, Reference]]] = Field(default=None)
    securitySchemes: Optional[Dict[Key, Union[SecurityScheme, Reference]]] = Field(default=None)
    links: Optional[Dict[Key, Union[Link, Reference]]] = Field(default=None)
    callbacks: Optional[Dict[Key, Union[Callback, Reference]]] = Field(default=None)
