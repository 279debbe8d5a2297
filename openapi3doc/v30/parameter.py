import enum
import typing
from typing import Union, Optional, Dict, Any

from pydantic import Field, model_validator

from ..base import ObjectExtended
from .._types import Doc
from ..identifiers import Key

from .example import Example
from .general import Reference
from .schemas import Schema

if typing.TYPE_CHECKING:
    from .media import MediaType


class ParameterLocation(str, enum.Enum):
    query = "query"
    header = "header"
    path = "path"
    cookie = "cookie"


class Style(str, enum.Enum):
    """
    .. _Style Values: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#style-values
    """

    matrix = "matrix"
    label = "label"
    simple = "simple"
    form = "form"
    spaceDelimited = "spaceDelimited"
    pipeDelimited = "pipeDelimited"
    deepObject = "deepObject"


class ParameterBase(ObjectExtended):
    """
    The fields shared by the `Parameter Object`_ and the `Header Object`_.

    example and examples are mutually exclusive.

    .. _Parameter Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#parameter-object
    .. _Header Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#header-object
    """

    description: Optional[Doc] = Field(default=None)
    required: Optional[bool] = Field(default=None)
    deprecated: Optional[bool] = Field(default=None)
    allowEmptyValue: Optional[bool] = Field(default=None)

    style: Optional[Style] = Field(default=None)
    explode: Optional[bool] = Field(default=None)
    allowReserved: Optional[bool] = Field(default=None)
    schema_: Optional[Union[Schema, Reference]] = Field(default=None, alias="schema")
    example: Optional[Any] = Field(default=None)
    examples: Optional[Dict[Key, Union[Example, Reference]]] = Field(default=None)

    content: Optional[Dict[str, "MediaType"]] = Field(default=None)

    @model_validator(mode="after")
    def validate_ParameterBase_example(self):
        if "example" in self.model_fields_set and self.examples is not None:
            raise ValueError("example and examples are mutually exclusive")
        return self


class Parameter(ParameterBase):
    """
    A `Parameter Object`_ defines a single operation parameter.

    A path parameter is not required to be marked as required.

    .. _Parameter Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#parameter-object
    """

    name: str = Field(...)
    in_: ParameterLocation = Field(alias="in")


class Header(ParameterBase):
    """

    .. _HeaderObject: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#header-object
    """

    pass


ParameterOrReference = Union[Parameter, Reference]
HeaderOrReference = Union[Header, Reference]
