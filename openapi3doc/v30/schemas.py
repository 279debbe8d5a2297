import enum
from typing import Annotated, Union, List, Any, Optional, Dict

from pydantic import Field

from ..base import ObjectExtended
from .._types import Doc
from .general import Reference, ExternalDocumentation
from .xml import XML


class InstanceType(str, enum.Enum):
    object = "object"
    array = "array"
    string = "string"
    number = "number"
    boolean = "boolean"
    null = "null"


class Discriminator(ObjectExtended):
    """

    .. here: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#discriminator-object
    """

    propertyName: str = Field(...)
    mapping: Optional[Dict[str, str]] = Field(default=None)


Number = Union[int, float]


class Schema(ObjectExtended):
    """
    The `Schema Object`_ allows the definition of input and output data types.

    items, properties and additionalProperties are only meaningful for array/object types,
    they are accepted for any type.

    .. _Schema Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#schema-object
    """

    type: InstanceType = Field(...)
    title: Optional[str] = Field(default=None)
    multipleOf: Optional[Number] = Field(default=None)
    maximum: Optional[Number] = Field(default=None)
    exclusiveMaximum: Optional[bool] = Field(default=None)
    minimum: Optional[Number] = Field(default=None)
    exclusiveMinimum: Optional[bool] = Field(default=None)
    maxLength: Optional[int] = Field(default=None)
    minLength: Optional[int] = Field(default=None)
    pattern: Optional[str] = Field(default=None)
    maxItems: Optional[int] = Field(default=None)
    minItems: Optional[int] = Field(default=None)
    uniqueItems: Optional[bool] = Field(default=None)
    maxProperties: Optional[int] = Field(default=None)
    minProperties: Optional[int] = Field(default=None)
    required: Optional[List[str]] = Field(default=None)
    enum: Optional[List[Any]] = Field(default=None)

    allOf: Optional[Annotated[List[Union["Schema", Reference]], Field(min_length=1)]] = Field(default=None)
    oneOf: Optional[Annotated[List[Union["Schema", Reference]], Field(min_length=1)]] = Field(default=None)
    anyOf: Optional[Annotated[List[Union["Schema", Reference]], Field(min_length=1)]] = Field(default=None)
    not_: Optional[Union["Schema", Reference]] = Field(default=None, alias="not")
    items: Optional[Union["Schema", Reference]] = Field(default=None)
    properties: Optional[Dict[str, Union["Schema", Reference]]] = Field(default=None)
    additionalProperties: Optional[Union[bool, "Schema", Reference]] = Field(default=None)
    description: Optional[Doc] = Field(default=None)
    format: Optional[str] = Field(default=None)
    default: Optional[Any] = Field(default=None)
    nullable: Optional[bool] = Field(default=None)
    discriminator: Optional[Discriminator] = Field(default=None)
    readOnly: Optional[bool] = Field(default=None)
    writeOnly: Optional[bool] = Field(default=None)
    xml: Optional[XML] = Field(default=None)
    externalDocs: Optional[ExternalDocumentation] = Field(default=None)
    example: Optional[Any] = Field(default=None)
    deprecated: Optional[bool] = Field(default=None)


SchemaOrReference = Union[Schema, Reference]
