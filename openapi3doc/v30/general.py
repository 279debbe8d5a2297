from typing import Optional

from pydantic import Field

from ..base import ObjectExtended, ObjectBase
from .._types import Doc, URI


class ExternalDocumentation(ObjectExtended):
    """
    An `External Documentation Object`_ references external resources for extended
    documentation.

    .. _External Documentation Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#external-documentation-object
    """

    url: URI = Field(...)
    description: Optional[Doc] = Field(default=None)


class Reference(ObjectBase):
    """
    A `Reference Object`_ designates a reference to another node in the specification.

    A Reference is valid in every position which accepts either an object or a reference.

    .. _Reference Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#reference-object
    """

    ref: str = Field(alias="$ref")

    model_config = dict(
        extra="ignore",  # """This object cannot be extended with additional properties and any properties added SHALL be ignored."""
    )


def is_reference(value) -> bool:
    """
    True if the value of an "or Reference" slot is a Reference which has to be followed
    """
    return isinstance(value, Reference)
