from typing import Any, Optional, Union

from pydantic import Field

from ..base import ObjectExtended
from .._types import Doc, URI
from .general import Reference


class Example(ObjectExtended):
    """
    An `Example Object`_ holds an example value, inline or by URL.

    .. _Example Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#example-object
    """

    summary: Optional[str] = Field(default=None)
    description: Optional[Doc] = Field(default=None)
    value: Optional[Any] = Field(default=None)
    externalValue: Optional[URI] = Field(default=None)


ExampleOrReference = Union[Example, Reference]
