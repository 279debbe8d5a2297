from typing import Optional

from pydantic import Field

from ..base import ObjectExtended
from .._types import URI


class XML(ObjectExtended):
    """
    A metadata object that allows for more fine-tuned XML model definitions.

    .. _XML Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#xml-object
    """

    name: Optional[str] = Field(default=None)
    namespace: Optional[URI] = Field(default=None)
    prefix: Optional[str] = Field(default=None)
    attribute: Optional[bool] = Field(default=None)
    wrapped: Optional[bool] = Field(default=None)
