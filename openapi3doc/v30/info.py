from typing import Optional

from pydantic import Field

from ..base import ObjectExtended
from .._types import Doc, URI


class Contact(ObjectExtended):
    """
    Contact object belonging to an Info object, as described `here`_

    .. _here: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#contact-object
    """

    name: Optional[str] = Field(default=None)
    url: Optional[URI] = Field(default=None)
    email: Optional[str] = Field(default=None)


class License(ObjectExtended):
    """
    License object belonging to an Info object, as described `here`_

    .. _here: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#license-object
    """

    name: str = Field(...)
    url: Optional[URI] = Field(default=None)


class Info(ObjectExtended):
    """
    An OpenAPI Info object, as defined in `the spec`_.

    .. _the spec: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#info-object
    """

    title: str = Field(...)
    version: str = Field(...)
    description: Optional[Doc] = Field(default=None)
    termsOfService: Optional[URI] = Field(default=None)
    contact: Optional[Contact] = Field(default=None)
    license: Optional[License] = Field(default=None)
