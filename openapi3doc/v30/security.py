import enum
from typing import Union, Annotated, Literal, Optional, Dict, List, Any

from pydantic import Field, RootModel, model_validator

from ..base import ObjectExtended, freeze
from .._types import Doc, URI
from .general import Reference


class OAuthFlow(ObjectExtended):
    """
    Configuration details for a supported OAuth Flow

    The flow kind determines the urls which are required,
    see `Implicit`, `Password`, `ClientCredentials` and `AuthorizationCode`.

    .. here: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#oauth-flow-object
    """

    refreshUrl: Optional[URI] = Field(default=None)
    scopes: Dict[str, str] = Field(...)


class Implicit(OAuthFlow):
    authorizationUrl: URI = Field(...)


class Password(OAuthFlow):
    tokenUrl: URI = Field(...)


class ClientCredentials(OAuthFlow):
    tokenUrl: URI = Field(...)


class AuthorizationCode(OAuthFlow):
    authorizationUrl: URI = Field(...)
    tokenUrl: URI = Field(...)


class OAuthFlows(ObjectExtended):
    """
    Allows configuration of the supported OAuth Flows.

    .. here: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#oauth-flows-object
    """

    implicit: Optional[Implicit] = Field(default=None)
    password: Optional[Password] = Field(default=None)
    clientCredentials: Optional[ClientCredentials] = Field(default=None)
    authorizationCode: Optional[AuthorizationCode] = Field(default=None)


class ApiKeyLocation(str, enum.Enum):
    query = "query"
    header = "header"
    cookie = "cookie"


class SecuritySchemeBase(ObjectExtended):
    type: Literal["apiKey", "http", "oauth2", "openIdConnect"]
    description: Optional[Doc] = Field(default=None)


class ApiKey(SecuritySchemeBase):
    type: Literal["apiKey"] = "apiKey"
    name: str = Field(...)
    in_: ApiKeyLocation = Field(alias="in")


class Http(SecuritySchemeBase):
    type: Literal["http"] = "http"
    scheme_: str = Field(alias="scheme")
    bearerFormat: Optional[str] = Field(default=None)


class OAuth2(SecuritySchemeBase):
    type: Literal["oauth2"] = "oauth2"
    flows: OAuthFlows = Field(...)


class OpenIdConnect(SecuritySchemeBase):
    type: Literal["openIdConnect"] = "openIdConnect"
    openIdConnectUrl: URI = Field(...)


SecurityScheme = Annotated[Union[ApiKey, Http, OAuth2, OpenIdConnect], Field(discriminator="type")]
"""
A `Security Scheme`_ defines a security scheme that can be used by the operations.

.. _Security Scheme: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#security-scheme-object
"""

SecuritySchemeOrReference = Union[SecurityScheme, Reference]


class SecurityRequirement(RootModel[Dict[str, List[str]]]):
    """
    A `SecurityRequirement`_ object describes security schemes for API access.

    An empty requirement makes security optional.

    .. _SecurityRequirement: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#security-requirement-object
    """

    model_config = dict(frozen=True)

    @model_validator(mode="after")
    def validate_SecurityRequirement_frozen(self):
        self.__dict__["root"] = freeze(self.root)
        return self

    def __getitem__(self, item: str) -> List[str]:
        return self.root[item]

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
