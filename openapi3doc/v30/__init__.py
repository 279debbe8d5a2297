from .components import Components
from .example import Example, ExampleOrReference
from .general import ExternalDocumentation, Reference, is_reference
from .info import Contact, License, Info
from .media import Encoding, MediaType
from .parameter import (
    Parameter,
    ParameterBase,
    Header,
    ParameterLocation,
    Style,
    ParameterOrReference,
    HeaderOrReference,
)
from .paths import (
    RequestBody,
    Link,
    Response,
    Responses,
    Operation,
    PathItem,
    Paths,
    Callback,
    RequestBodyOrReference,
    ResponseOrReference,
    LinkOrReference,
    CallbackOrReference,
)
from .root import Document
from .schemas import Discriminator, InstanceType, Schema, SchemaOrReference
from .security import (
    OAuthFlow,
    Implicit,
    Password,
    ClientCredentials,
    AuthorizationCode,
    OAuthFlows,
    ApiKeyLocation,
    SecuritySchemeBase,
    ApiKey,
    Http,
    OAuth2,
    OpenIdConnect,
    SecurityScheme,
    SecuritySchemeOrReference,
    SecurityRequirement,
)
from .servers import ServerVariable, Server
from .tag import Tag
from .xml import XML


def __init():
    r = dict()
    CLASSES = [
        Components,
        Example,
        ExternalDocumentation,
        Reference,
        Contact,
        License,
        Info,
        Encoding,
        MediaType,
        ParameterBase,
        Parameter,
        Header,
        RequestBody,
        Link,
        Response,
        Operation,
        PathItem,
        Callback,
        Discriminator,
        Schema,
        OAuthFlow,
        Implicit,
        Password,
        ClientCredentials,
        AuthorizationCode,
        OAuthFlows,
        ApiKey,
        Http,
        OAuth2,
        OpenIdConnect,
        SecurityRequirement,
        ServerVariable,
        Server,
        Tag,
        XML,
        Document,
    ]
    for i in CLASSES:
        r[i.__name__] = i
    for i in CLASSES:
        i.model_rebuild(_types_namespace=r)


__init()
