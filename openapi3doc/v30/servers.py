from typing import Annotated, Dict, List, Optional
import re

from pydantic import Field

from ..base import ObjectExtended
from .._types import Doc, URI


class ServerVariable(ObjectExtended):
    """
    A ServerVariable object as defined `here`_.

    .. _here: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#server-variable-object
    """

    default: str = Field(...)
    enum: Optional[Annotated[List[str], Field(min_length=1)]] = Field(default=None)
    description: Optional[Doc] = Field(default=None)


class Server(ObjectExtended):
    """
    The Server object, as described `here`_

    .. _here: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#server-object
    """

    url: URI = Field(...)
    description: Optional[Doc] = Field(default=None)
    variables: Optional[Dict[str, ServerVariable]] = Field(default=None)

    def validate_parameter_enum(self, parameters: Dict[str, str]):
        for name, value in parameters.items():
            if (v := (self.variables or {}).get(name)) and v.enum is not None:
                if value not in v.enum:
                    raise ValueError(f"Server Variable {name} value {value} not allowed ({v.enum})")

    def url_for(self, variables: Optional[Dict[str, str]] = None) -> str:
        """
        substitute the server variables in the url

        :param variables: values overriding the defaults of the server variables
        :return: the url
        """
        variables = variables or dict()
        self.validate_parameter_enum(variables)
        values: Dict[str, str] = dict(map(lambda x: (x[0], x[1].default), (self.variables or {}).items()))
        values.update(variables)

        def replace(m: re.Match) -> str:
            if (name := m.group(1)) not in values:
                raise ValueError(f"Missing Server Variable {name} in {self.url}")
            return values[name]

        return re.sub(r"\{([^\}]+)\}", replace, self.url)
